"""tests/test_package_exports.py
What: Validate the top-level package exposes the public path API.
Why: Prevent regressions when reorganising feature packages.
"""

from importlib import import_module


def test_top_level_exports() -> None:
    """Callers should reach every operation from ``slashpath`` directly."""

    package = import_module("slashpath")

    expected_names = {
        "ANCHOR",
        "RELATIVE_ANCHOR",
        "RELATIVE_ROOT",
        "NOT_FOUND",
        "PathValue",
        "build_path",
        "path_to_string",
        "parent_of",
        "is_root",
        "is_relative_root",
        "path_exists",
        "search",
        "make_directory",
        "write_text_file",
        "InvalidComponentError",
        "MisplacedAnchorError",
        "ExpectedPathError",
    }

    for name in expected_names:
        assert hasattr(package, name), f"Missing export: {name}"
    assert set(package.__all__) >= expected_names
