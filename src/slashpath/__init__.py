# Where: slashpath.__init__
# What: Public API of the library.
# Why: Let callers import everything they need from one place.

"""Immutable slash-delimited path values and thin filesystem helpers."""

from slashpath.features.filesystem import (
    NOT_FOUND,
    NotFound,
    make_directory,
    path_exists,
    search,
    search_or_raise,
    write_text_file,
)
from slashpath.features.path import (
    ExpectedPathError,
    InvalidComponentError,
    MisplacedAnchorError,
    PathError,
    PathNotFoundError,
    PathValue,
    build_path,
    is_relative_root,
    is_root,
    is_valid_component,
    join_paths,
    parent_of,
    parse_path,
    path_to_string,
)
from slashpath.shared import ANCHOR, RELATIVE_ANCHOR, RELATIVE_ROOT

__all__ = [
    "ANCHOR",
    "ExpectedPathError",
    "InvalidComponentError",
    "MisplacedAnchorError",
    "NOT_FOUND",
    "NotFound",
    "PathError",
    "PathNotFoundError",
    "PathValue",
    "RELATIVE_ANCHOR",
    "RELATIVE_ROOT",
    "build_path",
    "is_relative_root",
    "is_root",
    "is_valid_component",
    "join_paths",
    "make_directory",
    "parent_of",
    "parse_path",
    "path_exists",
    "path_to_string",
    "search",
    "search_or_raise",
    "write_text_file",
]
