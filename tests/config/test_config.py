"""Test configuration management."""

import tomllib
from pathlib import Path

import pytest

from slashpath.config.config import Config
from slashpath.config.paths import default_config_path


def test_load_without_file_uses_defaults(fresh_config: Path) -> None:
    """A missing config file yields defaults and is not created."""
    config = Config.load()

    assert config.text_encoding == "utf-8"
    assert config.create_parents is True
    assert config.log_file is None
    assert not default_config_path().exists()


def test_save_load_toml(fresh_config: Path) -> None:
    """Saving writes TOML that loads back into equal values."""
    original = Config(
        text_encoding="latin-1",
        create_parents=False,
        log_file=Path("/test/logs/slashpath.log"),
    )
    written = original.save()

    assert written == fresh_config / "config" / "slashpath.toml"
    loaded = Config.load()
    assert loaded.text_encoding == "latin-1"
    assert loaded.create_parents is False
    assert loaded.log_file == Path("/test/logs/slashpath.log")


def test_save_omits_unset_log_file(fresh_config: Path) -> None:
    _ = Config().save()

    content = default_config_path().read_text(encoding="utf-8")
    assert "# slashpath configuration file" in content
    assert not any(line.startswith("log_file") for line in content.splitlines())
    assert 'text_encoding = "utf-8"' in content
    assert "create_parents = true" in content


def test_singleton_behavior(fresh_config: Path) -> None:
    config1 = Config.load()
    config2 = Config.load()
    assert config2 is config1


def test_explicit_source_bypasses_singleton(fresh_config: Path) -> None:
    source = fresh_config / "custom.toml"
    _ = source.write_text('text_encoding = "ascii"\n', encoding="utf-8")

    loaded = Config.load(source)

    assert loaded.text_encoding == "ascii"
    assert Config.load() is not loaded


def test_unknown_keys_are_ignored(
    fresh_config: Path, caplog: pytest.LogCaptureFixture
) -> None:
    source = fresh_config / "extra.toml"
    _ = source.write_text('bogus = 1\ncreate_parents = false\n', encoding="utf-8")

    loaded = Config.load(source)

    assert loaded.create_parents is False
    assert any("bogus" in message for message in caplog.messages)


def test_empty_log_file_string_becomes_none() -> None:
    assert Config(log_file="").log_file is None  # pyright: ignore[reportArgumentType]
    assert Config(log_file="/x.log").log_file == Path("/x.log")  # pyright: ignore[reportArgumentType]


def test_invalid_toml_raises(fresh_config: Path) -> None:
    source = fresh_config / "broken.toml"
    _ = source.write_text("text_encoding = \n", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load(source)


@pytest.mark.parametrize(
    "log_file",
    [
        Path('/tmp/we"ird'),
        Path("/tmp/back\\slash/app.log"),
        Path("/tmp/tab\there/ünïcode.log"),
    ],
)
def test_save_escapes_string_values(fresh_config: Path, log_file: Path) -> None:
    """Quotes, backslashes and control characters survive a save/load cycle."""

    _ = Config(log_file=log_file).save()

    loaded = Config.load()
    assert loaded.log_file == log_file
