"""Configuration management for slashpath."""

import json
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from slashpath.config.paths import default_config_path
from slashpath.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Library configuration."""

    # Encoding used by write_text_file
    text_encoding: str = "utf-8"

    # Default for make_directory(create_parents=...)
    create_parents: bool = True

    # Optional log file; console logging only when unset
    log_file: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to ``target`` (defaults to the portable config path).

        Returns:
            Path: The file that was written.
        """
        from slashpath.features.filesystem import make_directory, write_text_file

        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target if target is not None else default_config_path()
        try:
            content = self._render_toml(config_dict)
            _ = make_directory(destination.parent, create_parents=True)
            _ = write_text_file(destination, content, encoding="utf-8")
            logger.info("Configuration saved to %s", destination)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# slashpath configuration file")
        lines.append("")

        lines.append("# Encoding used when writing text files")
        lines.append(f"text_encoding = {self._format_toml_value(config['text_encoding'])}")
        lines.append("")

        lines.append("# Create missing parent directories by default in make_directory")
        lines.append(f"create_parents = {self._format_toml_value(config['create_parents'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/slashpath.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            # JSON escapes are valid TOML basic-string escapes; TOML also bans a raw DEL.
            return json.dumps(str(value), ensure_ascii=False).replace("\x7f", "\\u007f")
        return str(value)

    @classmethod
    def load(cls, source: Path | None = None) -> "Config":
        """Load configuration from ``source`` or the portable config path.

        A missing file yields the defaults; nothing is written on load.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None and source is None:
            return cls._instance

        config_file = source if source is not None else default_config_path()

        try:
            if not config_file.exists():
                logger.debug("No configuration at %s, using defaults", config_file)
                instance = cls()
            else:
                with open(config_file, "rb") as handle:
                    config_dict = tomllib.load(handle)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                config_dict = {key: value for key, value in config_dict.items() if key in known}

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)
        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        if source is None:
            cls._instance = instance
            cls._loaded_from = config_file
        return instance


config = Config.load()
