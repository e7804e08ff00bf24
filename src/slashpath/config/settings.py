"""Where: src/slashpath/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple checks for speed.
"""

from __future__ import annotations

import codecs
from pathlib import Path

from slashpath.config.config import config as app_config
from slashpath.platform.logging import logger, setup_logger

TEXT_ENCODING_DEFAULT: str = "utf-8"


def _validated_encoding(name: object) -> str:
    if not isinstance(name, str) or not name.strip():
        return TEXT_ENCODING_DEFAULT
    try:
        return codecs.lookup(name.strip()).name
    except LookupError:
        logger.warning("Unknown text encoding %r in configuration, using %s", name, TEXT_ENCODING_DEFAULT)
        return TEXT_ENCODING_DEFAULT


# Encoding used by write_text_file.
TEXT_ENCODING: str = _validated_encoding(getattr(app_config, "text_encoding", None))

# Default for make_directory(create_parents=...).
CREATE_PARENTS_DEFAULT: bool = bool(getattr(app_config, "create_parents", True))

LOG_FILE: Path | None = app_config.log_file

if LOG_FILE is not None:
    _ = setup_logger(log_file=LOG_FILE)


__all__ = [
    "CREATE_PARENTS_DEFAULT",
    "LOG_FILE",
    "TEXT_ENCODING",
    "TEXT_ENCODING_DEFAULT",
]
