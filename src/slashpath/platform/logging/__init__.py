"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the package logger, setup helper and custom Rich handler.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import PathRichHandler

__all__ = [
    "LOGGER_NAME",
    "PathRichHandler",
    "logger",
    "setup_logger",
]
