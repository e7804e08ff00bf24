"""Rich console handler used by the slashpath logger.

Where: platform/logging/handlers.py
What: Render filesystem events with icons and compact, styled paths.
Why: Keep formatting concerns out of the logger bootstrap.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

from slashpath.shared.path_components import ANCHOR_TEXT, SEPARATOR


class PathRichHandler(RichHandler):
    """Rich handler that renders filesystem events with styled paths."""

    _FS_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "fs.exists": ("🔎", "blue", "Exists?"),
        "fs.search.hit": ("✅", "green", "Found"),
        "fs.search.miss": ("↪️", "yellow", "Not found"),
        "fs.mkdir": ("📁", "cyan", "Created directory"),
        "fs.write": ("📝", "magenta", "Wrote"),
        "fs.error": ("⛔", "red", "Failed"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format a path with colored separators, truncating long paths.

        Args:
            path: Slash-delimited path string.

        Returns:
            Text: Styled path with an ellipsis in place of dropped leading segments.
        """
        absolute = path.startswith(ANCHOR_TEXT)
        body_parts = [part for part in path.split(SEPARATOR) if part]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display_string = ANCHOR_TEXT if absolute else ""
        if truncated:
            display_string += "…" + SEPARATOR
        display_string += SEPARATOR.join(body_parts)
        return self._style_path_string(display_string or ".")

    @staticmethod
    def _style_path_string(path_string: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        for char in path_string:
            if char == SEPARATOR or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_fs_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured filesystem events with dedicated styling."""

        event = getattr(record, "fs_event", None)
        if not isinstance(event, str):
            return None

        icon, color, label = self._FS_STYLES.get(event, ("ℹ️", "blue", event))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(f"{label} ")

        path = getattr(record, "path", None)
        if path is not None:
            _ = body.append_text(self._format_path(str(path)))

        details: list[str] = []
        exists = getattr(record, "exists", None)
        if isinstance(exists, bool):
            details.append("yes" if exists else "no")
        chars = getattr(record, "chars", None)
        if isinstance(chars, int):
            details.append(f"{chars} chars")
        candidates = getattr(record, "candidates", None)
        if isinstance(candidates, int):
            details.append(f"candidates={candidates}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for filesystem events."""

        fs_text = self._render_fs_message(record)
        if fs_text is not None:
            return fs_text
        return super().render_message(record, message)


__all__ = ["PathRichHandler"]
