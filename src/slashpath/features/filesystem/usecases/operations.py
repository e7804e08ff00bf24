"""
Summary: Existence checks, search, directory creation and text writes over PathValues.
Why: Render paths once and hand them to the host gateway with consistent logging.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from typing import Any, Final, final

from slashpath.config import settings
from slashpath.features.path import (
    PathNotFoundError,
    PathValue,
    build_path,
    parse_path,
    path_to_string,
)
from slashpath.platform.logging import logger

from ..adapters.local import LocalFileSystemGateway
from .ports import FileSystemGateway

_LOCAL_GATEWAY: Final[FileSystemGateway] = LocalFileSystemGateway()


@final
class NotFound:
    """Falsy result returned by ``search`` when no candidate matches."""

    _instance: "NotFound | None" = None

    def __new__(cls) -> "NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND: Final[NotFound] = NotFound()


def as_path(value: Any) -> PathValue:
    """Coerce a PathValue-like input into a PathValue.

    Strings and ``os.PathLike`` objects are parsed on the separator, lists and
    tuples go through ``build_path``, and PathValues pass through unchanged.
    """
    if isinstance(value, PathValue):
        return value
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    if isinstance(value, str):
        return parse_path(value)
    if isinstance(value, (list, tuple)):
        return build_path(value)
    return build_path([value])


def _log(level: int, event: str, message: str, *args: object, **extra: object) -> None:
    logger.log(level, message, *args, extra={"fs_event": event, **extra})


def path_exists(path: Any, *, gateway: FileSystemGateway | None = None) -> bool:
    """Return whether ``path`` exists on the host.

    Host access errors are reported as ``False`` rather than raised.
    """
    text = path_to_string(as_path(path))
    try:
        exists = (gateway or _LOCAL_GATEWAY).exists(text)
    except (OSError, ValueError) as exc:
        _log(logging.DEBUG, "fs.exists", "Existence check failed for %s: %s", text, exc,
             path=text, exists=False, error_message=str(exc))
        return False
    _log(logging.DEBUG, "fs.exists", "Exists %s -> %s", text, exists, path=text, exists=exists)
    return exists


def search(
    candidates: Iterable[Any],
    target: Any,
    *,
    gateway: FileSystemGateway | None = None,
) -> PathValue | NotFound:
    """Return the first ``candidate / target`` that exists.

    Args:
        candidates: Directories to probe, in priority order.
        target: Relative path looked up under each candidate.
        gateway: Host filesystem; defaults to the local one.

    Returns:
        PathValue | NotFound: The joined path of the first hit, or ``NOT_FOUND``.
    """
    target_path = as_path(target)
    probed = 0
    for candidate in candidates:
        probed += 1
        joined = build_path([as_path(candidate), target_path])
        if path_exists(joined, gateway=gateway):
            _log(logging.DEBUG, "fs.search.hit", "Found %s", joined, path=str(joined), candidates=probed)
            return joined

    _log(logging.DEBUG, "fs.search.miss", "%s not found in %d candidate(s)", target_path, probed,
         path=str(target_path), candidates=probed)
    return NOT_FOUND


def search_or_raise(
    candidates: Iterable[Any],
    target: Any,
    *,
    gateway: FileSystemGateway | None = None,
) -> PathValue:
    """Like ``search`` but raise ``PathNotFoundError`` on a miss."""

    candidate_list = list(candidates)
    result = search(candidate_list, target, gateway=gateway)
    if isinstance(result, NotFound):
        raise PathNotFoundError(target, candidate_list)
    return result


def make_directory(
    path: Any,
    create_parents: bool | None = None,
    *,
    gateway: FileSystemGateway | None = None,
) -> PathValue:
    """Create the directory at ``path``.

    Args:
        path: Directory to create.
        create_parents: Create missing parents and accept an existing
            directory. Defaults to the configured ``create_parents``.
        gateway: Host filesystem; defaults to the local one.

    Returns:
        PathValue: The directory that was created.

    Raises:
        OSError: Propagated unchanged from the host.
    """
    directory = as_path(path)
    parents = settings.CREATE_PARENTS_DEFAULT if create_parents is None else create_parents
    text = path_to_string(directory)
    try:
        (gateway or _LOCAL_GATEWAY).make_directory(text, parents=parents)
    except OSError as exc:
        _log(logging.ERROR, "fs.error", "Failed to create directory %s: %s", text, exc,
             path=text, error_message=str(exc))
        raise
    _log(logging.DEBUG, "fs.mkdir", "Created directory %s", text, path=text)
    return directory


def write_text_file(
    path: Any,
    text: str,
    *,
    encoding: str | None = None,
    gateway: FileSystemGateway | None = None,
) -> PathValue:
    """Write ``text`` to ``path``, truncating any existing content.

    The file handle is released before returning, on success and on error.

    Raises:
        OSError: Propagated unchanged from the host.
        UnicodeEncodeError: If ``text`` cannot be encoded; propagated unchanged.
    """
    destination = as_path(path)
    target = path_to_string(destination)
    try:
        written = (gateway or _LOCAL_GATEWAY).write_text(
            target, text, encoding=encoding or settings.TEXT_ENCODING
        )
    except (OSError, ValueError) as exc:
        _log(logging.ERROR, "fs.error", "Failed to write %s: %s", target, exc,
             path=target, error_message=str(exc))
        raise
    _log(logging.DEBUG, "fs.write", "Wrote %d chars to %s", written, target, path=target, chars=written)
    return destination


__all__ = [
    "NOT_FOUND",
    "NotFound",
    "as_path",
    "make_directory",
    "path_exists",
    "search",
    "search_or_raise",
    "write_text_file",
]
