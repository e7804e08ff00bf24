"""Filesystem adapter backed by the local host."""

from __future__ import annotations

from pathlib import Path

from ..usecases.ports import FileSystemGateway


class LocalFileSystemGateway(FileSystemGateway):
    """Thin wrapper around the local filesystem."""

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def make_directory(self, path: str, *, parents: bool) -> None:
        Path(path).mkdir(parents=parents, exist_ok=parents)

    def write_text(self, path: str, text: str, *, encoding: str) -> int:
        with open(path, "w", encoding=encoding) as handle:
            return handle.write(text)


__all__ = ["LocalFileSystemGateway"]
