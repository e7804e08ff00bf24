"""
Summary: Port describing the host filesystem calls the collaborators need.
Why: Keep host I/O in adapters so the operations can be tested with fakes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystemGateway(Protocol):
    """Abstract host filesystem operations, addressed by rendered path strings."""

    def exists(self, path: str) -> bool:
        """Return True if the path exists."""
        ...

    def make_directory(self, path: str, *, parents: bool) -> None:
        """Create ``path``; with ``parents`` behave like ``mkdir -p``."""
        ...

    def write_text(self, path: str, text: str, *, encoding: str) -> int:
        """Truncate ``path`` and write ``text``; return the number of characters written."""
        ...


__all__ = ["FileSystemGateway"]
