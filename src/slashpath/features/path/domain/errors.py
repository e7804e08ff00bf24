"""
Summary: Exception hierarchy raised while building and searching paths.
Why: Let callers catch path construction failures separately from host I/O errors.
"""

from __future__ import annotations

from collections.abc import Sequence


class PathError(ValueError):
    """Base class for all path construction and lookup failures."""


class InvalidComponentError(PathError):
    """Raised when a raw builder input cannot be used as a path component."""

    def __init__(self, component: object, reason: str | None = None) -> None:
        message = f"Invalid path component: {component!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.component: object = component


class MisplacedAnchorError(PathError):
    """Raised when the anchor marker shows up after the leading position."""

    def __init__(self, position: int) -> None:
        super().__init__(
            f"Anchor marker is only allowed as the first component, found at position {position}"
        )
        self.position: int = position


class ExpectedPathError(PathError):
    """Raised when an append is attempted against something that is not a path."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Expected a PathValue, got {type(value).__name__}: {value!r}")
        self.value: object = value


class PathNotFoundError(PathError):
    """Raised by the strict search helper when no candidate holds the target."""

    def __init__(self, target: object, candidates: Sequence[object]) -> None:
        super().__init__(
            f"{target!r} not found in any of {len(candidates)} candidate location(s)"
        )
        self.target: object = target
        self.candidates: tuple[object, ...] = tuple(candidates)


__all__ = [
    "ExpectedPathError",
    "InvalidComponentError",
    "MisplacedAnchorError",
    "PathError",
    "PathNotFoundError",
]
