"""Shared path component value objects (domain <-> adapters).

Where: shared/.
What: Closed set of component variants plus the input markers callers pass in.
Why: Keep the component contract in one place so the builder, renderer and
filesystem layers agree on what a path is made of.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, TypeAlias

__all__ = [
    "ANCHOR",
    "ANCHOR_TEXT",
    "Anchor",
    "InputMarker",
    "PARENT_REF_TEXT",
    "ParentRef",
    "PathComponent",
    "RELATIVE_ANCHOR",
    "RELATIVE_ROOT",
    "RELATIVE_ROOT_TEXT",
    "RelativeRoot",
    "SEPARATOR",
    "Segment",
]

SEPARATOR: Final[str] = "/"
ANCHOR_TEXT: Final[str] = "/"
RELATIVE_ROOT_TEXT: Final[str] = "."
PARENT_REF_TEXT: Final[str] = ".."


class InputMarker(Enum):
    """Marker tokens accepted by the builder alongside plain strings."""

    ANCHOR = "anchor"
    RELATIVE_ROOT = "relative-root"
    RELATIVE_ANCHOR = "relative-anchor"


ANCHOR: Final = InputMarker.ANCHOR
RELATIVE_ROOT: Final = InputMarker.RELATIVE_ROOT
# Only meaningful as builder input; never stored in a path.
RELATIVE_ANCHOR: Final = InputMarker.RELATIVE_ANCHOR


@dataclass(frozen=True, slots=True)
class Anchor:
    """Root marker of an absolute path."""

    def render(self) -> str:
        return ANCHOR_TEXT


@dataclass(frozen=True, slots=True)
class RelativeRoot:
    """The current directory; only valid as the sole component of a path."""

    def render(self) -> str:
        return RELATIVE_ROOT_TEXT


@dataclass(frozen=True, slots=True)
class ParentRef:
    """Reference to the parent directory. Stored as-is, never resolved."""

    def render(self) -> str:
        return PARENT_REF_TEXT


@dataclass(frozen=True, slots=True)
class Segment:
    """Ordinary named path element."""

    name: str

    def render(self) -> str:
        return self.name


PathComponent: TypeAlias = Anchor | RelativeRoot | ParentRef | Segment
