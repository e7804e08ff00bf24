# Where: slashpath.shared.__init__
# What: Provide a concise import surface for the shared component types.
# Why: Encourage consistent reuse of component variants across features.

"""Shared cross-cutting value objects exposed at the package level."""

from .path_components import (
    ANCHOR,
    RELATIVE_ANCHOR,
    RELATIVE_ROOT,
    SEPARATOR,
    Anchor,
    InputMarker,
    ParentRef,
    PathComponent,
    RelativeRoot,
    Segment,
)

__all__ = [
    "ANCHOR",
    "RELATIVE_ANCHOR",
    "RELATIVE_ROOT",
    "SEPARATOR",
    "Anchor",
    "InputMarker",
    "ParentRef",
    "PathComponent",
    "RelativeRoot",
    "Segment",
]
