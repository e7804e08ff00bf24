"""
Summary: Immutable PathValue plus rendering, predicates and the parent operation.
Why: Give every layer one validated, hashable representation of a path.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from slashpath.shared.path_components import (
    ANCHOR_TEXT,
    SEPARATOR,
    Anchor,
    PathComponent,
    RelativeRoot,
    Segment,
)

from .classifier import COMPONENT_TYPES, validate_segment_name
from .errors import ExpectedPathError, InvalidComponentError, MisplacedAnchorError


@dataclass(frozen=True, slots=True)
class PathValue:
    """Non-empty ordered sequence of path components.

    A leading ``Anchor`` makes the path absolute. ``RelativeRoot`` is only
    allowed as the sole component. Instances are normally produced by
    ``build_path`` rather than constructed directly.
    """

    components: tuple[PathComponent, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.components, tuple):
            object.__setattr__(self, "components", tuple(self.components))
        if not self.components:
            raise ExpectedPathError(self.components)
        for position, component in enumerate(self.components):
            if not isinstance(component, COMPONENT_TYPES):
                raise InvalidComponentError(component, "not a path component variant")
            if isinstance(component, Segment):
                _ = validate_segment_name(component.name)
            if isinstance(component, Anchor) and position != 0:
                raise MisplacedAnchorError(position)
            if isinstance(component, RelativeRoot) and len(self.components) != 1:
                raise InvalidComponentError(
                    component, "relative root must be the only component"
                )

    @property
    def is_absolute(self) -> bool:
        return isinstance(self.components[0], Anchor)

    @property
    def parts(self) -> tuple[str, ...]:
        """Rendered form of each component, in order."""
        return tuple(component.render() for component in self.components)

    @property
    def name(self) -> str:
        """Rendered last component."""
        return self.components[-1].render()

    @property
    def parent(self) -> PathValue:
        return parent_of(self)

    def __truediv__(self, other: object) -> PathValue:
        from slashpath.features.path.usecases.builder import build_path

        return build_path([self, other])

    def __str__(self) -> str:
        return path_to_string(self)

    def __fspath__(self) -> str:
        return path_to_string(self)

    def __repr__(self) -> str:
        return f"PathValue({path_to_string(self)!r})"


ROOT: Final[PathValue] = PathValue((Anchor(),))
RELATIVE_ROOT_PATH: Final[PathValue] = PathValue((RelativeRoot(),))


def path_to_string(path: PathValue) -> str:
    """Render ``path`` as a slash-delimited string.

    Absolute paths render as ``"/"`` followed by the remaining components, so
    the root alone renders as exactly ``"/"``.
    """
    if path.is_absolute:
        return ANCHOR_TEXT + SEPARATOR.join(path.parts[1:])
    return SEPARATOR.join(path.parts)


def is_root(path: PathValue) -> bool:
    return len(path.components) == 1 and isinstance(path.components[0], Anchor)


def is_relative_root(path: PathValue) -> bool:
    return len(path.components) == 1 and isinstance(path.components[0], RelativeRoot)


def parent_of(path: PathValue) -> PathValue:
    """Return the containing directory of ``path``.

    Purely structural: the root and the relative root are their own parents,
    a lone segment steps up to the relative root, and anything longer drops
    its last component. A trailing ``..`` is dropped like any other component
    rather than resolved.
    """
    if is_root(path) or is_relative_root(path):
        return path
    if len(path.components) == 1:
        return RELATIVE_ROOT_PATH
    return PathValue(path.components[:-1])


__all__ = [
    "PathValue",
    "RELATIVE_ROOT_PATH",
    "ROOT",
    "is_relative_root",
    "is_root",
    "parent_of",
    "path_to_string",
]
