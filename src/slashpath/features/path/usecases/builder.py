"""
Summary: Fold heterogeneous inputs (strings, markers, paths, lists) into one PathValue.
Why: Let callers compose paths from mixed sources without string concatenation.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from slashpath.features.path.domain.classifier import classify_component
from slashpath.features.path.domain.errors import ExpectedPathError, MisplacedAnchorError
from slashpath.features.path.domain.path_value import (
    RELATIVE_ROOT_PATH,
    ROOT,
    PathValue,
    is_relative_root,
)
from slashpath.shared.path_components import (
    ANCHOR,
    ANCHOR_TEXT,
    RELATIVE_ANCHOR,
    Anchor,
    RelativeRoot,
)


def _is_relative_anchor(value: object) -> bool:
    return value is RELATIVE_ANCHOR or (isinstance(value, str) and value == ANCHOR_TEXT)


def _is_raw_list(value: object) -> bool:
    return isinstance(value, (list, tuple))


def build_path(inputs: Sequence[Any]) -> PathValue:
    """Build a normalized PathValue from a sequence of raw inputs.

    The first input decides the starting point: an existing PathValue is used
    verbatim, the relative anchor (``"/"``) starts an absolute path, a nested
    list is built recursively and anything else is classified as a single
    component. Remaining inputs are appended left to right.

    Args:
        inputs: Strings, markers, PathValues or nested lists/tuples thereof.

    Returns:
        PathValue: The flattened path. An empty ``inputs`` yields the relative root.

    Raises:
        InvalidComponentError: If an input is not a valid component.
        MisplacedAnchorError: If the anchor marker appears after the first position.
    """
    if isinstance(inputs, str):
        inputs = [inputs]
    if not inputs:
        return RELATIVE_ROOT_PATH

    head, *rest = inputs
    if isinstance(head, PathValue):
        acc = head
    elif _is_relative_anchor(head):
        acc = ROOT
    elif _is_raw_list(head):
        acc = build_path(head)
    else:
        acc = PathValue((classify_component(head),))

    for component in rest:
        acc = append_component(acc, component)
    return acc


def join_paths(*inputs: Any) -> PathValue:
    """Variadic form of ``build_path``."""

    return build_path(inputs)


def append_component(acc: PathValue, component: Any) -> PathValue:
    """Append one raw input onto ``acc``, flattening nested paths and lists.

    Raises:
        MisplacedAnchorError: If ``component`` is (or contains) an anchor.
        ExpectedPathError: If ``acc`` is not a PathValue.
    """
    if not isinstance(acc, PathValue):
        raise ExpectedPathError(acc)
    if component is ANCHOR or isinstance(component, Anchor):
        raise MisplacedAnchorError(len(acc.components))
    if _is_relative_anchor(component):
        return acc
    if isinstance(component, PathValue):
        component = component.components
    if _is_raw_list(component):
        for item in component:
            acc = append_component(acc, item)
        return acc

    classified = classify_component(component)
    if isinstance(classified, RelativeRoot):
        return acc
    if is_relative_root(acc):
        return PathValue((classified,))
    return PathValue((*acc.components, classified))


__all__ = ["append_component", "build_path", "join_paths"]
