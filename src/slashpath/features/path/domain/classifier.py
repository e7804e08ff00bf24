"""
Summary: Classify raw builder inputs into path component variants.
Why: Reject malformed input before it reaches a PathValue.
"""

from __future__ import annotations

from typing import Final

from slashpath.shared.path_components import (
    ANCHOR,
    PARENT_REF_TEXT,
    RELATIVE_ROOT,
    RELATIVE_ROOT_TEXT,
    SEPARATOR,
    Anchor,
    ParentRef,
    PathComponent,
    RelativeRoot,
    Segment,
)

from .errors import InvalidComponentError

COMPONENT_TYPES: Final = (Anchor, RelativeRoot, ParentRef, Segment)


def validate_segment_name(name: object) -> str:
    """Return ``name`` if it renders back as exactly one ordinary segment.

    Raises:
        InvalidComponentError: If ``name`` is not a string, is empty, is one
            of the special ``.``/``..`` names, or contains the separator or a
            null byte.
    """
    if not isinstance(name, str):
        raise InvalidComponentError(name, "segment name must be a string")
    if not name:
        raise InvalidComponentError(name, "empty segment")
    if name in (RELATIVE_ROOT_TEXT, PARENT_REF_TEXT):
        raise InvalidComponentError(name, "reserved name used as a plain segment")
    if SEPARATOR in name:
        raise InvalidComponentError(name, f"segment contains {SEPARATOR!r}")
    if "\0" in name:
        raise InvalidComponentError(name, "segment contains a null byte")
    return name


def classify_component(value: object) -> PathComponent:
    """Map a raw token to the component variant it stands for.

    Args:
        value: Raw builder input.

    Returns:
        PathComponent: ``Anchor`` for the anchor marker, ``RelativeRoot`` for
        the relative-root marker or ``"."``, ``ParentRef`` for ``".."`` and a
        ``Segment`` for any other string.

    Raises:
        InvalidComponentError: If ``value`` is not a valid component, or is a
            string that cannot be rendered back as a single segment.
    """
    if isinstance(value, Segment):
        _ = validate_segment_name(value.name)
        return value
    if isinstance(value, COMPONENT_TYPES):
        return value
    if value is ANCHOR:
        return Anchor()
    if value is RELATIVE_ROOT:
        return RelativeRoot()
    if not isinstance(value, str):
        raise InvalidComponentError(value)

    # Plain str payload; str() on a mixed-in Enum member yields "Cls.NAME".
    text = str.__str__(value)
    if text == RELATIVE_ROOT_TEXT:
        return RelativeRoot()
    if text == PARENT_REF_TEXT:
        return ParentRef()
    return Segment(validate_segment_name(text))


def is_valid_component(value: object) -> bool:
    """Return whether ``value`` may be used as a single path component.

    Agrees with ``classify_component``: true exactly when classifying
    ``value`` succeeds. Numbers, booleans, ``None``, containers and strings
    that cannot be rendered as one segment are rejected.
    """
    try:
        _ = classify_component(value)
    except InvalidComponentError:
        return False
    return True


__all__ = [
    "COMPONENT_TYPES",
    "classify_component",
    "is_valid_component",
    "validate_segment_name",
]
