"""
Summary: Parse slash-delimited strings back into PathValues.
Why: Close the loop with path_to_string so rendered paths can be re-read.
"""

from __future__ import annotations

from slashpath.features.path.domain.path_value import PathValue
from slashpath.shared.path_components import RELATIVE_ANCHOR, SEPARATOR

from .builder import build_path


def parse_path(text: str) -> PathValue:
    """Split ``text`` on the separator and build a PathValue from the pieces.

    A leading separator makes the result absolute. Empty pieces produced by
    repeated or trailing separators are dropped.

    >>> str(parse_path("/usr//lib/"))
    '/usr/lib'
    >>> str(parse_path(""))
    '.'
    """
    pieces: list[object] = [piece for piece in text.split(SEPARATOR) if piece]
    if text.startswith(SEPARATOR):
        pieces.insert(0, RELATIVE_ANCHOR)
    return build_path(pieces)


__all__ = ["parse_path"]
