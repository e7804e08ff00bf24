"""Tests for parsing rendered strings back into PathValues."""

from __future__ import annotations

import pytest

from slashpath.features.path import (
    RELATIVE_ROOT_PATH,
    ROOT,
    build_path,
    parse_path,
    path_to_string,
)
from slashpath.shared import ANCHOR


@pytest.mark.parametrize(
    "segments",
    [["a"], ["a", "b", "c"], [ANCHOR, "usr", "share"], [ANCHOR]],
)
def test_round_trip_plain_segments(segments: list[object]) -> None:
    path = build_path(segments)
    assert parse_path(path_to_string(path)) == path


def test_redundant_separators_collapse() -> None:
    assert parse_path("a//b/") == build_path(["a", "b"])
    assert parse_path("//etc///hosts") == build_path([ANCHOR, "etc", "hosts"])


def test_special_strings() -> None:
    assert parse_path("") == RELATIVE_ROOT_PATH
    assert parse_path(".") == RELATIVE_ROOT_PATH
    assert parse_path("/") == ROOT
    assert parse_path("./a/./b") == build_path(["a", "b"])
    assert path_to_string(parse_path("../x/..")) == "../x/.."
