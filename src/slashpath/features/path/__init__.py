"""
Summary: Export path feature domain and use case symbols.
Why: Provide a stable import surface for the filesystem feature and tests.
"""

from .domain.classifier import classify_component, is_valid_component
from .domain.errors import (
    ExpectedPathError,
    InvalidComponentError,
    MisplacedAnchorError,
    PathError,
    PathNotFoundError,
)
from .domain.path_value import (
    RELATIVE_ROOT_PATH,
    ROOT,
    PathValue,
    is_relative_root,
    is_root,
    parent_of,
    path_to_string,
)
from .usecases.builder import append_component, build_path, join_paths
from .usecases.parser import parse_path

__all__ = [
    "ExpectedPathError",
    "InvalidComponentError",
    "MisplacedAnchorError",
    "PathError",
    "PathNotFoundError",
    "PathValue",
    "RELATIVE_ROOT_PATH",
    "ROOT",
    "append_component",
    "build_path",
    "classify_component",
    "is_relative_root",
    "is_root",
    "is_valid_component",
    "join_paths",
    "parent_of",
    "parse_path",
    "path_to_string",
]
