"""Use cases of the path feature: building and parsing PathValues."""

from .builder import append_component, build_path, join_paths
from .parser import parse_path

__all__ = ["append_component", "build_path", "join_paths", "parse_path"]
