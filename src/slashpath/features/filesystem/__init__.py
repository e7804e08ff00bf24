# Path: `src/slashpath/features/filesystem/__init__.py`
# Summary: Export the filesystem collaborators and their port/adapter.
# Why: Provide a stable import surface for callers and tests.

from .adapters.local import LocalFileSystemGateway
from .usecases.operations import (
    NOT_FOUND,
    NotFound,
    as_path,
    make_directory,
    path_exists,
    search,
    search_or_raise,
    write_text_file,
)
from .usecases.ports import FileSystemGateway

__all__ = [
    "FileSystemGateway",
    "LocalFileSystemGateway",
    "NOT_FOUND",
    "NotFound",
    "as_path",
    "make_directory",
    "path_exists",
    "search",
    "search_or_raise",
    "write_text_file",
]
