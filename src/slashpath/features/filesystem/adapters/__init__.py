"""Adapters implementing the filesystem port."""

from .local import LocalFileSystemGateway

__all__ = ["LocalFileSystemGateway"]
