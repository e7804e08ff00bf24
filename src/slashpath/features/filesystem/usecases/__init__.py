"""Use cases of the filesystem feature: the gateway port and the operations."""
