"""Feature packages: path construction and filesystem collaborators."""
