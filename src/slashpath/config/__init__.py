"""Configuration loading, derived settings and location helpers."""
