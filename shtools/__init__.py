"""Small command-line helpers for shell scripts: search, paths, file tests, numbers and output."""

__version__ = "0.1.0"