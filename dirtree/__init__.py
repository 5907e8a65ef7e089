"""Indented tree listings of directories, as a command and as a library."""

__version__ = "1.0.0"
__all__ = ["cli", "display", "options", "traversal", "utils"]