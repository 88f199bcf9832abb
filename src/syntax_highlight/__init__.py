"""Syntax highlighting HTTP service with line and word decorations."""

__version__ = "0.1.0"
