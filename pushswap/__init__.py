"""Input validation and character, byte, string, number, list, output and line-reading helpers for a stack-sorting puzzle."""

__version__ = "0.1.0"