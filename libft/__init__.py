"""ASCII character, byte-buffer, C-style string, printf, linked-list and line-reading utilities."""

__version__ = "1.0.0"

__all__ = [
    "charclass",
    "memory",
    "strfuncs",
    "output",
    "strtransform",
    "printf",
    "linked_list",
    "next_line",
]