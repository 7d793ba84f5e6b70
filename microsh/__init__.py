"""A minimal pipe-and-sequence command runner with small character, memory, text and list helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "output", "textscan", "textbuild", "linked", "shell"]