"""Editing support for TikZ pictures: command catalogues, highlighting, bookmarks, text helpers and the PGF manual."""

__version__ = "0.13.2"
__all__ = [
    "bookmarks",
    "commands",
    "documentation",
    "highlighter",
    "rules",
    "textops",
]