"""Keyword tables, a keyword lexer and console line I/O for the Bebop language."""

__version__ = "0.1.0"
__all__ = ["keywords", "lexer", "console"]