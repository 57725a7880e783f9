"""Lexer, parser and syntax tree for a small C-like language."""

__version__ = "0.1.0"
__all__ = ["cli", "lexer", "parser", "semantics", "tokens"]