"""Lexer, parser and tree-walking interpreter for a small typed scripting language."""

__version__ = "0.1.0"