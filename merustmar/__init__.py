"""Lexer, syntax tree nodes and evaluator for a small language with Myanmar-script keywords."""

__version__ = "0.1.0"

__all__ = ["environment", "evaluator", "lexer", "nodes", "objects", "token"]