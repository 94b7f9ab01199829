"""Compiler passes over interaction-net books, readback nets, compile options, an HVM runner and an imperative front-end AST."""

__version__ = "0.1.0"