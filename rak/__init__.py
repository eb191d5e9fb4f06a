"""Bytecode chunks, values, tokens and scopes of the Rak programming language."""

__version__ = "0.1.0"