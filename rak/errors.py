"""Error types raised by the compiler and its runtime structures."""

from __future__ import annotations

import sys
from typing import TextIO


class RakError(Exception):
    """An error carrying a human-readable message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def report(self, file: TextIO | None = None) -> None:
        """Write the error as an ``ERROR:`` line, to stderr by default."""
        stream = sys.stderr if file is None else file
        stream.write(f"ERROR: {self.message}\n")


class CompileError(RakError):
    """Raised when source code cannot be compiled."""