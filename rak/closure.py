"""Callable objects: compiled functions, native functions and closures."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Union

from rak.chunk import Chunk


class CallableKind(Enum):
    FUNCTION = auto()
    NATIVE_FUNCTION = auto()


@dataclass(eq=False)
class Function:
    """A compiled function with its own bytecode chunk."""

    name: str | None
    arity: int
    chunk: Chunk = field(default_factory=Chunk)


@dataclass(eq=False)
class NativeFunction:
    """A function implemented by the host."""

    name: str | None
    arity: int
    call: Callable[..., Any]


@dataclass(eq=False)
class Closure:
    """A callable value wrapping a function or a native function."""

    kind: CallableKind
    callable: Union[Function, NativeFunction]

    def __post_init__(self) -> None:
        expected = (
            Function if self.kind is CallableKind.FUNCTION else NativeFunction
        )
        if not isinstance(self.callable, expected):
            raise TypeError(
                f"closure of kind {self.kind.name} needs a {expected.__name__}"
            )