"""Arrays of values with persistent and in-place operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from rak.errors import RakError

_MIN_CAPACITY = 8


def _values_equal(a: Any, b: Any) -> bool:
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    if a is None or b is None:
        return a is b
    if type(a) is not type(b):
        return False
    if isinstance(a, (str, Array)):
        return a == b
    return a is b or a == b


def _format_value(value: Any) -> str:
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return "%g" % value
    if isinstance(value, str):
        return value
    to_display = getattr(value, "to_display", None)
    if callable(to_display):
        return to_display()
    return str(value)


class Array:
    """A growable sequence of values that tracks its capacity."""

    __slots__ = ("_items", "_capacity")

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self._items = list(elements)
        self._capacity = max(_MIN_CAPACITY, len(self._items))

    @classmethod
    def with_capacity(cls, capacity: int) -> Array:
        """Create an empty array with room for ``capacity`` elements."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        arr = cls()
        arr._capacity = capacity
        return arr

    @classmethod
    def _from_list(cls, items: list[Any]) -> Array:
        arr = cls.with_capacity(len(items))
        arr._items = items
        return arr

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        self._check_index(index)
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        if self is other:
            return True
        if len(self) != len(other):
            return False
        return all(_values_equal(a, b) for a, b in zip(self._items, other._items))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Array({self._items!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("array index out of bounds")

    def copy(self) -> Array:
        """Return a new array holding the same elements."""
        return Array._from_list(list(self._items))

    def ensure_capacity(self, capacity: int) -> None:
        """Grow the capacity, doubling, until it holds at least ``capacity``."""
        if capacity <= self._capacity:
            return
        new_capacity = self._capacity or _MIN_CAPACITY
        while new_capacity < capacity:
            new_capacity *= 2
        self._capacity = new_capacity

    def append(self, value: Any) -> Array:
        """Return a new array with ``value`` added at the end."""
        return Array._from_list([*self._items, value])

    def set(self, index: int, value: Any) -> Array:
        """Return a new array with the element at ``index`` replaced."""
        self._check_index(index)
        items = list(self._items)
        items[index] = value
        return Array._from_list(items)

    def remove_at(self, index: int) -> Array:
        """Return a new array without the element at ``index``."""
        self._check_index(index)
        return Array._from_list(self._items[:index] + self._items[index + 1:])

    def concat(self, other: Array) -> Array:
        """Return a new array with the elements of both arrays."""
        return Array._from_list(self._items + other._items)

    def slice(self, start: int, end: int) -> Array:
        """Return a new array of the elements from ``start`` up to ``end``."""
        if start < 0 or end > len(self._items):
            raise RakError("array slice out of bounds")
        items = self._items[start:end] if start < end else []
        return Array._from_list(items)

    def inplace_append(self, value: Any) -> None:
        self.ensure_capacity(len(self._items) + 1)
        self._items.append(value)

    def inplace_set(self, index: int, value: Any) -> None:
        self._check_index(index)
        self._items[index] = value

    def inplace_remove_at(self, index: int) -> None:
        self._check_index(index)
        del self._items[index]

    def inplace_concat(self, other: Array) -> None:
        if other.is_empty:
            return
        self.ensure_capacity(len(self._items) + len(other))
        self._items.extend(other._items)

    def inplace_clear(self) -> None:
        self._items.clear()

    def to_display(self) -> str:
        """Render the array the way the interpreter prints it."""
        return "[" + ", ".join(_format_value(v) for v in self._items) + "]"