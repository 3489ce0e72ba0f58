"""Value stack used while decoding bencode, with markers for open containers."""

from __future__ import annotations

import enum
from typing import Any, Sequence


class StackError(ValueError):
    """Raised when the decoding stack cannot be popped or reduced."""


class Marker(enum.Enum):
    """Placeholder pushed on the stack where a container was opened."""

    DICT = "d"
    LIST = "l"


DICT_MARKER = Marker.DICT
LIST_MARKER = Marker.LIST

INT_CONTROL_SYMBOL = "i"
STR_CONTROL_SYMBOL = ":"
LIST_CONTROL_SYMBOL = "l"
DICT_CONTROL_SYMBOL = "d"
CLOSE_CONTROL_SYMBOL = "e"


def is_dict_symbol(candidate: Any) -> bool:
    """Return True if *candidate* is the dictionary marker."""
    return candidate is Marker.DICT


def is_list_symbol(candidate: Any) -> bool:
    """Return True if *candidate* is the list marker."""
    return candidate is Marker.LIST


class DataStack(list):
    """A last-in, first-out stack of decoded values and markers."""

    def push(self, value: Any) -> None:
        """Put *value* on top of the stack."""
        self.append(value)

    def pop(self) -> Any:  # type: ignore[override]
        """Remove and return the top value; raise StackError when empty."""
        if not self:
            raise StackError("data stack is empty")
        return super().pop()


def shrink_dictionary(items: Sequence[Any]) -> dict[str, Any]:
    """Build a dictionary from values collected in stack-pop order.

    The items arrive as ``[value_n, key_n, ..., value_1, key_1]``.
    """
    if len(items) % 2:
        raise StackError(
            "cannot transform stack slice to dict because of odd number of "
            f"elements: {list(items)!r} ({len(items)})"
        )
    ordered = list(reversed(items))
    result: dict[str, Any] = {}
    for key, value in zip(ordered[::2], ordered[1::2]):
        if not isinstance(key, str):
            raise StackError(f"value {key!r} cannot be used as dict key")
        result[key] = value
    return result


def shrink_stack(stack: DataStack) -> None:
    """Collapse the values above the nearest marker into a list or dict.

    If no marker is found and exactly one value was removed, it is put back.
    """
    buffer: list[Any] = []
    while stack:
        element = stack.pop()
        if is_dict_symbol(element):
            stack.push(shrink_dictionary(buffer))
            return
        if is_list_symbol(element):
            buffer.reverse()
            stack.push(buffer)
            return
        buffer.append(element)

    if len(buffer) == 1:
        stack.push(buffer[0])