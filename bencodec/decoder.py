"""Decoding of bencode text into Python values."""

from __future__ import annotations

import re
from typing import Any

from .stack import (
    CLOSE_CONTROL_SYMBOL,
    DICT_CONTROL_SYMBOL,
    DICT_MARKER,
    INT_CONTROL_SYMBOL,
    LIST_CONTROL_SYMBOL,
    LIST_MARKER,
    STR_CONTROL_SYMBOL,
    DataStack,
    StackError,
    shrink_stack,
)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


class DecodeError(ValueError):
    """Raised when bencode input is malformed."""


def find_next(start: int, char: str, text: str) -> int | None:
    """Return the index of the first *char* in *text* at or after *start*, or None."""
    if start >= len(text):
        return None
    index = text.find(char, start)
    return index if index >= 0 else None


def parse_int(text: str) -> int:
    """Parse a signed decimal integer that fits in 64 bits."""
    if not _INT_PATTERN.fullmatch(text):
        raise DecodeError("cannot convert to int")
    number = int(text)
    if not _INT_MIN <= number <= _INT_MAX:
        raise DecodeError("cannot convert to int")
    return number


def _utf8_length(char: str) -> int:
    return len(char.encode("utf-8", "surrogatepass"))


def decode(text: str) -> Any:
    """Decode a bencode document; blank input decodes to None."""
    if not text.strip():
        return None

    stack = DataStack()
    i = 0
    while i < len(text):
        char = text[i]
        if char == INT_CONTROL_SYMBOL:
            start = i + 1
            end = find_next(start, CLOSE_CONTROL_SYMBOL, text)
            if end is None:
                raise DecodeError(
                    f"cannot find closing symbol {CLOSE_CONTROL_SYMBOL!r} for integer, "
                    f"starting from: {start} in {text}"
                )
            stack.push(parse_int(text[start:end]))
            i = end + 1
        elif char == LIST_CONTROL_SYMBOL:
            stack.push(LIST_MARKER)
            i += 1
        elif char == DICT_CONTROL_SYMBOL:
            stack.push(DICT_MARKER)
            i += 1
        elif char == CLOSE_CONTROL_SYMBOL:
            try:
                shrink_stack(stack)
            except StackError as exc:
                raise DecodeError(str(exc)) from exc
            i += 1
        else:
            i = _decode_string(text, i, stack)

    if len(stack) > 1:
        raise DecodeError(
            f"wrong input data, faced sequence of unwrapped elements: {list(stack)!r}"
        )
    try:
        return stack.pop()
    except StackError as exc:
        raise DecodeError(str(exc)) from exc


def _decode_string(text: str, start: int, stack: DataStack) -> int:
    """Push the length-prefixed string at *start*; return the index after it."""
    if not text[start].isdecimal():
        raise DecodeError(
            f"parsing error, expected digit, got {text[max(start - 2, 0):]!r} "
            f"on index {start}"
        )
    colon = find_next(start, STR_CONTROL_SYMBOL, text)
    if colon is None:
        raise DecodeError(
            f"cannot find closing symbol {STR_CONTROL_SYMBOL!r} for string, "
            f"starting from: {start} in {text}"
        )
    byte_length = parse_int(text[start:colon])
    remainder = text[colon + 1 :]
    if len(remainder.encode("utf-8", "surrogatepass")) < byte_length:
        raise DecodeError(
            f"wrong string encoding: length of string {byte_length} is greater "
            f"than remaining length of {remainder!r}"
        )

    consumed = 0
    end = colon + 1
    while consumed < byte_length:
        consumed += _utf8_length(text[end])
        end += 1

    stack.push(text[colon + 1 : end])
    return end