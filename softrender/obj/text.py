"""String helpers for reading OBJ and MTL lines."""

from __future__ import annotations

import re
from typing import List, Sequence, TypeVar, Union

T = TypeVar("T")

_WHITESPACE = " \t"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def split(text: str, token: str) -> List[str]:
    """Split ``text`` at ``token``.

    A token directly after another token (or at the very start) yields an
    empty field; a trailing token yields none.
    """
    if not token:
        raise ValueError("split token must not be empty")
    size = len(token)
    length = len(text)
    out: List[str] = []
    temp = ""
    i = 0
    while i < length:
        if text[i:i + size] == token:
            if temp:
                out.append(temp)
                temp = ""
                i += size - 1
            else:
                out.append("")
        elif i + size >= length:
            out.append(temp + text[i:i + size])
            break
        else:
            temp += text[i]
        i += 1
    return out


def _token_end(text: str) -> int:
    return next((i for i, ch in enumerate(text) if ch in _WHITESPACE), len(text))


def tail(text: str) -> str:
    """Everything after the first token, without surrounding spaces or tabs."""
    stripped = text.lstrip(_WHITESPACE)
    return stripped[_token_end(stripped):].strip(_WHITESPACE)


def first_token(text: str) -> str:
    """The first space- or tab-separated token of ``text``."""
    stripped = text.lstrip(_WHITESPACE)
    return stripped[:_token_end(stripped)]


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def get_element(elements: Sequence[T], index: Union[str, int]) -> T:
    """Element by OBJ index: 1-based when positive, counted from the end when negative."""
    idx = index if isinstance(index, int) else _parse_int(index)
    idx = len(elements) + idx if idx < 0 else idx - 1
    if not 0 <= idx < len(elements):
        raise IndexError(f"OBJ index {index!r} out of range for {len(elements)} elements")
    return elements[idx]