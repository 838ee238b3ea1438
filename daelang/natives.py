"""Built-in functions available to every Dae program."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Optional, TextIO

_ESCAPES = {"n": "\n", "t": "\t", "\\": "\\"}


def interpret_escapes(text: str) -> str:
    """Resolve backslash escapes; unknown escapes yield the escaped character."""
    parts: list[str] = []
    chars = iter(enumerate(text))
    last = len(text) - 1
    for index, char in chars:
        if char == "\\" and index < last:
            _, escaped = next(chars)
            parts.append(_ESCAPES.get(escaped, escaped))
        else:
            parts.append(char)
    return "".join(parts)


def native_print(args: Optional[Iterable[str]], stream: Optional[TextIO] = None) -> None:
    """Write each argument, escapes resolved, with no separator or newline."""
    out = sys.stdout if stream is None else stream
    for arg in args or ():
        out.write(interpret_escapes(arg))
    return None