"""Human-readable rendering helpers for assertion failures."""

from __future__ import annotations

import sys
from pprint import pformat
from typing import Any

_ORDINAL_SUFFIXES = {1: "1st", 2: "2nd", 3: "3rd"}


def render_value(value: Any, *, width: int = 80, depth: int | None = None) -> str:
    """Render a value as ``TypeName(printed form)``.

    ``None`` renders as ``NoneType(None)``. Long containers may span several
    lines; callers indent them with :func:`indent_each_line`.
    """
    type_name = type(value).__qualname__
    printed = pformat(value, width=width, depth=depth)
    return f"{type_name}({printed})"


def ordinal_label(n: int) -> str:
    """Return the position marker for ``n`` ("1st", "2nd", "3rd", "4th", ...).

    Only 1, 2 and 3 get their own suffix; 11 is "11th" and 21 is "21th".
    """
    if n < 0:
        raise ValueError(f"ordinal must not be negative, got {n}")
    if n == 0:
        return ""
    return _ORDINAL_SUFFIXES.get(n, f"{n}th")


def indent_each_line(text: str, prefix: str) -> str:
    segments = text.split("\n")
    last = len(segments) - 1
    lines = []
    for idx, segment in enumerate(segments):
        # a trailing newline leaves an empty final segment that stays bare
        if segment or idx == 0 or idx != last:
            lines.append(prefix + segment)
        else:
            lines.append("")
    return "\n".join(lines)


def caller_location(skip: int) -> str:
    """Return ``"<file>:<line>"`` for the frame ``skip`` levels above our caller.

    ``skip=0`` is the function calling ``caller_location``. Returns ``""``
    when the stack is not deep enough.
    """
    try:
        frame = sys._getframe(skip + 1)
    except ValueError:
        return ""
    if frame.f_lineno is None or frame.f_lineno <= 0:
        return ""
    return f"{frame.f_code.co_filename}:{frame.f_lineno}"


def format_record(reason: str, location: str) -> str:
    return f"\t{reason}\n\t{location}\n"
