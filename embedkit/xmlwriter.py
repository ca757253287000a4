"""A small streaming XML writer with automatic closing tags and indentation."""

from __future__ import annotations

import math
from typing import Protocol

__all__ = ["XMLWriter"]

_ESCAPES = {
    '"': "&quot;",
    "'": "&apos;",
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
}

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class _TextStream(Protocol):
    def write(self, text: str) -> object: ...


def _format_int(value: int, base: int) -> str:
    if base < 2 or base > len(_DIGITS):
        base = 10
    negative = False
    if value < 0:
        if base == 10:
            negative = True
            value = -value
        else:
            value &= 0xFFFFFFFF
    digits = []
    while True:
        value, rest = divmod(value, base)
        digits.append(_DIGITS[rest])
        if value == 0:
            break
    return ("-" if negative else "") + "".join(reversed(digits))


def _format_float(value: float, decimals: int) -> str:
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf"
    if abs(value) > 4294967040.0:
        return "ovf"
    parts = []
    if value < 0.0:
        parts.append("-")
        value = -value
    rounding = 0.5
    for _ in range(decimals):
        rounding /= 10.0
    value += rounding
    whole = int(value)
    remainder = value - whole
    parts.append(str(whole))
    if decimals > 0:
        parts.append(".")
    for _ in range(decimals):
        remainder *= 10.0
        digit = int(remainder)
        parts.append(str(digit))
        remainder -= digit
    return "".join(parts)


class XMLWriter:
    """Writes XML to any object with a ``write(str)`` method.

    Open tags are kept on a stack of at most ``max_level`` entries so that
    :meth:`tag_close` can emit the matching closing tag; tag names longer
    than ``max_tag_size`` are refused. Lines end with ``newline``.
    """

    max_level = 5
    max_tag_size = 15
    newline = "\r\n"

    def __init__(self, stream: _TextStream) -> None:
        self._stream = stream
        self.reset()

    def reset(self) -> None:
        """Reset the indentation and forget all open tags."""
        self._indent = 0
        self._indent_step = 2
        self._tags: list[str] = []

    def _print(self, text: str) -> None:
        self._stream.write(text)

    def _println(self, text: str = "") -> None:
        self._stream.write(text + self.newline)

    def _format(self, value: object, base: int, decimals: int) -> str | None:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, int):
            return _format_int(value, base)
        if isinstance(value, float):
            return _format_float(value, decimals)
        return None

    def _value(self, value: object, base: int, decimals: int) -> None:
        text = self._format(value, base, decimals)
        if text is None:
            self.escape(str(value))
        else:
            self._print(text)

    def header(self) -> None:
        self._println('<?xml version="1.0" encoding="UTF-8"?>')

    def comment(self, text: str, multiline: bool = False) -> None:
        """Write ``<!-- text -->``; a multi-line comment is not indented."""
        self._println()
        if not multiline:
            self.indent()
        self._print("<!-- ")
        if multiline:
            self._println()
        self._print(text)
        if multiline:
            self._println()
        self._println(" -->")

    def tag_open(self, tag: str, name: str = "", newline: bool = True) -> None:
        """Write ``<tag>`` or ``<tag name="...">`` and indent what follows."""
        if len(self._tags) >= self.max_level:
            raise OverflowError("too many nested tags")
        if len(tag) > self.max_tag_size:
            raise ValueError("tag name too long")
        self._tags.append(tag)
        self.tag_start(tag)
        if name:
            self.tag_field("name", name)
        self.tag_end(newline, False)
        self._indent += self._indent_step

    def tag_close(self, indent: bool = True) -> None:
        """Write the closing tag of the most recently opened tag."""
        if not self._tags:
            raise IndexError("no open tag to close")
        self.decr_indent()
        if indent:
            self.indent()
        self._println(f"</{self._tags.pop()}>")

    def tag_start(self, tag: str) -> None:
        """Write ``<tag`` without closing it."""
        self.indent()
        self._print(f"<{tag}")

    def tag_field(
        self, field: str, value: object, base: int = 10, decimals: int = 2
    ) -> None:
        """Write `` field="value"``; ints use ``base``, floats ``decimals``."""
        self._print(f' {field}="')
        self._value(value, base, decimals)
        self._print('"')

    def tag_end(self, newline: bool = True, add_slash: bool = True) -> None:
        """Close a tag started with :meth:`tag_start`."""
        if add_slash:
            self._print("/")
        self._print(">")
        if newline:
            self._println()

    def write_node(
        self, tag: str, value: object, base: int = 10, decimals: int = 2
    ) -> None:
        """Write ``<tag>value</tag>`` on one line."""
        self.tag_open(tag, "", False)
        self._value(value, base, decimals)
        self.tag_close(False)

    def set_indent_size(self, size: int = 2) -> None:
        self._indent_step = size

    def incr_indent(self) -> None:
        self._indent += self._indent_step

    def decr_indent(self) -> None:
        self._indent = max(0, self._indent - self._indent_step)

    def indent(self) -> None:
        """Write the current indentation as spaces."""
        self._print(" " * self._indent)

    def raw(self, text: str) -> None:
        """Write ``text`` unchanged."""
        self._print(text)

    def escape(self, text: str) -> None:
        """Write ``text`` with the five XML special characters replaced."""
        self._print("".join(_ESCAPES.get(ch, ch) for ch in text))