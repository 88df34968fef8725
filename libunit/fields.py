"""Conversion flags and the character and string field formatters."""

from __future__ import annotations

from dataclasses import dataclass, replace

_FLAG_CHARS = "-+# "
_DIGITS = "0123456789"
_NULL_TEXT = "(null)"


@dataclass(frozen=True)
class FormatFlags:
    """Options of one conversion: [flags][width][.precision]."""

    width_on: bool = False
    width: int = 0
    filler: str = " "
    left: bool = False
    precision_on: bool = False
    precision: int = 0
    plus: bool = False
    space: bool = False
    prefix: str = ""


def _read_number(spec: str, pos: int) -> tuple[int, int]:
    start = pos
    while pos < len(spec) and spec[pos] in _DIGITS:
        pos += 1
    return (int(spec[start:pos]) if pos > start else 0), pos


def parse_flags(spec: str) -> tuple[FormatFlags, int]:
    """Parse the options that follow a '%'.

    Returns the flags and the index in spec of the conversion character.
    """
    pos = 0
    left = plus = space = False
    prefix = ""
    while pos < len(spec) and spec[pos] in _FLAG_CHARS:
        char = spec[pos]
        if char == "-":
            left = True
        elif char == "+":
            plus = True
        elif char == " ":
            space = True
        else:
            prefix = "0x"
        pos += 1

    width_on = False
    filler = " "
    width = 0
    if spec[pos:pos + 1] == "0":
        width_on = True
        filler = "0"
        pos += 1
    if spec[pos:pos + 1] and spec[pos] in _DIGITS:
        width_on = True
        width, pos = _read_number(spec, pos)

    precision_on = False
    precision = 0
    if spec[pos:pos + 1] == ".":
        precision_on = True
        precision, pos = _read_number(spec, pos + 1)

    flags = FormatFlags(
        width_on=width_on,
        width=width,
        filler=filler,
        left=left,
        precision_on=precision_on,
        precision=precision,
        plus=plus,
        space=space,
        prefix=prefix,
    )
    return flags, pos


def _as_char(value: str | int) -> str:
    if isinstance(value, int):
        return chr(value % 256)
    if len(value) != 1:
        raise ValueError("a character field takes exactly one character")
    return value


def format_char(value: str | int, flags: FormatFlags) -> str:
    """Render one character padded with spaces to the field width."""
    char = _as_char(value)
    padding = " " * max(flags.width - 1, 0)
    if flags.left:
        return char + padding
    return padding + char


def format_string(value: str | None, flags: FormatFlags) -> str:
    """Render a string, cut to the precision and padded to the width.

    None renders as "(null)", or as an empty string when a precision
    below six is set.
    """
    if value is None:
        if flags.precision_on and flags.precision < len(_NULL_TEXT):
            return format_string("", flags)
        return format_string(_NULL_TEXT, flags)
    if flags.precision_on:
        value = value[: max(flags.precision, 0)]
    padding = " " * max(flags.width - len(value), 0) if flags.width_on else ""
    if flags.left:
        return value + padding
    return padding + value


def with_defaults(**changes: object) -> FormatFlags:
    """Return default flags with the given fields changed."""
    return replace(FormatFlags(), **changes)