"""A small printf: numeric field formatters and the format-string driver."""

from __future__ import annotations

import operator
import sys
from dataclasses import replace
from typing import Any, Callable, Iterator

from libunit.convert import ultobase
from libunit.fields import FormatFlags, format_char, format_string, parse_flags

_DECIMAL = "0123456789"
_HEXA = "0123456789abcdef"
_NIL_TEXT = "(nil)"

_UINT_MASK = (1 << 32) - 1
_ULONG_MASK = (1 << 64) - 1


class FormatError(ValueError):
    """Raised for a bad format string or a missing argument.

    ``partial`` holds the text rendered before the error was found.
    """

    def __init__(self, message: str, partial: str = "") -> None:
        super().__init__(message)
        self.partial = partial


def _as_int32(value: int) -> int:
    value = operator.index(value) & _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _render_number(negative: bool, digits: str, flags: FormatFlags) -> str:
    """Lay out sign, prefix, precision zeros, padding and digits."""
    filler = flags.filler
    width = flags.width
    precision = flags.precision
    show_digits = True

    if flags.precision > 0 and flags.width > 0:
        filler = " "
    if flags.precision_on and (not digits or digits[0] == "0"):
        filler = " "
    if flags.precision_on and flags.precision == 0 and digits[:1] == "0":
        # A zero with an explicit zero precision prints no digits at all.
        show_digits = False
        precision = 0
    else:
        precision = max(precision - len(digits), 0)
        length = len(digits)
        if flags.prefix:
            length += 2
        if negative or flags.plus or flags.space:
            length += 1
        width -= precision + length

    width = max(width, 0)
    pad_before = flags.width_on and not flags.left
    parts = []
    if pad_before and filler == " ":
        parts.append(" " * width)
    if not negative:
        if flags.plus:
            parts.append("+")
        elif flags.space:
            parts.append(" ")
    parts.append(flags.prefix)
    if negative:
        parts.append("-")
    if flags.precision_on:
        parts.append("0" * precision)
    if pad_before and filler == "0":
        parts.append("0" * width)
    if show_digits:
        parts.append(digits)
    if flags.width_on and flags.left:
        parts.append(" " * width)
    return "".join(parts)


def format_int(value: int, flags: FormatFlags) -> str:
    """Render a signed 32-bit decimal integer."""
    value = _as_int32(value)
    negative = value < 0
    digits = ultobase(-value if negative else value, _DECIMAL)
    return _render_number(negative, digits, replace(flags, prefix=""))


def format_uint(value: int, flags: FormatFlags) -> str:
    """Render an unsigned 32-bit decimal integer; the '+' flag is ignored."""
    value = operator.index(value) & _UINT_MASK
    digits = ultobase(value, _DECIMAL)
    return _render_number(False, digits, replace(flags, prefix="", plus=False))


def format_hexa(value: int, flags: FormatFlags, uppercase: bool, no_plus: bool) -> str:
    """Render an unsigned value in base 16.

    The '#' prefix is dropped for zero; ``no_plus`` turns the '+' flag off.
    """
    value = operator.index(value) & _ULONG_MASK
    digits = ultobase(value, _HEXA)
    prefix = "" if value == 0 else flags.prefix
    if uppercase:
        digits = digits.upper()
        if prefix:
            prefix = "0X"
    flags = replace(flags, prefix=prefix, plus=flags.plus and not no_plus)
    return _render_number(False, digits, flags)


def format_pointer(address: int | None, flags: FormatFlags) -> str:
    """Render an address as lowercase hex with "0x", or "(nil)" for zero."""
    address = 0 if address is None else operator.index(address) & _ULONG_MASK
    if address == 0:
        return format_string(_NIL_TEXT, replace(flags, precision_on=False))
    digits = ultobase(address, _HEXA)
    return _render_number(False, digits, replace(flags, prefix="0x"))


_Converter = Callable[[Any, FormatFlags], str]

_CONVERTERS: dict[str, _Converter] = {
    "d": format_int,
    "i": format_int,
    "u": format_uint,
    "s": format_string,
    "c": format_char,
    "p": format_pointer,
    "x": lambda value, flags: format_hexa(value, flags, False, True),
    "X": lambda value, flags: format_hexa(value, flags, True, True),
}


def _fields(fmt: str, args: Iterator[Any]) -> Iterator[str]:
    pos = 0
    rendered: list[str] = []
    while pos < len(fmt):
        char = fmt[pos]
        if char != "%":
            rendered.append(char)
            yield char
            pos += 1
            continue
        flags, offset = parse_flags(fmt[pos + 1:])
        conv_pos = pos + 1 + offset
        conversion = fmt[conv_pos:conv_pos + 1]
        if conversion == "%":
            piece = "%"
        elif conversion in _CONVERTERS:
            try:
                arg = next(args)
            except StopIteration:
                raise FormatError(
                    f"missing argument for %{conversion}", "".join(rendered)
                ) from None
            piece = _CONVERTERS[conversion](arg, flags)
        else:
            raise FormatError(
                f"unknown conversion {conversion!r}", "".join(rendered)
            )
        rendered.append(piece)
        yield piece
        pos = conv_pos + 1


def sformat(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the formatted args."""
    if fmt is None:
        raise FormatError("no format string")
    return "".join(_fields(fmt, iter(args)))


def _write(stream: Any, fmt: str, args: tuple[Any, ...]) -> int:
    try:
        text = sformat(fmt, *args)
    except FormatError as error:
        stream.write(error.partial)
        raise
    stream.write(text)
    return len(text)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    return _write(sys.stdout, fmt, args)


def eprintf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard error; return its length."""
    return _write(sys.stderr, fmt, args)