"""Number-to-text and text-to-number conversions used by the formatter."""

from __future__ import annotations

_DIGITS = frozenset("0123456789")
_SPACES = frozenset(" \t\n\v\f\r")

_ULONG_BITS = 64
_LONG_BITS = 64
_INT_BITS = 32


def _to_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _to_signed(value: int, bits: int) -> int:
    value = _to_unsigned(value, bits)
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _check_base(base_digits: str) -> int:
    base = len(base_digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    return base


def _digits_of(value: int, base_digits: str) -> str:
    base = _check_base(base_digits)
    out = []
    while True:
        value, rest = divmod(value, base)
        out.append(base_digits[rest])
        if value == 0:
            break
    return "".join(reversed(out))


def ltobase(value: int, base_digits: str) -> str:
    """Render a signed integer with the given digit alphabet; negatives get '-'."""
    if value < 0:
        return "-" + _digits_of(-value, base_digits)
    return _digits_of(value, base_digits)


def ultobase(value: int, base_digits: str) -> str:
    """Render an unsigned 64-bit integer with the given digit alphabet.

    Negative values wrap around as an unsigned long would.
    """
    return _digits_of(_to_unsigned(value, _ULONG_BITS), base_digits)


def _skip_spaces(text: str) -> str:
    start = 0
    for start, char in enumerate(text):
        if char not in _SPACES:
            return text[start:]
    return ""


def atol(text: str) -> int:
    """Parse the leading integer of text, ignoring anything after it.

    Leading whitespace and one sign are accepted; text without digits gives 0.
    The result wraps to a signed 64-bit value.
    """
    rest = _skip_spaces(text)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        value = value * 10 + (ord(char) - ord("0"))
    if negative:
        value = -value
    return _to_signed(value, _LONG_BITS)


def atoi(text: str) -> int:
    """Parse like atol, then truncate to a signed 32-bit value."""
    return _to_signed(atol(text), _INT_BITS)


def is_integer(text: str | None) -> bool:
    """Tell whether text is optional whitespace, an optional sign and digits only."""
    if text is None:
        return False
    rest = _skip_spaces(text)
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    return bool(rest) and all(char in _DIGITS for char in rest)