import pytest

from libunit.convert import atoi, atol, is_integer, ltobase, ultobase

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"


@pytest.mark.parametrize("value", [0, 1, 9, 10, 42, 255, 4096, 2**31 - 1, 2**63 - 1])
@pytest.mark.parametrize("digits,base", [(DECIMAL, 10), (HEX_LOWER, 16), ("01", 2)])
def test_ltobase_round_trip_positive(value, digits, base):
    assert int(ltobase(value, digits), base) == value


@pytest.mark.parametrize("value", [-1, -10, -255, -(2**31), -(2**63)])
def test_ltobase_negative_has_sign(value):
    text = ltobase(value, DECIMAL)
    assert text.startswith("-")
    assert int(text) == value


def test_ltobase_uppercase_hex_round_trip():
    text = ltobase(48879, HEX_UPPER)
    assert text == text.upper()
    assert int(text, 16) == 48879


def test_ltobase_zero_is_single_digit():
    assert ltobase(0, DECIMAL) == "0"


def test_ltobase_no_leading_zeros():
    for value in (1, 10, 100, 1000):
        assert not ltobase(value, DECIMAL).startswith("0")


@pytest.mark.parametrize("digits", ["", "0"])
def test_base_too_short_raises(digits):
    with pytest.raises(ValueError):
        ltobase(5, digits)
    with pytest.raises(ValueError):
        ultobase(5, digits)


@pytest.mark.parametrize("value", [0, 7, 16, 2**32 - 1, 2**64 - 1])
def test_ultobase_round_trip(value):
    assert int(ultobase(value, HEX_LOWER), 16) == value
    assert int(ultobase(value, DECIMAL)) == value


def test_ultobase_wraps_negative_to_unsigned_long():
    assert int(ultobase(-1, HEX_LOWER), 16) == 2**64 - 1
    assert "-" not in ultobase(-5, DECIMAL)


@pytest.mark.parametrize(
    "text",
    ["123", " -123", " +123", "       +0", "\t\n42", "-0", "007"],
)
def test_atol_matches_int_on_plain_numbers(text):
    assert atol(text) == int(text.strip())


def test_atol_stops_at_first_non_digit():
    assert atol("123a") == atol("123")
    assert atol("  -77xyz") == atol("-77")


@pytest.mark.parametrize("text", ["", "abc", "-", "+", "--123", "+ 12"])
def test_atol_without_digits_is_zero(text):
    assert atol(text) == 0


def test_atoi_agrees_with_atol_in_int_range():
    for text in ("2147483647", "-2147483648", "99", "-1"):
        assert atoi(text) == atol(text)


def test_atoi_truncates_to_32_bits():
    assert atoi("2147483648") == -(2**31)
    assert atol("2147483648") == 2**31


def test_ltobase_atol_round_trip():
    for value in (-(2**40), -12345, 0, 12345, 2**40):
        assert atol(ltobase(value, DECIMAL)) == value


@pytest.mark.parametrize("text", ["123", " -123", " +123", "       +0"])
def test_is_integer_valid(text):
    assert is_integer(text) is True


@pytest.mark.parametrize("text", ["", "--123", "123a", "+ 12", "-", None, "   "])
def test_is_integer_invalid(text):
    assert is_integer(text) is False


def test_is_integer_rejects_non_ascii_digits():
    assert is_integer("\u0663") is False