import pytest

from libunit.fields import FormatFlags, format_char, format_string, parse_flags


def _flags(spec):
    flags, _ = parse_flags(spec)
    return flags


def test_default_flags_from_empty_spec():
    flags, pos = parse_flags("")
    assert flags == FormatFlags()
    assert pos == 0


def test_parse_all_flags():
    spec = "-+ #012.5d"
    flags, pos = parse_flags(spec)
    assert spec[pos] == "d"
    assert flags.left and flags.plus and flags.space
    assert flags.prefix == "0x"
    assert flags.filler == "0"
    assert flags.width_on
    assert flags.width == 12
    assert flags.precision_on
    assert flags.precision == 5


def test_parse_precision_without_digits():
    flags, pos = parse_flags(".s")
    assert flags.precision_on
    assert flags.precision == 0
    assert pos == 1


def test_parse_zero_alone_turns_width_on():
    flags, pos = parse_flags("0d")
    assert flags.width_on
    assert flags.width == 0
    assert flags.filler == "0"
    assert pos == 1


def test_parse_stops_at_conversion():
    flags, pos = parse_flags("7s rest")
    assert pos == 1
    assert flags.width == 7
    assert not flags.left


@pytest.mark.parametrize("spec", ["", "5", "-5", "1", "-1"])
def test_format_char_matches_c_style(spec):
    assert format_char("a", _flags(spec)) == ("%" + spec + "c") % "a"


def test_format_char_accepts_code():
    assert format_char(ord("z"), FormatFlags()) == "z"


def test_format_char_rejects_long_text():
    with pytest.raises(ValueError):
        format_char("ab", FormatFlags())


@pytest.mark.parametrize(
    "spec", ["", "10", "-10", ".3", "8.3", "-8.3", ".0", "2", ".20"]
)
def test_format_string_matches_c_style(spec):
    assert format_string("hello", _flags(spec)) == ("%" + spec + "s") % "hello"


@pytest.mark.parametrize("width", [0, 3, 9, 20])
def test_format_string_length_invariant(width):
    text = "abcdef"
    result = format_string(text, _flags(str(width)))
    assert len(result) == max(width, len(text))
    assert result.endswith(text)


def test_null_string_rendering():
    assert format_string(None, FormatFlags()) == "(null)"


def test_null_string_short_precision_is_empty():
    assert format_string(None, _flags(".5")) == ""


def test_null_string_short_precision_still_padded():
    result = format_string(None, _flags("4.2"))
    assert result == " " * 4


def test_null_string_long_precision():
    assert format_string(None, _flags("-8.6")) == "%-8s" % "(null)"


def test_width_ignored_when_off():
    flags = FormatFlags(width=5)
    assert format_string("ab", flags) == "ab"