import pytest
from hypothesis import given
from hypothesis import strategies as st

from ylibc.printf import sprintf
from ylibc.scanf import ScanResult, sscanf

INT32 = st.integers(-(2**31), 2**31 - 1)
UINT32 = st.integers(0, 2**32 - 1)
WORDS = st.text(alphabet="abcdefghijklmnopqrstuvwxyzXYZ", min_size=1, max_size=12)


@given(INT32, UINT32)
def test_round_trip_integers(a, b):
    result = sscanf(sprintf("%d %x", a, b), "%d %x")
    assert result.values == (a, b)
    assert result.count == len(result.values)


@given(UINT32)
def test_round_trip_octal_and_unsigned(value):
    assert sscanf(sprintf("%o,%u", value, value), "%o,%u").values == (value, value)


@given(WORDS, WORDS)
def test_round_trip_words(first, second):
    text = sprintf("%s %s", first, second)
    result = sscanf(text, "%s %s")
    assert result.values == (first, second)
    assert result.consumed == len(text)


def test_empty_input_is_eof():
    result = sscanf("", "%d")
    assert result.count == -1
    assert result.eof
    assert result.values == ()


def test_mismatch_converts_nothing():
    result = sscanf("abc", "%d")
    assert result.count == 0
    assert not result.eof


def test_literal_against_empty_input_is_a_mismatch():
    assert sscanf("", "x").count == 0


def test_char_width():
    assert sscanf("abcdef", "%3c").values == ("abc",)


def test_char_short_input_is_eof():
    result = sscanf("ab", "%3c")
    assert result.values == ()
    assert result.eof


def test_splat_skips_assignment():
    result = sscanf("12 34", "%*d %d")
    assert result.values == (34,)
    assert result.count == len(result.values)


def test_n_reports_position():
    text = "abc 12"
    result = sscanf(text, "abc %d%n")
    assert result.values == (12, len(text))
    assert result.count == 1


def test_base_detection():
    assert sscanf("0x1f 017 9", "%i %i %i").values == (0x1F, 0o17, 9)


def test_field_width_limits_digits():
    assert sscanf("12345", "%2d%d").values == (12, 345)


def test_unsigned_negative_wraps():
    assert sscanf("-1", "%u").values == sscanf("4294967295", "%u").values


def test_char_rank_wraps_signed():
    assert sscanf("255", "%hhd").values == sscanf("-1", "%d").values


def test_pointer():
    assert sscanf("0x10", "%p").values == (0x10,)


def test_char_set():
    assert sscanf("aaab", "%[a]").values == ("aaa",)
    assert sscanf("abc def", "%[^ ]").values == ("abc",)


def test_char_set_without_match_fails():
    assert sscanf("xyz", "%[a]").count == 0


def test_percent_literal():
    assert sscanf("%5", "%%%d").values == (5,)


def test_string_stops_at_end_and_reports_count():
    result = sscanf("abc", "%s %d")
    assert result.values == ("abc",)
    assert result.count == 1


def test_unknown_conversion_fails():
    assert sscanf("1", "%f").count == 0


def test_bytes_input():
    assert sscanf(b"7 go", "%d %s").values == (7, "go")


def test_result_is_frozen():
    result = sscanf("1", "%d")
    with pytest.raises(AttributeError):
        result.count = 5
    assert result == ScanResult(1, (1,), 1)