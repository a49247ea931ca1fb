import pytest

from printfmt import textutils


@pytest.mark.parametrize("value", [0, 7, -7, 1000, -123456, 2147483647, -2147483648])
def test_atoi_itoa_round_trip(value):
    assert textutils.atoi(textutils.itoa(value)) == value


@pytest.mark.parametrize("value", [0, 5, -5, 99999, -2147483648])
def test_itoa_matches_decimal_text(value):
    assert textutils.itoa(value) == str(value)


def test_itoa_wraps_like_int():
    assert textutils.itoa(2147483648) == "-2147483648"


def test_atoi_skips_whitespace_and_sign():
    assert textutils.atoi(" \t\n+15xyz") == textutils.atoi("15")
    assert textutils.atoi("\v-15") == -textutils.atoi("15")


def test_atoi_without_digits_is_zero():
    assert textutils.atoi("abc") == 0
    assert textutils.atoi("") == 0
    assert textutils.atoi("- 3") == 0


def test_atoi_stops_at_first_non_digit():
    assert textutils.atoi("12.5") == textutils.atoi("12")


@pytest.mark.parametrize("base", [2, 8, 10, 16, 36])
@pytest.mark.parametrize("value", [0, 1, 255, 255255, 2147483647])
def test_itoa_base_round_trip(value, base):
    assert int(textutils.itoa_base(value, base), base) == value


def test_itoa_base_uses_upper_case():
    result = textutils.itoa_base(255255, 16)
    assert result == result.upper()
    assert int(result, 16) == 255255


def test_itoa_base_sign_only_in_base_ten():
    assert textutils.itoa_base(-42, 10) == str(-42)
    assert textutils.itoa_base(-42, 16) == textutils.itoa_base(42, 16)


@pytest.mark.parametrize("base", [0, 1, 37])
def test_itoa_base_rejects_bad_base(base):
    with pytest.raises(ValueError):
        textutils.itoa_base(10, base)


@pytest.mark.parametrize("value", [0, 8, 255255, -255255])
def test_nbr_to_oct_round_trip(value):
    assert int(textutils.nbr_to_oct(value), 8) == value


def test_split_drops_empty_words():
    words = textutils.split("**Hello**World*again**", "*")
    assert words == ["Hello", "World", "again"]


def test_split_invariants():
    text = "  a bb   ccc "
    words = textutils.split(text, " ")
    assert all(words)
    assert all(" " not in w for w in words)
    assert "".join(words) == text.replace(" ", "")


def test_split_of_only_separators_is_empty():
    assert textutils.split("....", ".") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        textutils.split("a,b", ",,")


def test_trim_strips_ends_only():
    assert textutils.trim(" \t\nHello World\n\t ") == "Hello World"


def test_trim_keeps_other_whitespace():
    assert textutils.trim("\rx\r") == "\rx\r"


def test_trim_all_blank_is_empty():
    assert textutils.trim(" \t\n ") == ""


def test_check_int_max_at_limit():
    assert textutils.check_int_max("2147483647") == 0
    assert textutils.check_int_max("-2147483647") == 0


def test_check_int_max_over_limit():
    assert textutils.check_int_max("2147483648") == 1
    assert textutils.check_int_max("-2147483648") == -1


def test_check_int_max_is_textual():
    assert textutils.check_int_max("3") == 1
    assert textutils.check_int_max("10000000000") == 0


@pytest.mark.parametrize(
    "haystack,needle,limit",
    [
        ("Hello World", "World", 11),
        ("Hello World", "World", 10),
        ("Hello World", "o", 5),
        ("Hello World", "o", 4),
        ("aaab", "ab", 4),
        ("abc", "zz", 3),
    ],
)
def test_find_bounded_agrees_with_window(haystack, needle, limit):
    found = textutils.find_bounded(haystack, needle, limit)
    window = haystack[:limit]
    if needle in window:
        assert found == window.index(needle)
    else:
        assert found is None


def test_find_bounded_empty_needle():
    assert textutils.find_bounded("abc", "", 0) == 0


def test_find_bounded_negative_limit():
    with pytest.raises(ValueError):
        textutils.find_bounded("abc", "a", -1)


@pytest.mark.parametrize("ch", [" ", "\n", "\t", "\r", "\f", "\v"])
def test_is_space_true(ch):
    assert textutils.is_space(ch) is True


@pytest.mark.parametrize("ch", ["a", "0", "", "\0", "  "])
def test_is_space_false(ch):
    assert textutils.is_space(ch) is False