import pytest

from printfmt.chartypes import (
    is_alpha_str,
    is_blank,
    is_cntrl,
    is_graph,
    is_lower_str,
    is_numeric_str,
    is_printable_str,
    is_upper_str,
    is_xdigit,
)


@pytest.mark.parametrize("ch", [" ", "\t", 32, 9])
def test_is_blank_accepts_space_and_tab(ch):
    assert is_blank(ch) is True


@pytest.mark.parametrize("ch", ["\n", "a", "\v", 0])
def test_is_blank_rejects_others(ch):
    assert is_blank(ch) is False


@pytest.mark.parametrize("ch", ["\x00", "\x1f", "\x7f", "\n"])
def test_is_cntrl_true(ch):
    assert is_cntrl(ch) is True


@pytest.mark.parametrize("ch", [" ", "A", "~"])
def test_is_cntrl_false(ch):
    assert is_cntrl(ch) is False


def test_is_graph_matches_visible_ascii_range():
    visible = [chr(code) for code in range(128) if is_graph(chr(code))]
    assert visible[0] == "!"
    assert visible[-1] == "~"
    assert " " not in visible
    assert len(visible) == ord("~") - ord("!") + 1


@pytest.mark.parametrize("ch", ["a", "f", "A", "F", 0, 9])
def test_is_xdigit_true(ch):
    assert is_xdigit(ch) is True


@pytest.mark.parametrize("ch", ["g", "G", "z", "5", "0", 10])
def test_is_xdigit_false(ch):
    assert is_xdigit(ch) is False


def test_single_char_functions_reject_long_strings():
    with pytest.raises(ValueError):
        is_blank("ab")
    with pytest.raises(ValueError):
        is_graph("")


def test_single_char_functions_reject_other_types():
    with pytest.raises(TypeError):
        is_cntrl(1.5)
    with pytest.raises(TypeError):
        is_xdigit(None)


@pytest.mark.parametrize(
    "func, good, bad",
    [
        (is_alpha_str, "HelloWorld", "Hello World"),
        (is_lower_str, "hello", "Hello"),
        (is_upper_str, "HELLO", "HELLo"),
        (is_numeric_str, "0123456789", "12a"),
        (is_printable_str, "Hello, World! ~", "tab\there"),
    ],
)
def test_string_predicates(func, good, bad):
    assert func(good) is True
    assert func(bad) is False


@pytest.mark.parametrize(
    "func",
    [is_alpha_str, is_lower_str, is_upper_str, is_numeric_str, is_printable_str],
)
def test_string_predicates_true_for_empty(func):
    assert func("") is True


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha_str("caf\u00e9") is False
    assert is_printable_str("\u2620") is False