"""Character-class tests for single characters and whole strings."""

from __future__ import annotations


def _code(ch: str | int) -> int:
    """Return the code of a one-character string, or an int unchanged."""
    if isinstance(ch, bool):
        raise TypeError("expected a character or an integer code")
    if isinstance(ch, int):
        return ch
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    raise TypeError("expected a character or an integer code")


def is_blank(ch: str | int) -> bool:
    """Return True for a space or a horizontal tab."""
    return _code(ch) in (ord(" "), ord("\t"))


def is_cntrl(ch: str | int) -> bool:
    """Return True for codes below 32 and for DEL (127)."""
    code = _code(ch)
    return code < 32 or code == 127


def is_graph(ch: str | int) -> bool:
    """Return True for visible ASCII characters, '!' through '~'."""
    return ord("!") <= _code(ch) <= ord("~")


def is_xdigit(ch: str | int) -> bool:
    """Return True for the letters a-f and A-F and for the codes 0 through 9.

    The decimal range is checked against the raw codes 0-9, not against
    the characters '0'-'9', so a digit character is not accepted.
    """
    code = _code(ch)
    return (
        0 <= code <= 9
        or ord("a") <= code <= ord("f")
        or ord("A") <= code <= ord("F")
    )


def _all_in_range(text: str, *ranges: tuple[str, str]) -> bool:
    return all(any(low <= ch <= high for low, high in ranges) for ch in text)


def is_alpha_str(text: str) -> bool:
    """Return True if every character is an ASCII letter (True when empty)."""
    return _all_in_range(text, ("A", "Z"), ("a", "z"))


def is_lower_str(text: str) -> bool:
    """Return True if every character is an ASCII lower-case letter."""
    return _all_in_range(text, ("a", "z"))


def is_upper_str(text: str) -> bool:
    """Return True if every character is an ASCII upper-case letter."""
    return _all_in_range(text, ("A", "Z"))


def is_numeric_str(text: str) -> bool:
    """Return True if every character is an ASCII decimal digit."""
    return _all_in_range(text, ("0", "9"))


def is_printable_str(text: str) -> bool:
    """Return True if every character lies between space and '~'."""
    return _all_in_range(text, (" ", "~"))