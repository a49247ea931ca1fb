"""Small text and number helpers used by the formatter and its callers."""

from __future__ import annotations

_SPACES = frozenset(" \n\t\r\f\v")
_TRIM_CHARS = " \t\n"
_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_INT_MAX_TEXT = "2147483647"


def _wrap_int32(value: int) -> int:
    """Reduce an integer to the range of a 32-bit signed int."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def is_space(ch: str) -> bool:
    """Return True if ``ch`` is a single whitespace character."""
    return len(ch) == 1 and ch in _SPACES


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and
    digits are read until the first non-digit. Text without digits gives
    0. The result wraps like a 32-bit int.
    """
    pos = 0
    length = len(text)
    while pos < length and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    number = 0
    while pos < length and "0" <= text[pos] <= "9":
        number = number * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return _wrap_int32(number * sign)


def itoa(value: int) -> str:
    """Return the decimal text of ``value`` taken as a 32-bit int."""
    return str(_wrap_int32(value))


def _digits_in_base(magnitude: int, base: int) -> str:
    if magnitude == 0:
        return "0"
    out = []
    while magnitude:
        magnitude, rem = divmod(magnitude, base)
        out.append(_DIGITS[rem])
    return "".join(reversed(out))


def itoa_base(value: int, base: int) -> str:
    """Return ``value`` written in ``base`` with upper-case letter digits.

    A minus sign is written only in base 10; in other bases the
    magnitude of a negative value is written.
    """
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}, got {base}")
    negative = value < 0 and base == 10
    digits = _digits_in_base(abs(value), base)
    return "-" + digits if negative else digits


def nbr_to_oct(value: int) -> str:
    """Return ``value`` in octal, with a leading minus sign if negative."""
    digits = _digits_in_base(abs(value), 8)
    return "-" + digits if value < 0 else digits


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def trim(text: str) -> str:
    """Strip spaces, tabs and newlines from both ends of ``text``."""
    return text.strip(_TRIM_CHARS)


def check_int_max(text: str) -> int:
    """Compare numeric text with the 32-bit int limit, character by character.

    Returns -1 when a negative number's digits sort after the limit,
    1 when a non-negative number's text sorts after it, and 0 otherwise.
    The comparison is textual, not numeric.
    """
    if text.startswith("-"):
        return -1 if text[1:] > _INT_MAX_TEXT else 0
    return 1 if text > _INT_MAX_TEXT else 0


def find_bounded(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` wholly inside the first ``limit`` characters.

    Returns the index of the first match, or None when there is none.
    An empty needle matches at index 0.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index