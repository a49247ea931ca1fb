"""Parsing of conversion specifications that follow a '%' sign."""

from __future__ import annotations

from dataclasses import dataclass

from printfmt.textutils import atoi

CONVERSIONS = "sSpdDioOuUxXcC%"
FLAG_CHARS = "#0-+ hljz123456789."


@dataclass
class FormatSpec:
    """Flags, width, precision and conversion of one specification."""

    zero: bool = False
    plus: bool = False
    minus: bool = False
    space: bool = False
    alternate: bool = False
    char: bool = False
    short: bool = False
    long_long: bool = False
    long: bool = False
    intmax: bool = False
    size: bool = False
    width: int = 0
    precision: int = 0
    has_precision: bool = False
    conversion: str = ""


@dataclass(frozen=True)
class ParsedSpec:
    """Result of parsing the text after a '%'.

    ``length`` is the number of characters consumed. For a valid
    specification that is up to and including the conversion character;
    for an invalid one it is up to and including the offending character,
    which ``render_invalid`` writes out.
    """

    spec: FormatSpec
    length: int
    invalid_at: int | None = None

    @property
    def is_valid(self) -> bool:
        return self.invalid_at is None


def _digit_count_minus_one(value: int) -> int:
    count = 0
    while value >= 10:
        value //= 10
        count += 1
    return count


def _apply_flag(spec: FormatSpec, text: str, pos: int) -> None:
    ch = text[pos]
    prev = text[pos - 1] if pos > 0 else ""
    nxt = text[pos + 1] if pos + 1 < len(text) else ""
    if ch == "+":
        spec.plus = True
    elif ch == "-":
        spec.minus = True
    elif ch == " ":
        spec.space = True
    elif ch == "#":
        spec.alternate = True
    elif ch == "h":
        if nxt != "h" and prev != "h":
            spec.short = True
        else:
            spec.char = True
    elif ch == "l":
        if nxt != "l" and prev != "l":
            spec.long = True
        else:
            spec.long_long = True
    elif ch == "j":
        spec.intmax = True
    elif ch == "z":
        spec.size = True


def parse_flags(text: str, stop: int) -> FormatSpec:
    """Read flags, width, precision and length modifiers from ``text``.

    Characters up to and including index ``stop`` are examined. A width
    or precision number is read whole; the character right after a '.'
    is consumed as part of the precision even when it is not a digit.
    """
    spec = FormatSpec()
    pos = 0
    while pos <= stop and pos < len(text):
        ch = text[pos]
        if ch == "0":
            spec.zero = True
        elif "1" <= ch <= "9":
            spec.width = atoi(text[pos:])
            pos += _digit_count_minus_one(spec.width)
        elif ch == ".":
            pos += 1
            spec.precision = atoi(text[pos:])
            spec.has_precision = True
            pos += _digit_count_minus_one(spec.precision)
        else:
            _apply_flag(spec, text, pos)
        pos += 1
    return spec


def _first_non_flag(text: str, end: int) -> int | None:
    return next(
        (pos for pos, ch in enumerate(text[:end]) if ch not in FLAG_CHARS),
        None,
    )


def parse_spec(text: str) -> ParsedSpec:
    """Parse the specification at the start of ``text`` (the text after '%').

    The conversion is the first character from ``CONVERSIONS``; when there
    is none the conversion is empty and the whole text is consumed. Any
    character before the conversion that is not a flag character makes
    the specification invalid.
    """
    end = next(
        (pos for pos, ch in enumerate(text) if ch in CONVERSIONS), len(text)
    )
    conversion = text[end] if end < len(text) else ""
    bad = _first_non_flag(text, end)
    if bad is not None:
        spec = parse_flags(text, bad)
        spec.conversion = conversion
        return ParsedSpec(spec=spec, length=bad + 1, invalid_at=bad)
    spec = parse_flags(text, end)
    spec.conversion = conversion
    return ParsedSpec(spec=spec, length=end + 1 if conversion else end)


def render_invalid(text: str, spec: FormatSpec) -> str:
    """Render the first non-flag character of ``text`` padded to the width.

    The padding is zeros when the zero flag is set without left
    alignment, spaces otherwise; with left alignment the character comes
    first. Text without a non-flag character renders as nothing.
    """
    bad = _first_non_flag(text, len(text))
    if bad is None:
        return ""
    ch = text[bad]
    pad = max(spec.width - 1, 0)
    if spec.minus:
        return ch + " " * pad
    fill = "0" if spec.zero else " "
    return fill * pad + ch