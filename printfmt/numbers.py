"""Rendering of signed and unsigned integer conversions."""

from __future__ import annotations

from printfmt.spec import FormatSpec

_INTMAX_BITS = 64
_DECIMAL = "0123456789"
_OCTAL = "01234567"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"

_ALPHABETS = {
    "o": _OCTAL,
    "O": _OCTAL,
    "u": _DECIMAL,
    "U": _DECIMAL,
    "x": _HEX_LOWER,
    "p": _HEX_LOWER,
    "X": _HEX_UPPER,
}


def _wrap(value: int, bits: int, signed: bool) -> int:
    """Reduce ``value`` to an integer of ``bits`` bits, two's complement."""
    value &= (1 << bits) - 1
    if signed and value >> (bits - 1):
        value -= 1 << bits
    return value


def to_signed(value: int, spec: FormatSpec) -> int:
    """Narrow ``value`` to the signed type chosen by the length modifiers.

    ``D`` behaves as ``ld``. Without a modifier the value is a 32-bit int.
    """
    if spec.long or spec.conversion == "D" or spec.long_long:
        bits = _INTMAX_BITS
    elif spec.short:
        bits = 16
    elif spec.char:
        bits = 8
    elif spec.size or spec.intmax:
        bits = _INTMAX_BITS
    else:
        bits = 32
    return _wrap(value, bits, signed=True)


def to_unsigned(value: int, spec: FormatSpec) -> int:
    """Narrow ``value`` to the unsigned type chosen by the length modifiers.

    ``O``, ``U`` and ``p`` behave as if the ``l`` modifier were given.
    Without a modifier the value is a 32-bit unsigned int.
    """
    wide = (
        spec.long_long
        or spec.long
        or spec.intmax
        or spec.size
        or spec.conversion in ("O", "U", "p")
    )
    if wide:
        bits = _INTMAX_BITS
    elif spec.short:
        bits = 16
    elif spec.char:
        bits = 8
    else:
        bits = 32
    return _wrap(value, bits, signed=False)


def _in_base(value: int, alphabet: str) -> str:
    base = len(alphabet)
    out = [alphabet[value % base]]
    value //= base
    while value:
        value, rem = divmod(value, base)
        out.append(alphabet[rem])
    return "".join(reversed(out))


def _fill(ch: str, count: int) -> str:
    return ch * max(count, 0)


def format_signed(value: int, spec: FormatSpec) -> str:
    """Render ``value`` for a ``d``, ``i`` or ``D`` conversion."""
    nb = to_signed(value, spec)
    negative = nb < 0
    digits = str(abs(nb))
    unsigned_len = len(digits)
    prec = spec.precision

    length = unsigned_len + negative
    if not negative and length < prec:
        length = prec
    if negative and length <= prec:
        length = prec + 1
    suppressed = spec.has_precision and nb == 0 and prec == 0
    if suppressed:
        length = 0

    zero_pad = spec.zero and not spec.has_precision
    parts: list[str] = []
    if negative and zero_pad:
        parts.append("-")

    width = spec.width
    if (spec.space or spec.plus) and not negative:
        if width:
            width -= 1
        if spec.plus and zero_pad:
            parts.append("+")
        elif spec.space and not spec.plus:
            parts.append(" ")

    if not spec.minus:
        parts.append(_fill("0" if zero_pad else " ", width - length))

    if negative and not zero_pad:
        parts.append("-")
    if spec.plus and not zero_pad and not negative:
        parts.append("+")
    parts.append(_fill("0", prec - unsigned_len))
    if not suppressed:
        parts.append(digits)
    if spec.minus:
        parts.append(_fill(" ", width - length))
    return "".join(parts)


def format_unsigned(value: int, spec: FormatSpec) -> str:
    """Render ``value`` for an ``o``, ``O``, ``u``, ``U``, ``x``, ``X`` or ``p`` conversion.

    Raises ValueError for any other conversion.
    """
    conv = spec.conversion
    alphabet = _ALPHABETS.get(conv)
    if alphabet is None:
        raise ValueError(f"not an unsigned conversion: {conv!r}")
    nb = to_unsigned(value, spec)
    digits = _in_base(nb, alphabet)
    ndigits = len(digits)
    prec = spec.precision

    length = max(ndigits, prec)
    suppressed = spec.has_precision and nb == 0 and prec == 0
    if suppressed:
        length = 0

    octal_prefix = (
        conv in ("o", "O")
        and spec.alternate
        and (nb != 0 or (spec.has_precision and prec == 0))
    )
    hex_prefix = (conv in ("x", "X") and spec.alternate and nb != 0) or conv == "p"

    width = spec.width
    if octal_prefix and ndigits >= prec:
        width -= 1
    if hex_prefix:
        width -= 2

    zero_pad = spec.zero and not spec.has_precision
    parts: list[str] = []
    if not spec.minus and not zero_pad:
        parts.append(_fill(" ", width - length))
    if hex_prefix:
        parts.append("0X" if conv == "X" else "0x")
    counted = ndigits
    if octal_prefix:
        counted += 1
        parts.append("0")
    if zero_pad and not spec.minus:
        parts.append(_fill("0", width - length))
    parts.append(_fill("0", prec - counted))
    if not suppressed:
        parts.append(digits)
    if spec.minus:
        parts.append(_fill(" ", width - length))
    return "".join(parts)