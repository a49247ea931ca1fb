"""Rendering of character and string conversions."""

from __future__ import annotations

from collections.abc import Iterable

from printfmt.spec import FormatSpec

_NULL = b"(null)"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed integer of ``bits`` bits."""
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _code(value: int | str) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    if isinstance(value, int):
        return _wrap(value, 32)
    raise TypeError(f"expected a character or an integer code, got {value!r}")


def utf8_length(code: int) -> int:
    """Return how many bytes the UTF-8 form of ``code`` takes (1 to 4)."""
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


def _utf8_raw(code: int) -> bytes:
    """Encode ``code`` byte by byte; a byte may come out as zero."""
    if code < 0x80:
        return bytes([code & 0xFF])
    if code < 0x800:
        return bytes([((code >> 6) + 0xC0) & 0xFF, code % 64 + 0x80])
    if code < 0x10000:
        return bytes(
            [
                ((code >> 12) + 0xE0) & 0xFF,
                (code >> 6) % 64 + 0x80,
                code % 64 + 0x80,
            ]
        )
    return bytes(
        [
            ((code >> 18) + 0xF0) & 0xFF,
            (code >> 12) % 64 + 0x80,
            (code >> 6) % 64 + 0x80,
            code % 64 + 0x80,
        ]
    )


def encode_wchar(code: int) -> bytes:
    """Return the UTF-8 bytes written for one wide character.

    Zero bytes are never written, so the code 0 gives no bytes.
    """
    return _utf8_raw(code).replace(b"\0", b"")


def _pad(fill: str, count: int) -> bytes:
    return fill.encode("ascii") * max(count, 0)


def format_char(value: int | str, spec: FormatSpec) -> bytes:
    """Render a ``c`` or ``C`` conversion.

    ``c`` writes one byte; ``C`` (or ``lc``) writes the UTF-8 form of a
    wide character. A zero character is written as a NUL byte. The
    padding is zeros whenever the zero flag is set.
    """
    code = _code(value)
    wide = spec.conversion == "C" or spec.long
    if not wide and not (spec.long_long or spec.size or spec.intmax):
        code = _wrap(code, 16 if spec.short else 8)
    fill = "0" if spec.zero else " "
    margin = _pad(fill, spec.width - 1)

    out = b""
    if not spec.minus and not wide:
        out += margin
    if code == 0:
        if not spec.minus and wide:
            out += margin
        out += b"\0"
        if spec.minus:
            out += margin
        return out
    if not wide:
        byte = code & 0xFF
        if byte:
            out += bytes([byte])
        if spec.minus:
            out += margin
        return out
    encoded = encode_wchar(code)
    pad = _pad(fill, spec.width - utf8_length(code))
    return encoded + pad if spec.minus else pad + encoded


def _narrow_bytes(value: str | bytes) -> bytes:
    if isinstance(value, str):
        data = value.encode("utf-8", "surrogateescape")
    elif isinstance(value, (bytes, bytearray, memoryview)):
        data = bytes(value)
    else:
        raise TypeError(f"expected a string or bytes, got {value!r}")
    return data.split(b"\0", 1)[0]


def _wide_codes(value: str | Iterable[int] | None) -> list[int] | None:
    if value is None:
        return None
    if isinstance(value, str):
        raw = [ord(ch) for ch in value]
    elif isinstance(value, Iterable) and not isinstance(value, (bytes, bytearray)):
        raw = [_code(code) for code in value]
    else:
        raise TypeError(f"expected a string or a sequence of codes, got {value!r}")
    codes = []
    for code in raw:
        if code == 0:
            break
        codes.append(code)
    return codes


def _wide_byte_len(codes: list[int], spec: FormatSpec) -> int:
    total = sum(utf8_length(code) for code in codes)
    if not (spec.has_precision and total > spec.precision):
        return total
    fitted = 0
    for code in codes:
        size = utf8_length(code)
        if fitted + size > spec.precision:
            break
        fitted += size
    return fitted


def _put_wide(codes: list[int], spec: FormatSpec, limit: int) -> bytes:
    if spec.precision and limit > spec.precision:
        limit = spec.precision
    out = bytearray()
    written = 0
    for code in codes:
        if written >= limit:
            break
        written += utf8_length(code)
        if written <= limit:
            out += _utf8_raw(code).split(b"\0", 1)[0]
    return bytes(out)


def format_wide_string(value: str | Iterable[int] | None, spec: FormatSpec) -> bytes:
    """Render a wide string (``S`` or ``ls``) as UTF-8.

    The precision counts bytes and only whole characters are written.
    ``None`` renders as ``(null)``.
    """
    codes = _wide_codes(value)
    byte_len = 0 if codes is None else _wide_byte_len(codes, spec)
    length = byte_len
    width = spec.width
    if spec.has_precision and spec.precision == 0:
        length = 0
        width += 1
    if length > 1:
        width -= length - 1
        length = 1
    if codes is None and width:
        width -= 5
    fill = "0" if spec.zero and not spec.minus else " "
    pad = _pad(fill, width - 1)
    if length and codes is not None:
        body = _put_wide(codes, spec, byte_len)
    elif codes is None:
        body = _NULL
    else:
        body = b""
    return body + pad if spec.minus else pad + body


def format_string(value: str | bytes | Iterable[int] | None, spec: FormatSpec) -> bytes:
    """Render an ``s``, ``S`` or ``ls`` conversion.

    ``None`` without a precision renders as ``(null)`` with no padding.
    """
    if value is None and not spec.has_precision:
        return _NULL
    if spec.conversion == "S" or spec.long:
        return format_wide_string(value, spec)

    data = None if value is None else _narrow_bytes(value)
    suppressed = spec.has_precision and spec.precision == 0
    length = 0 if data is None else len(data)
    if spec.precision:
        length = min(length, spec.precision)
    if suppressed:
        length = 0
    width = spec.width
    if data is None and width and not suppressed:
        width -= 6
    fill = "0" if spec.zero and not spec.minus else " "
    pad = _pad(fill, width - length)
    if length and data is not None:
        body = data[:length]
    elif data is None and not suppressed:
        body = _NULL
    else:
        body = b""
    return body + pad if spec.minus else pad + body