"""The printf-style formatter: format strings to bytes and write them."""

from __future__ import annotations

import io
import sys
from collections.abc import Iterator
from typing import Any

from printfmt.numbers import format_signed, format_unsigned
from printfmt.spec import FormatSpec, parse_spec, render_invalid
from printfmt.text import format_char, format_string

_SIGNED = frozenset("dDi")
_UNSIGNED = frozenset("pxXoOuU")
_CHARS = frozenset("cC")
_STRINGS = frozenset("sS")


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def _literal_end(fmt: str, start: int) -> int:
    index = fmt.find("%", start)
    return len(fmt) if index < 0 else index


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _percent(spec: FormatSpec) -> bytes:
    fill = b"0" if spec.zero and not spec.minus else b" "
    pad = fill * max(spec.width - 1, 0)
    return b"%" + pad if spec.minus else pad + b"%"


def _convert(spec: FormatSpec, args: Iterator[Any]) -> bytes:
    conv = spec.conversion
    if not conv:
        return b""
    if conv == "%":
        return _percent(spec)
    value = _next_arg(args)
    if conv in _CHARS:
        return format_char(value, spec)
    if conv in _STRINGS:
        return format_string(value, spec)
    if conv in _SIGNED:
        return format_signed(value, spec).encode("ascii")
    if conv in _UNSIGNED:
        return format_unsigned(value, spec).encode("ascii")
    raise ValueError(f"unknown conversion {conv!r}")


def _render(fmt: str, args: Iterator[Any]) -> Iterator[bytes]:
    size = len(fmt)
    pos = _literal_end(fmt, 0)
    yield _encode(fmt[:pos])
    while pos < size:
        if fmt[pos] != "%":
            pos += 1
            continue
        following = fmt[pos + 1 : pos + 2]
        if not following:
            return
        if following == "%":
            yield b"%"
            start = pos + 2
            end = _literal_end(fmt, start)
            yield _encode(fmt[start:end])
            pos = end
            continue
        rest = fmt[pos + 1 :]
        parsed = parse_spec(rest)
        if parsed.is_valid:
            yield _convert(parsed.spec, args)
            pos += parsed.length
        else:
            yield _encode(render_invalid(rest, parsed.spec))
            pos += parsed.invalid_at + 1
        start = pos + 1
        end = _literal_end(fmt, start)
        yield _encode(fmt[start:end])
        # Scanning resumes on the last character handled, so a '%'
        # conversion directly followed by '%' starts a new specification.
        pos = end - 1


def format_bytes(fmt: str | bytes | None, *args: Any) -> bytes:
    """Format ``args`` according to ``fmt`` and return the bytes produced.

    The format ends at its first NUL character. A ``None`` format gives
    no output. Missing arguments raise TypeError; extra ones are ignored.
    """
    if fmt is None:
        return b""
    if isinstance(fmt, (bytes, bytearray)):
        fmt = bytes(fmt).decode("utf-8", "surrogateescape")
    fmt = fmt.split("\0", 1)[0]
    return b"".join(_render(fmt, iter(args)))


def _write(stream: Any, data: bytes) -> None:
    if isinstance(stream, io.TextIOBase):
        binary = getattr(stream, "buffer", None)
        if binary is not None:
            stream.flush()
            binary.write(data)
            binary.flush()
        else:
            stream.write(data.decode("utf-8", "replace"))
        return
    stream.write(data)


def printf(fmt: str | bytes | None, *args: Any, file: Any = None) -> int:
    """Format and write to ``file`` (standard output by default).

    Returns the number of bytes written.
    """
    data = format_bytes(fmt, *args)
    _write(sys.stdout if file is None else file, data)
    return len(data)