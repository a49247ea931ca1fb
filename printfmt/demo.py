"""A command that prints every demonstration case with its output."""

from __future__ import annotations

import argparse
import io
import sys
from collections.abc import Iterator
from typing import Any

from printfmt.demo_cases import DemoCase, DemoSection, demo_sections
from printfmt.formatter import format_bytes

_STARS = b"*" * 78 + b"\n"
_DASHES = b"-" * 78 + b"\n"
_DOTS = b"." * 78 + b"\n"


def _line(text: str) -> bytes:
    return text.encode("utf-8") + b"\n"


def _render_case(case: DemoCase, first: bool) -> Iterator[bytes]:
    if not first:
        yield b"\n" + _DOTS
    if case.heading:
        yield _line(case.heading)
    yield _DASHES
    yield b"Test:\n"
    yield _line(case.description)
    yield _DASHES
    yield _DASHES
    yield b"\n"
    yield b"formatted = \n" + format_bytes(case.fmt, *case.args)
    yield b"\n"
    yield b"reference = \n" + format_bytes(case.reference_fmt, *case.args)
    yield _DASHES


def _render_section(section: DemoSection, first: bool) -> Iterator[bytes]:
    if not first:
        yield b"\n"
    yield _STARS
    yield _line(section.title)
    yield _STARS
    for index, case in enumerate(section.cases):
        yield from _render_case(case, index == 0)
    yield _STARS


def _render_demo() -> bytes:
    return b"".join(
        chunk
        for index, section in enumerate(demo_sections())
        for chunk in _render_section(section, index == 0)
    )


def run_demo(out: Any) -> int:
    """Write the whole demonstration to ``out`` and return its size in bytes.

    ``out`` may be a binary stream or a text stream; a text stream
    receives the output decoded as UTF-8.
    """
    data = _render_demo()
    if isinstance(out, io.TextIOBase):
        out.write(data.decode("utf-8", "replace"))
    else:
        out.write(data)
    return len(data)


def main(argv: list[str] | None = None) -> int:
    """Print the demonstration to standard output."""
    parser = argparse.ArgumentParser(
        prog="printfmt-demo",
        description="Show the output of the formatter for a set of examples.",
    )
    parser.parse_args(argv)
    sys.stdout.flush()
    stream = getattr(sys.stdout, "buffer", sys.stdout)
    run_demo(stream)
    stream.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())