"""The demonstration cases run by the demo command."""

from __future__ import annotations

from dataclasses import dataclass

_POINTER = 0x10A0B0C0


@dataclass(frozen=True)
class DemoCase:
    """One demonstrated call: its heading, description, format and arguments.

    ``fmt`` is given to the package's formatter and ``reference_fmt`` is
    the format the reference output is printed with.
    """

    heading: str
    description: str
    fmt: str
    args: tuple
    reference_fmt: str


@dataclass(frozen=True)
class DemoSection:
    """A titled group of demonstration cases."""

    title: str
    cases: tuple[DemoCase, ...]


def _case(heading, description, fmt, args=(), reference_fmt=None):
    return DemoCase(
        heading=heading,
        description=description,
        fmt=fmt,
        args=tuple(args),
        reference_fmt=fmt if reference_fmt is None else reference_fmt,
    )


def demo_sections() -> tuple[DemoSection, ...]:
    """Return every demonstration section in the order it is shown."""
    simple = DemoSection(
        "Simple Test",
        (
            _case("%s", "|%s|, Hello World", "|%s|\n", ("Hello World",)),
            _case(
                "%p",
                "|%p|, char *str = Hello World",
                "|%p|\n",
                (_POINTER,),
                "|%p|\n\n",
            ),
            _case("%d", "|%d|, 10000", "|%d|\n", (10000,)),
            _case("%%", "|%%|", "|%%|\n", (), "|%%|\n\n"),
        ),
    )
    less_simple = DemoSection(
        "Less Simple Test",
        (
            _case(
                "Multiple Convertions",
                "|%s| |%d| |%s| |%d| |%p|, Hello World, 1, Hello Again, 2, "
                "char *lt = Hello",
                "||%s| |%d| |%s| |%d| |%p|\n",
                ("Hello World", 1, "Hello Again", 2, _POINTER),
                "|%s| |%d| |%s| |%d| |%p|\n",
            ),
        ),
    )
    slightly = DemoSection(
        "Slightly Complicated Test",
        (
            _case("%S", "|%S| ,\u2620", "|%s|\n", ("\u2620",)),
            _case("%D", "|%D|, 123456", "|%D|\n", (123456,), "|%D|\n\n"),
            _case("%i", "|%i|, 123456", "|%i|\n", (123456,), "|%i|\n\n"),
            _case("%o", "|%o|, 255255", "|%o|\n", (255255,), "|%o|\n\n"),
            _case("%O", "|%O|, 255255", "|%O|\n", (255255,), "|%O|\n\n"),
            _case(
                "%u",
                "|%u|, unsigned int l = 2148473650",
                "|%u|\n",
                (2148473650,),
                "|%u|\n\n",
            ),
            _case(
                "%U",
                "|%U|, unsigned int L = 2148473650",
                "|%U|\n",
                (2148473650,),
                "|%U|\n\n",
            ),
            _case("%x", "|%x|, 255255", "|%x|\n", (255255,), "|%x|\n\n"),
            _case("%X", "|%X|, 255255", "|%X|\n", (255255,), "|%X|\n\n"),
            _case("%c", "|%c|, H", "|%c|\n", (ord("H"),), "|%c|\n\n"),
            _case("%C", "|%C|, H", "|%C|\n", (ord("H"),), "|%C|\n\n"),
        ),
    )
    complicated = DemoSection(
        "Complicated Test",
        (
            _case(
                "",
                "|%c| |%d| |%d| |%c|,  Hello World, 1, 2, Hello Again",
                "|%s| |%d| |%d| |%s|\n",
                ("Hello World", 1, 2, "Hello Again"),
            ),
        ),
    )
    more_complicated = DemoSection(
        "More Complicated Test",
        (
            _case("", "| %-10d |,  int number = 1000", "| %-10d |\n", (1000,)),
            _case("", "| %010d |,  int number = 1000", "| %010d |\n", (1000,)),
            _case("", "| %-#10x |,  int number = 1000", "| %-#10x |\n", (1000,)),
            _case("", "| %#x |,  int number = 1000", "| %#x |\n", (1000,)),
            _case("", "| %+10d |,  int number = 1000", "|%+10d|\n", (1000,)),
        ),
    )
    more_stuff = DemoSection(
        "More Stuff To Test",
        (
            _case("hh", "|%hhd|,  char a = 'a'", "|%hhd|\n", (ord("a"),)),
            _case("", "|%hhx|,  unsigned char u_a = 'a'", "|%hhx|\n", (ord("a"),)),
            _case("h", "|%hd|,  short_int = 3648", "|%hd|\n", (3648,)),
            _case("", "|%ld|,  lng = 123456789456123", "|%ld|\n", (123456789456123,)),
            _case(
                "",
                "|%lld|,  llng = 9,223,372,036,854,775,807",
                "|%lld|\n",
                (9223372036854775807,),
            ),
        ),
    )
    finally_ = DemoSection(
        "And Finaly",
        (
            _case("", "| %.5d |,  int num = 123456789", "| %5d |\n", (123456789,)),
        ),
    )
    return (
        simple,
        less_simple,
        slightly,
        complicated,
        more_complicated,
        more_stuff,
        finally_,
    )