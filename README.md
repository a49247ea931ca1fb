# printfmt

`printfmt` is a printf-style formatter that follows its own rules for flags,
field width, precision and length modifiers. Its output is bytes. Wide
characters and wide strings are written as UTF-8.

## Conversions

| Conversion | Meaning |
|------------|---------|
| `%s`, `%S` | string, wide string (with `l`, `%s` is treated as wide) |
| `%c`, `%C` | character, wide character (with `l`, `%c` is treated as wide) |
| `%d`, `%i`, `%D` | signed decimal (`%D` is long) |
| `%u`, `%U` | unsigned decimal (`%U` is long) |
| `%o`, `%O` | octal (`%O` is long) |
| `%x`, `%X` | hexadecimal, lower and upper case |
| `%p` | hexadecimal with a `0x` prefix, taken as long |
| `%%` | a literal percent sign |

Flags: `#`, `0`, `-`, `+` and space.
Length modifiers: `hh`, `h`, `l`, `ll`, `j` and `z`.
Width and precision are written as `width.precision`. Integers are narrowed
to the size the length modifiers choose (32 bits without a modifier, 64 bits
for `l`, `ll`, `j` and `z`).

When a specification contains a character that is not a flag, width,
precision or length character before its conversion, that character is
written padded to the field width and formatting goes on after it.

A string argument of `None` is written as `(null)`.

## Usage

```python
from printfmt.formatter import format_bytes, printf

data = format_bytes("|%-10d|%#x|%s|", 1000, 1000, "Hello")
# b'|1000      |0x3e8|Hello|'

count = printf("%05d\n", 42)   # writes b"00042\n" to standard output, returns 6
```

`format_bytes(fmt, *args)` returns the formatted bytes. The format may be a
`str` or `bytes`; it ends at its first NUL character, and a `None` format gives
empty output. Too few arguments raise `TypeError`; extra arguments are
ignored.

`printf(fmt, *args, file=None)` writes the same bytes to `file` (standard
output by default) and returns the number of bytes written. A text stream
with an underlying binary buffer receives the bytes through that buffer.

Lower-level pieces can also be used on their own:

- `printfmt.spec`: `parse_spec` parses one specification into a `ParsedSpec`
  holding a `FormatSpec`; `parse_flags` reads flags, width and precision;
  `render_invalid` renders the invalid-character case.
- `printfmt.numbers`: `format_signed`, `format_unsigned`, and `to_signed` /
  `to_unsigned` for the narrowing by length modifier.
- `printfmt.text`: `format_char`, `format_string`, `format_wide_string`,
  `encode_wchar` and `utf8_length`.
- `printfmt.textutils`: `atoi`, `itoa`, `itoa_base`, `nbr_to_oct`, `split`,
  `trim`, `check_int_max`, `find_bounded` and `is_space`.
- `printfmt.chartypes`: `is_blank`, `is_cntrl`, `is_graph`, `is_xdigit`,
  `is_alpha_str`, `is_lower_str`, `is_upper_str`, `is_numeric_str` and
  `is_printable_str`.

## Demo

The package includes a demonstration that prints a series of example
conversions under their section headings, each with its description and
output:

```sh
printfmt-demo
```

The same output can be written to any stream with
`printfmt.demo.run_demo(out)`; the cases themselves come from
`printfmt.demo_cases.demo_sections()`.

## What it does not do

There is no floating-point conversion (`%f`, `%e`, `%g`), no `*` width or
precision taken from the arguments, and no positional (`%1$d`) arguments.

## Tests

```sh
pip install -e ".[test]"
pytest
```