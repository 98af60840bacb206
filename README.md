# ftformat

`ftformat` is a compact printf-style formatter. Its field rules are its own and do
not rely on Python's `%` operator or `str.format`. The package also holds small
string, number, character, memory, linked-list, stream-writing and line-reading
helpers. It has no third-party dependencies.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Formatting

```python
from ftformat.formatter import render, printf

result = render("%5d|%-5s|%.3x", 42, "ab", 255)
result.text     # '   42|ab   |0ff'
result.length   # 15
str(result)     # '   42|ab   |0ff'

printf("%c%c\n", "o", "k")   # writes "ok\n" to standard output, returns 3
```

`render(fmt, *args)` returns a `Rendered` value holding the produced `text` and the
`length` count the formatter reports. `printf(fmt, *args, file=None)` writes the
text to `file` (standard output by default) and returns that count.

Supported conversions: `c s p d i u x X %`.

- Flags: `-` (left-justify) and `0` (zero-pad). A precision cancels the `0` flag for
  the numeric conversions.
- Width and precision are given as digits, or as `*` to take an integer from the
  arguments. A negative `*` width means left justification; a negative `*`
  precision counts as no precision.
- `%d`/`%i` treat the value as a 32-bit signed integer, `%u`/`%x`/`%X` as 32-bit
  unsigned, `%p` as a 64-bit address printed as `0x` plus lower-case hex
  (`None` or 0 gives `0x0`, or `0x` with a precision of 0).
- `%s` with `None` prints `(null)`; a precision cuts the string.
- `%c` accepts a one-character string or an integer code.
- An unknown conversion character produces nothing and takes no argument.
- If a `%` has no conversion character anywhere after it, formatting stops there:
  the text produced so far is kept and the reported count is 0.
- Too few arguments raise `TypeError`.

For ordinary specifications the count equals `len(text)`. A few unusual flag and
width combinations report a count that differs from the text; this is kept
deliberately.

## Building blocks

- `ftformat.spec` — `parse_spec(text, index, args=None)` reads the specification
  whose `%` is at `text[index]` into a `FormatSpec` (`flag`, `width`, `precision`,
  `conversion`) and returns it with the index just past it. Also defines
  `SPECIFIERS`, `FLAG_NONE`, `FLAG_ZERO`, `FLAG_LEFT`.
- `ftformat.padding` — `fill`, `int_length`, `hex_digits`, `pad_to_precision`.
- `ftformat.conversions` — `render_char`, `render_int`, `render_unsigned`,
  `render_hex`, `render_pointer`, `render_string`, `render_percent`, each returning a
  `Rendered`.
- `ftformat.strings` — `strchr`, `strrchr`, `strncmp`, `strnstr`, `strjoin`, `substr`,
  `strtrim`, `split`, `strmapi`. Searches return indices, or `None` when nothing is
  found; searching for `"\0"` gives the string's length.
- `ftformat.numbers` — `atoi` parses a leading decimal integer (0 when there are no
  digits; a value below the 32-bit signed range gives 0, one above it gives -1);
  `itoa` returns decimal text.
- `ftformat.charclass` — `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower`, for one-character strings or integer codes.
- `ftformat.memory` — buffer helpers on `bytearray`/`memoryview`: `memset`, `bzero`,
  `calloc`, `memcpy`, `memccpy`, `memmove`, `memchr`, `memcmp`, `strlcpy`, `strlcat`.
  Counts past the end of a buffer raise `ValueError`.
- `ftformat.linkedlist` — `LinkedList` of `Node`s with `add_front`, `add_back`,
  `last`, `len()`, iteration, `each` and `clear`.
- `ftformat.fdio` — `put_char`, `put_str`, `put_endl`, `put_nbr` write to a text
  stream (standard output by default) and return the number of characters written.
- `ftformat.lines` — `LineReader(stream, buffer_size=1)` reads a text or binary
  stream `buffer_size` at a time and yields lines without their newline. The text
  after the last newline comes as a final line (empty if the stream ends with a
  newline); after that `read_line` returns `None`.

```python
import io
from ftformat.lines import LineReader

list(LineReader(io.StringIO("one\ntwo\n"), 4))   # ['one', 'two', '']
```

## What it does not do

- No command-line tool; everything is used from Python.
- No floating-point conversions, no length modifiers (`l`, `h`, ...), and no `+`,
  space or `#` flags.