# pushswap

Building blocks for a two-stack integer sorting puzzle: checking the numbers
a player supplies, plus a set of small helpers for characters, byte buffers,
strings, numbers, linked lists, formatted output and line reading.

## Installation

```
pip install .
```

## Checking input numbers

`pushswap.parsing` checks a list of argument strings and returns their values.

```python
from pushswap.parsing import validate, is_valid_number, ValidationError

validate(["3", "1", "2"])        # [3, 1, 2]
validate(["1", "1"])             # raises ValidationError (duplicate)
validate(["--3"])                # raises ValidationError (not an integer)
validate(["2147483648"])         # raises ValidationError (outside 32-bit range)

is_valid_number("+96")           # True
is_valid_number("9-6")           # False
```

An argument is accepted when it is one optional sign followed only by digits.
Arguments of ten or more characters are also checked against the 32-bit
signed range (`INT_MIN` to `INT_MAX`). `ValidationError` is a subclass of
`ValueError`.

## Helpers

| Module              | Contents |
|---------------------|----------|
| `pushswap.chars`    | `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`; each takes a character code or a one-character string |
| `pushswap.memory`   | `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc` on byte buffers |
| `pushswap.strings`  | `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`, `strlcpy`, `strlcat` |
| `pushswap.numbers`  | `atoi` (wraps to 32 bits), `atol` (wraps to 64 bits), `itoa` |
| `pushswap.lists`    | `Node` and `LinkedList` with `push_front`, `push_back`, `last`, `clear`, `for_each`, `map`, `len()` and iteration |
| `pushswap.output`   | `format_printf`, `printf` (conversions `%c %s %d %i %u %x %X %p %%`), `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` |
| `pushswap.lines`    | `LineReader` and `read_lines`, reading lines from a file descriptor a fixed number of bytes at a time |

A few examples:

```python
from pushswap.numbers import atoi
from pushswap.strings import split, strnstr
from pushswap.output import format_printf
from pushswap.lists import LinkedList
from pushswap.memory import memmove

atoi("  -42abc")                         # -42
split("  3 1  2 ", " ")                  # ["3", "1", "2"]
strnstr("hello world", "world", 8)       # None: only "hello wo" is searched
format_printf("%d %x %s", -1, 255, None) # "-1 ff (null)"
LinkedList([1, 2, 3]).map(lambda x: x * 2)  # LinkedList([2, 4, 6])
memmove(bytearray(b"abcdef"), 2, 0, 3)   # bytearray(b"ababcf")
```

Searching functions in `pushswap.strings` and `pushswap.memory` return an
index, or `None` where nothing is found.

## What the package does not do

The package holds no stacks, no moves, no sorting routine and no command-line
program. It checks input numbers and provides the helpers above; applying
moves and producing a sorted sequence is left to the caller.

## Development

```
pip install -e ".[test]"
pytest
```