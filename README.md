# ylibc

A compact library of C-runtime behaviours in plain Python, for code that has
to reproduce exactly what a small C library does: character classification,
the 48-bit linear congruential generator, byte and string helpers,
`printf`-style formatting and `scanf`-style parsing, plus a small
line-oriented console.

Integer widths follow a 32-bit target: `int` and `long` are 32 bits,
`long long` and `intmax_t` are 64 bits, pointers are 32 bits.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `ylibc.ctype`: the ISO 8859-1 character classes (`CharClass`, `char_class`),
  the predicates `isalnum`, `isalpha`, `isascii`, `isblank`, `iscntrl`,
  `isdigit`, `isgraph`, `islower`, `isprint`, `ispunct`, `isspace`, `isupper`,
  `isxdigit`, and `tolower` / `toupper`. Each takes a code from 0 to 255, `-1`
  for EOF, or a one-character string; `tolower` and `toupper` give back the
  same kind they were given.
- `ylibc.rand48`: `jrand48(xsubi)` advances a three-word state and returns the
  signed 32-bit result together with the new state. `Rand48(seed=None)` keeps
  its own state and offers `srand48`, `srand`, `mrand48` and `rand`.
- `ylibc.strings`: `memchr`, `memrchr`, `memcmp`, `memccpy`, `memmem`,
  `memswap`, `strlen`, `strnlen`, `strcmp`, `strncmp`, `strncpy`, `strchr`,
  `strspn`, `strcspn`, `strpbrk`, `strsep`, `strtok`, `strntoumax`, `atoi` and
  `atol`. They work on `bytes` (text is taken as ISO 8859-1), return indexes
  rather than pointers, with `None` where nothing is found, and return new
  values instead of writing into buffers. `strtok` is a generator of tokens.
- `ylibc.printf`: `sprintf(fmt, *args)` returns the formatted text;
  `snprintf(n, fmt, *args)` returns the part that fits in a buffer of `n`
  characters and the length the full output would have had. Flags, width,
  precision (including `*`), length modifiers, `%p`, and the `'` flag, which
  groups digits with `_`, are supported. `%n` takes a callable that receives
  the count of characters written so far.
- `ylibc.scanf`: `sscanf(text, fmt)` returns a `ScanResult` with `count` (the
  number of conversions, or -1 when input ran out before any), `values` (every
  stored value, `%n` results included), `consumed` and the `eof` property.
- `ylibc.terminal`: `console_command(line)` classifies a console line as a
  `ConsoleAction` (`IGNORE`, `HALT`, `UNRECOGNIZED`) together with its first
  word; `split_command(line)` splits a shell line on spaces, tabs and
  newlines; `run_console(lines, write)` drives a session; `main(argv=None)`
  runs it on standard input and output.

Empty lines and lines of 1024 bytes or more are ignored by the console and
give no words from `split_command`.

## Examples

```python
from ylibc.printf import sprintf
from ylibc.rand48 import Rand48
from ylibc.scanf import sscanf

sprintf("%05d|%-4s|%#x", 42, "ab", 255)   # '00042|ab  |0xff'

gen = Rand48(1)
gen.mrand48()                             # next signed 32-bit value

result = sscanf("12 abc", "%d %s")
result.count                              # 2
result.values                             # (12, 'abc')
```

## Console

The package installs one command. It needs a terminal id as its argument and
runs the console on standard input and standard output:

```
ylibc-console 0
```

It prints a ready banner and a prompt for each line. Type `halt` to stop it;
any other word is answered with ``"`word': Command not recognized."``. Without
a terminal id it reports that one is required and exits with status -1; when
the input ends without `halt` it exits with status 0.

## What it does not do

The console only recognises `halt`, and `split_command` only splits a line
into words: nothing in the package starts or runs other programs, so there is
no working shell. The formatting functions return strings and do not write to
terminals or files.