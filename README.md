# metalib

A small toolbox of pure-Python helpers. It has no dependencies outside the standard library.

## Modules

### `metalib.libc`

These string and number helpers follow the classic C conventions.

- `atoi(text)` parses the first run of ASCII digits. Every `-` that comes before the digits flips the sign. A magnitude above `INT_MAX` (2**31 - 1) gives `0`, and so does text with no digits.
- `is_prime(nb)` returns `True` for prime numbers.
- `isneg(value)` returns `True` for zero and for negative values.
- `strcmp(s1, s2)` returns the code-point difference at the first position where the two strings differ. It returns `0` for equal strings.
- `strncmp(s1, s2, n)` works like `strcmp` on at most `n` characters. The first character is always compared, even when `n` is zero or negative.
- `strstr(haystack, needle)` returns the tail of `haystack` that starts at `needle`, or `None` if there is no match. An empty needle never matches.
- `strncpy(src, n)` returns the characters of `src` at indices `0` to `n`, so it gives up to `n + 1` characters.

### `metalib.output`

These writers take an optional `stream` argument.

- `putchar(c, stream)` writes to standard output by default.
- `putstr(text, stream)` writes to standard output by default.
- `put_nbr(nb, stream)` writes the decimal form of `nb` to standard output by default.
- `puterr(text, stream)` writes to standard error by default.
- `mprintf(fmt, *args, out=None, err=None)` is a minimal formatter. It understands these directives:
  - `%s` writes a string.
  - `%d` and `%i` write an integer.
  - `%c` writes a character. An integer argument is converted with `chr`.
  - `%e` writes its string argument to the error stream.

  Any other character after `%` is dropped without using an argument. `mprintf` raises `ValueError` when it runs out of arguments.

### `metalib.linked_list`

This module holds a singly linked list of integers.

- `Node` is a dataclass with the fields `data` and `next`.
- `LinkedList(values=())` builds a list that holds `values` in their given order.
- `push_front(data)` inserts at the head and returns the new head node.
- The list supports iteration and `len()`.
- `dump(stream=None)` writes `data == <value>` on a line for each value, then one blank line.

### `metalib.ranks`

These helpers work on text and on lists of lines.

- `count_char(text, char)` counts the occurrences of `char` in `text`.
- `cut(text, delim)` returns `text` up to its first `delim`.
- `file_to_text(path)` reads at most 1,000,000 bytes of a file and stops at the first NUL byte. It decodes the bytes as UTF-8 and replaces undecodable bytes.
- `word_array(text)` splits `text` into runs of ASCII letters and digits.
- `offset(text, prefix)` drops as many leading characters as `prefix` has. It does not check that they match.
- `extend(lines, added_slots)` copies `lines` and appends `added_slots` entries of `None`. A negative count raises `ValueError`.
- `print_lines(lines, stream=None)` writes each line followed by a newline.
- `find_prefixed(lines, prefix)` returns the first line that starts with `prefix`, or `None` if there is none.
  - The comparison stops when either string ends.
  - So a line that is itself a prefix of `prefix` also matches. The empty line is one such line.
- `find_prefixed_index(lines, prefix)` works like `find_prefixed` but returns the line's index. It returns `0` when nothing matches.
- `clone(lines)` returns an independent list copy.

### `metalib.collision`

This module tests positions of on-screen assets.

- `Asset(x, y, width, height)` holds an asset's position and texture size.
- `detect_collision(first, second)` compares the offsets from `first` to `second` with the summed sizes.
  - It returns `True` when the x offset is at most the summed widths, or when the y offset is at most the summed heights.
  - The offsets are signed, not absolute.
- `detect_click_on_asset(asset, click_position)` returns `True` only when `click_position` equals the asset's `(x, y)` exactly. It returns `False` when `click_position` is `None`, which means no click happened.

## What it does not do

The package does not open windows or load textures, and it does not draw sprites. It does not poll the mouse, the keyboard or window events either. `metalib.collision` works only on the positions and sizes you give it. It provides no command-line program.

## Install

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Examples

```python
import sys

from metalib.libc import atoi, strstr
from metalib.output import mprintf
from metalib.linked_list import LinkedList
from metalib.ranks import word_array, find_prefixed
from metalib.collision import Asset, detect_click_on_asset

atoi("--42abc")                       # 42
strstr("hello world", "wor")          # "world"

mprintf("%s has %d items\n", "cart", 3, out=sys.stdout, err=sys.stderr)

lst = LinkedList([1, 2, 3])
lst.push_front(0)
list(lst)                             # [0, 1, 2, 3]

word_array("ls -la /tmp")             # ["ls", "la", "tmp"]
find_prefixed(["PATH=/bin", "HOME=/root"], "HOME=")  # "HOME=/root"

detect_click_on_asset(Asset(10, 20, 32, 32), (10, 20))  # True
```

## Tests

```
pytest
```