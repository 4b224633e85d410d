"""String and number helpers in the spirit of the classic C library."""

INT_MAX = 2**31 - 1


def _code(text: str, index: int) -> int:
    """Return the code point at ``index``, or 0 past the end of ``text``."""
    return ord(text[index]) if index < len(text) else 0


def atoi(text: str) -> int:
    """Parse the first run of digits in ``text``.

    Every ``-`` seen before the digits flips the sign. A magnitude larger
    than ``INT_MAX`` yields 0.
    """
    sign = 1
    position = 0
    for position, char in enumerate(text):
        if char.isascii() and char.isdigit():
            break
        if char == "-":
            sign = -sign
    else:
        return 0
    result = 0
    for char in text[position:]:
        if not (char.isascii() and char.isdigit()):
            break
        result = result * 10 + int(char)
    return 0 if result > INT_MAX else result * sign


def is_prime(nb: int) -> bool:
    """Return whether ``nb`` is a prime number."""
    if nb <= 1:
        return False
    return all(nb % divisor for divisor in range(2, nb))


def isneg(value: int) -> bool:
    """Return True for zero and negative values."""
    return value <= 0


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings, returning the code point difference where they differ."""
    index = 0
    while _code(s1, index) == _code(s2, index) and index < len(s1):
        index += 1
    return _code(s1, index) - _code(s2, index)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    As with the reference behaviour, the first character is always compared,
    even when ``n`` is zero or negative.
    """
    index = 0
    while (
        _code(s1, index) == _code(s2, index)
        and index < len(s1)
        and index < n - 1
    ):
        index += 1
    return _code(s1, index) - _code(s2, index)


def strstr(haystack: str, needle: str) -> str | None:
    """Return the tail of ``haystack`` starting at ``needle``, or None.

    An empty needle never matches.
    """
    size = len(needle)
    for start in range(len(haystack) - size + 1):
        if strncmp(haystack[start:], needle, size) == 0:
            return haystack[start:]
    return None


def strncpy(src: str, n: int) -> str:
    """Copy characters of ``src`` while their index does not exceed ``n``."""
    return src[: max(n + 1, 0)]