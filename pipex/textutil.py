"""String helpers with C-library semantics: splitting, number parsing, trimming."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _wrap_signed(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _parse_integer(text: str) -> int:
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and _is_digit(text[pos]):
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [field for field in s.split(sep) if field]


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way ``atoi`` does, wrapping to 32 bits."""
    return _wrap_signed(_parse_integer(text), 32)


def atol(text: str) -> int:
    """Parse a leading decimal integer the way ``atol`` does, wrapping to 64 bits."""
    return _wrap_signed(_parse_integer(text), 64)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError("itoa expects an integer")
    return str(n)


def strtrim(s: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``s``."""
    return s.strip(chars)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` wholly inside the first ``limit`` characters of ``haystack``.

    Returns the index of the first match, or ``None``. An empty needle matches at 0.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    if limit < len(needle):
        return None
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; the result's sign orders ``a`` against ``b``."""
    if n < 0:
        raise ValueError("n must not be negative")
    for pos in range(n):
        ca = ord(a[pos]) if pos < len(a) else 0
        cb = ord(b[pos]) if pos < len(b) else 0
        if ca != cb or ca == 0:
            return ca - cb
    return 0