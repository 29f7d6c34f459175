"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any

_UINT32 = (1 << 32) - 1
_UINT64 = (1 << 64) - 1


def _as_int32(value: int) -> int:
    value = int(value) & _UINT32
    return value - (1 << 32) if value >= 1 << 31 else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _format_string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _format_pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _UINT64
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _format_signed(value: Any) -> str:
    return str(_as_int32(value))


def _format_unsigned(value: Any) -> str:
    return str(int(value) & _UINT32)


def _format_hex_lower(value: Any) -> str:
    return f"{int(value) & _UINT32:x}"


def _format_hex_upper(value: Any) -> str:
    return f"{int(value) & _UINT32:X}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": _format_pointer,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
}


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt``.

    Unknown conversions are dropped without consuming an argument; extra
    arguments are ignored. Too few arguments raise ``TypeError``.
    """
    values = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            out.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError(f"not enough arguments for format {fmt!r}") from None
        out.append(convert(value))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)