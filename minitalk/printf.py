"""A small printf-style formatter supporting %c %s %p %d %i %u %x %X and %%.

Conversions take no flags, width or precision. An unknown conversion
character produces no output and consumes no argument; a lone ``%`` at the
end of the format is dropped. Integer arguments are reduced to the C type
the conversion expects: 32-bit signed for ``%d``/``%i``, 32-bit unsigned for
``%u``/``%x``/``%X`` and 64-bit unsigned for ``%p``.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Optional, TextIO

from .numbers import itoa

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _as_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


def _convert_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _convert_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _convert_pointer(value: Any) -> str:
    address = 0 if value is None else _require_int(value, "p") & _UINT64_MASK
    return f"0x{address:x}"


def _convert_signed(value: Any) -> str:
    return itoa(_as_int32(_require_int(value, "d")))


def _convert_unsigned(value: Any) -> str:
    return str(_require_int(value, "u") & _UINT32_MASK)


def _convert_hex_lower(value: Any) -> str:
    return f"{_require_int(value, 'x') & _UINT32_MASK:x}"


def _convert_hex_upper(value: Any) -> str:
    return f"{_require_int(value, 'X') & _UINT32_MASK:X}"


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _convert_char,
    "s": _convert_string,
    "p": _convert_pointer,
    "d": _convert_signed,
    "i": _convert_signed,
    "u": _convert_unsigned,
    "x": _convert_hex_lower,
    "X": _convert_hex_upper,
}


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in fmt with args and return the text.

    Raises TypeError when the format asks for more arguments than given.
    Surplus arguments are ignored.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        converter = _CONVERTERS.get(spec)
        if converter is None:
            continue
        try:
            argument = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        pieces.append(converter(argument))
    return "".join(pieces)


def print_formatted(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to file (standard output by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)