"""String helpers: splitting, trimming, slicing, searching and comparing.

Searches return an index into the string, or None when nothing is found.
Characters given as integers are reduced to a byte, as the C library does.
"""

from __future__ import annotations

from typing import Callable, Optional, Union

CharLike = Union[int, str]


def _char_target(c: CharLike) -> tuple[str, int]:
    """Return the character to look for and the code the caller gave."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c, ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF), c


def _require_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(s: str, sep: str) -> list[str]:
    """Split s on the single character sep, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [part for part in s.split(sep) if part]


def trim(s: str, chars: str) -> str:
    """Remove every leading and trailing character of s that is in chars."""
    return s.strip(chars) if chars else s


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s beginning at start.

    A start beyond the end of s gives an empty string.
    """
    _require_non_negative(start, "start")
    _require_non_negative(length, "length")
    return s[start:start + length]


def find_within(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Find needle in the first limit characters of haystack.

    An empty needle is found at index 0. The match must lie wholly within
    the first limit characters.
    """
    _require_non_negative(limit, "limit")
    if not needle:
        return 0
    index = haystack.find(needle, 0, limit)
    return None if index < 0 else index


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of s1 and s2.

    Returns the difference of the character codes at the first position
    where they differ, or 0 when the first n characters agree. The end of a
    string counts as code 0.
    """
    _require_non_negative(n, "n")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def find_char(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first c in s.

    Searching for the NUL character finds the end of the string.
    """
    target, code = _char_target(c)
    index = s.find(target)
    if index >= 0:
        return index
    if code == 0:
        return len(s)
    return None


def rfind_char(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last c in s.

    Searching for the NUL character finds the end of the string.
    """
    target, code = _char_target(c)
    if code == 0:
        return len(s)
    index = s.rfind(target)
    return None if index < 0 else index


def map_indexed(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, char) for every character of s."""
    return "".join(f(i, ch) for i, ch in enumerate(s))