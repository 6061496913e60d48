"""Comparison and search over the first bytes of byte buffers."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_span(n: int, *buffers: bytes) -> None:
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"n={n} exceeds the buffer length {len(buffer)}")


def compare_bytes(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first n bytes of a and b as unsigned values.

    Returns the difference of the first pair of bytes that differ, or 0
    when the first n bytes are equal.
    """
    left, right = bytes(a), bytes(b)
    _check_span(n, left, right)
    for x, y in zip(left[:n], right[:n]):
        if x != y:
            return x - y
    return 0


def find_byte(data: BytesLike, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to value in the first n bytes.

    The value is reduced to an unsigned byte first. Returns None when it is
    not found.
    """
    buffer = bytes(data)
    _check_span(n, buffer)
    index = buffer.find(value & 0xFF, 0, n)
    return None if index < 0 else index