"""Bit-level encoding of messages as a stream of two distinct signals.

Each byte is sent most significant bit first; a 1 bit is carried by the
first user signal and a 0 bit by the second.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

BITS_PER_BYTE = 8


def encode_byte(value: int) -> list[int]:
    """Return the eight bits of value, most significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return [(value >> shift) & 1 for shift in reversed(range(BITS_PER_BYTE))]


def encode_message(message: Union[str, bytes]) -> Iterator[int]:
    """Yield the bits of every byte of message; text is encoded as UTF-8."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    for value in data:
        yield from encode_byte(value)


@dataclass
class BitDecoder:
    """Collects bits and hands back each byte once eight have arrived."""

    _value: int = field(default=0, init=False)
    _count: int = field(default=0, init=False)

    def feed(self, bit: int) -> Optional[int]:
        """Add one bit; return the completed byte, or None if it is partial."""
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self._value = ((self._value << 1) | int(bit)) & 0xFF
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        self._count = 0
        return self._value