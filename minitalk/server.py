"""Command that prints its process id and writes out bytes received as signals."""

from __future__ import annotations

import os
import signal
import sys
from types import FrameType
from typing import BinaryIO, Optional, Sequence

from .printf import print_formatted
from .protocol import BitDecoder


class SignalReceiver:
    """Turns the two user signals into bits and writes each completed byte."""

    def __init__(self, output: Optional[BinaryIO] = None) -> None:
        self._output = output if output is not None else sys.stdout.buffer
        self._decoder = BitDecoder()

    def handle(self, signum: int, frame: Optional[FrameType]) -> None:
        """Record one bit: the first user signal is 1, anything else 0."""
        value = self._decoder.feed(1 if signum == signal.SIGUSR1 else 0)
        if value is not None:
            self._output.write(bytes([value]))
            self._output.flush()

    def install(self) -> None:
        """Register this receiver for both user signals."""
        signal.signal(signal.SIGUSR1, self.handle)
        signal.signal(signal.SIGUSR2, self.handle)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server: print the process id, then receive until interrupted."""
    print_formatted("%d\n", os.getpid())
    sys.stdout.flush()
    receiver = SignalReceiver()
    receiver.install()
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())