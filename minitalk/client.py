"""Command that sends a message to a server process one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Optional, Sequence, Union

from .charclass import is_digit
from .numbers import atoi
from .printf import print_formatted
from .protocol import encode_message

PID_MIN = 100
PID_MAX = 99998
DEFAULT_DELAY = 0.0005


class UsageError(Exception):
    """The command line arguments are not acceptable."""


def validate_pid(text: str) -> int:
    """Parse a process id made of digits only, within 100..99998."""
    if not all(is_digit(ch) for ch in text):
        raise UsageError(f"process id must contain digits only: {text!r}")
    pid = atoi(text)
    if not PID_MIN <= pid <= PID_MAX:
        raise UsageError(f"process id out of range: {text!r}")
    return pid


def send_message(pid: int, message: Union[str, bytes], delay: float = DEFAULT_DELAY) -> None:
    """Signal each bit of message to pid, pausing delay seconds after each."""
    for bit in encode_message(message):
        os.kill(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        time.sleep(delay)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the client: ``client <pid> <message>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) != 2:
            raise UsageError("expected a process id and a message")
        pid = validate_pid(args[0])
        send_message(pid, os.fsencode(args[1]))
    except (UsageError, OSError):
        print_formatted("%s", "Error\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())