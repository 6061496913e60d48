"""Send text between processes one bit at a time over SIGUSR1 and SIGUSR2."""

__version__ = "0.1.0"
__all__ = [
    "charclass",
    "client",
    "memory",
    "numbers",
    "printf",
    "protocol",
    "server",
    "strings",
]