# minitalk

Two small command-line programs that pass text from one process to another
using only two POSIX signals. Every byte is sent most significant bit first:
`SIGUSR1` stands for a 1 bit and `SIGUSR2` for a 0 bit. The receiver puts each
group of eight bits back together into a byte and writes it to standard output.

This works only on POSIX systems, where `SIGUSR1` and `SIGUSR2` exist.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits for
signals until it is interrupted with Ctrl-C:

```
minitalk-server
```

In another terminal, send a message to that process id:

```
minitalk-client 4242 "hello, world"
```

The bytes of the message show up in the server's terminal as they arrive.

The client checks its arguments before it sends anything. It prints `Error`
and exits with status 1 when:

- it is not given exactly two arguments,
- the process id contains anything other than the digits 0–9,
- the process id is below 100 or above 99998,
- a signal cannot be delivered (for example, no such process).

A pause of half a millisecond follows every signal, so that the server has
time to handle each bit before the next one arrives.

There is no acknowledgement from the server: the client cannot tell whether
the message was received, and nothing marks where one message ends and the
next begins.

## Library use

The bit encoding can be used on its own:

```python
from minitalk.protocol import encode_message, BitDecoder

bits = list(encode_message("hi"))
decoder = BitDecoder()
received = bytes(b for b in map(decoder.feed, bits) if b is not None)
assert received == b"hi"
```

- `minitalk.protocol.encode_byte(value)` returns the eight bits of a byte;
  `encode_message(message)` yields the bits of a `str` (encoded as UTF-8) or
  of `bytes`. `BitDecoder.feed(bit)` returns a completed byte after every
  eighth bit and `None` otherwise.
- `minitalk.client.send_message(pid, message, delay)` signals each bit of a
  message to a running process; `validate_pid(text)` parses a process id and
  raises `UsageError` when it is not acceptable.
- `minitalk.server.SignalReceiver(output)` rebuilds bytes from the signals and
  writes them to a binary stream (standard output by default); `install()`
  registers it for both signals.

The package also provides small helpers that the programs use:

- `minitalk.charclass`: ASCII character classes and case conversion
  (`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`).
- `minitalk.numbers`: `atoi`, `itoa` and `digit_count` for 32-bit signed
  integers.
- `minitalk.printf`: `format_string(fmt, *args)` and
  `print_formatted(fmt, *args, file=None)`, a printf-style formatter with
  `%c %s %p %d %i %u %x %X %%` and no flags, width or precision.
- `minitalk.strings`: `split`, `trim`, `substr`, `find_within`, `compare_n`,
  `find_char`, `rfind_char` and `map_indexed`; searches return an index or
  `None`.
- `minitalk.memory`: `compare_bytes` and `find_byte` over the first `n` bytes
  of a buffer.

## Running the tests

```
pip install ".[test]"
pytest
```