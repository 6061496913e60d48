import io

import pytest

from minitalk.printf import format_string, print_formatted


def test_plain_text_passes_through():
    assert format_string("hello world") == "hello world"


def test_percent_literal():
    assert format_string("100%%") == "100%"


def test_char_from_int_and_str():
    assert format_string("%c%c", 65, "z") == chr(65) + "z"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_string("%c", "ab")


def test_string_and_null():
    assert format_string("[%s]", "abc") == "[abc]"
    assert format_string("%s", None) == "(null)"


@pytest.mark.parametrize("n", [0, 7, -7, 42, 2147483647, -2147483648])
def test_signed_matches_str(n):
    assert format_string("%d", n) == str(n)
    assert format_string("%i", n) == str(n)


def test_signed_wraps_to_32_bits():
    assert format_string("%d", 2**31) == str(-(2**31))


@pytest.mark.parametrize("n", [0, 1, 4294967295, 123456])
def test_unsigned_matches_str(n):
    assert format_string("%u", n) == str(n)


def test_unsigned_of_negative_wraps():
    assert int(format_string("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 15, 16, 255, 0xDEADBEEF, -1])
def test_hex_round_trip(n):
    lower = format_string("%x", n)
    upper = format_string("%X", n)
    assert int(lower, 16) == n & 0xFFFFFFFF
    assert lower == lower.lower()
    assert upper == lower.upper()


@pytest.mark.parametrize("n", [0, 1, 0x7FFF5FBFF8AC, 2**64 - 1])
def test_pointer_matches_hex(n):
    assert format_string("%p", n) == hex(n)


def test_pointer_none_is_zero():
    assert format_string("%p", None) == hex(0)


def test_unknown_conversion_consumes_nothing():
    assert format_string("%q%d", 5) == "5"


def test_trailing_percent_dropped():
    assert format_string("ab%") == "ab"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        format_string("%d", "12")


def test_print_formatted_writes_and_counts():
    buffer = io.StringIO()
    count = print_formatted("%s=%d %x %p%%", "pid", 4242, 255, 16, file=buffer)
    written = buffer.getvalue()
    assert written == format_string("%s=%d %x %p%%", "pid", 4242, 255, 16)
    assert count == len(written)


def test_print_formatted_defaults_to_stdout(capsys):
    count = print_formatted("%d\n", 12345)
    out = capsys.readouterr().out
    assert out == "12345\n"
    assert count == len(out)