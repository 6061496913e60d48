import signal
from unittest import mock

import pytest

from minitalk.client import UsageError, main, send_message, validate_pid
from minitalk.protocol import encode_message


def test_validate_pid_bounds_accepted():
    assert validate_pid("100") == 100
    assert validate_pid("99998") == 99998


@pytest.mark.parametrize("text", ["99", "99999", "", "12a", "+100", "-100", " 100"])
def test_validate_pid_rejects(text):
    with pytest.raises(UsageError):
        validate_pid(text)


@mock.patch("minitalk.client.time.sleep")
@mock.patch("minitalk.client.os.kill")
def test_send_message_signals_each_bit(kill, sleep):
    send_message(4242, "hi", delay=0)
    expected = [
        mock.call(4242, signal.SIGUSR1 if bit else signal.SIGUSR2)
        for bit in encode_message("hi")
    ]
    assert kill.call_args_list == expected
    assert sleep.call_count == len(expected)


@mock.patch("minitalk.client.time.sleep")
@mock.patch("minitalk.client.os.kill")
def test_main_sends_message(kill, sleep, capsys):
    assert main(["4242", "ok"]) == 0
    assert kill.call_count == 8 * len("ok")
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("argv", [[], ["4242"], ["4242", "a", "b"], ["42", "a"], ["x1", "a"]])
@mock.patch("minitalk.client.os.kill")
def test_main_reports_error(kill, argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == "Error\n"
    assert kill.call_count == 0


@mock.patch("minitalk.client.time.sleep")
@mock.patch("minitalk.client.os.kill", side_effect=ProcessLookupError)
def test_main_reports_missing_process(kill, sleep, capsys):
    assert main(["4242", "a"]) == 1
    assert capsys.readouterr().out == "Error\n"