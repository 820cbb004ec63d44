"""Tests for exit status marker encoding and decoding."""

import pytest

from deploy_ssh.services.sentinel import (
    MISSING_EXIT_CODE,
    REMOTE_SCRIPT,
    decode,
    encode_status,
    parse_exit_code,
    strip_sentinel,
)


def test_remote_script_prints_marker_after_command():
    assert REMOTE_SCRIPT == 'bash -s; printf "[exit_code:%s]" $?;'


def test_encode_status():
    assert encode_status(7) == "[exit_code:7]"


def test_remote_script_template_round_trips():
    # The template printf fills in on the remote side
    template = REMOTE_SCRIPT.split('printf "')[1].split('"')[0]
    assert template == encode_status("%s")

    output, exit_code = decode("deployed\n" + template % 42)

    assert (output, exit_code) == ("deployed\n", 42)


def test_strip_removes_marker():
    assert strip_sentinel("hello\n[exit_code:0]") == "hello\n"


def test_strip_removes_every_marker():
    assert strip_sentinel("[exit_code:1]a[exit_code:2]") == "a"


def test_parse_missing_marker_is_minus_one():
    assert parse_exit_code("connection closed by remote host\n") == MISSING_EXIT_CODE == -1


def test_parse_non_integer_payload_is_minus_one():
    assert parse_exit_code("[exit_code:abc]") == -1


def test_parse_uses_last_marker():
    # A command that prints a marker-shaped token cannot spoof its status
    assert parse_exit_code("[exit_code:0]\nreal output\n[exit_code:3]") == 3


@pytest.mark.parametrize("status", [0, 1, 7, 127, 255])
def test_decode_recovers_reported_status(status: int):
    stream = "line one\nline two\n" + encode_status(status)

    output, exit_code = decode(stream)

    assert exit_code == status
    assert output == "line one\nline two\n"
