"""Tests for the exception hierarchy."""

from deploy_ssh.services.errors import (
    ProcessFailedError,
    RemoteCommandError,
    SSHError,
    TransferError,
    TransportProtocolError,
    TransportTimeoutError,
)


def test_remote_command_error_message():
    error = RemoteCommandError("web1", "exit 7", 7, "", "permission denied\n")
    assert str(error) == "[web1] Command 'exit 7' failed (exit=7): permission denied"


def test_remote_command_error_without_detail():
    assert str(RemoteCommandError("web1", "exit 7", 7)) == "[web1] Command 'exit 7' failed (exit=7)"


def test_protocol_error_defaults_to_minus_one():
    error = TransportProtocolError("web1", "reboot")
    assert error.exit_code == -1
    assert isinstance(error, RemoteCommandError)


def test_transfer_error_is_process_failure():
    error = TransferError("web1", ["rsync", "-azP", "a", "web1:b"], 23, "", "partial transfer")
    assert isinstance(error, ProcessFailedError)
    assert error.argv == ("rsync", "-azP", "a", "web1:b")
    assert error.hostname == "web1"


def test_timeout_error_keeps_partial_output():
    error = TransportTimeoutError(["ssh", "web1"], 5, stdout="started\n")
    assert isinstance(error, SSHError)
    assert error.stdout == "started\n"
    assert "timed out after 5s" in str(error)
