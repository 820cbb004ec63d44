"""Tests for multiplexing session setup."""

from unittest.mock import AsyncMock, patch

import pytest

from deploy_ssh.models import Host
from deploy_ssh.services.multiplexing import (
    INIT_NOTICE,
    ensure_session,
    is_multiplexing_enabled,
    multiplexing_options,
)
from deploy_ssh.services.process import ProcessResult
from deploy_ssh.utils.output import StreamKind


def _probe_result(stdout: str = "", stderr: str = "", returncode: int = 255) -> ProcessResult:
    return ProcessResult(args=("ssh",), returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.mark.parametrize(
    ("override", "default", "expected"),
    [
        (None, True, True),
        (None, False, False),
        (True, False, True),
        (False, True, False),
    ],
)
def test_host_override_beats_default(override, default, expected):
    host = Host("web1", multiplexing=override)
    assert is_multiplexing_enabled(host, default) is expected


def test_multiplexing_options_appended_after_host_options():
    host = Host("web1", port=2222, options=("-A",))
    assert multiplexing_options(host, "~/mux_%C") == [
        "-p",
        "2222",
        "-A",
        "-o",
        "ControlMaster=auto",
        "-o",
        "ControlPersist=60",
        "-o",
        "ControlPath=~/mux_%C",
    ]


@pytest.mark.asyncio
async def test_first_use_writes_init_notice(quiet_output):
    host = Host("web1", user="deploy")
    probe = AsyncMock(return_value=_probe_result(stderr="Control socket connect: No such file\n"))

    with patch("deploy_ssh.services.multiplexing.run_process", probe):
        options = await ensure_session(host, quiet_output)

    assert quiet_output.lines == [("web1", StreamKind.OUT, INIT_NOTICE)]
    assert "ControlPath=~/.ssh/deployer_mux_deploy_web1_" in options


@pytest.mark.asyncio
async def test_running_master_is_silent(quiet_output):
    host = Host("web1")
    probe = AsyncMock(return_value=_probe_result(stderr="Master running (pid=4242)\r\n", returncode=0))

    with patch("deploy_ssh.services.multiplexing.run_process", probe):
        await ensure_session(host, quiet_output)

    assert quiet_output.lines == []


@pytest.mark.asyncio
async def test_probe_checks_control_socket(quiet_output):
    host = Host("web1", user="deploy", port=22)
    probe = AsyncMock(return_value=_probe_result(stdout="Master running (pid=1)"))

    with patch("deploy_ssh.services.multiplexing.run_process", probe):
        options = await ensure_session(host, quiet_output)

    argv = probe.call_args.args[0]
    control_path = "~/.ssh/deployer_mux_deploy_web1_22"
    assert argv[0] == "ssh"
    assert argv[-5:] == ["-O", "check", "-S", control_path, "deploy@web1"]
    assert argv[1:-5] == options
