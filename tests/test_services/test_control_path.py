"""Tests for multiplexing control path selection."""

import pytest

from deploy_ssh.models import Host
from deploy_ssh.services.control_path import (
    MAX_CONTROL_PATH_LENGTH,
    control_path_candidates,
    resolve_control_path,
)
from deploy_ssh.services.errors import ConfigurationError

# Candidate lengths for this host: 23, 22, 18, 17, 8
TINY_HOST = Host("a")


def test_short_host_gets_descriptive_path():
    host = Host("web1.example.com", user="deploy", port=22)
    assert resolve_control_path(host) == "~/.ssh/deployer_mux_deploy_web1.example.com_22"


def test_missing_user_and_port_render_empty():
    assert resolve_control_path(Host("web1")) == "~/.ssh/deployer_mux__web1_"


def test_candidates_in_ladder_order():
    host = Host("web1", user="deploy", port=2222)
    assert control_path_candidates(host) == [
        "~/.ssh/deployer_mux_deploy_web1_2222",
        "~/.ssh/deployer_mux_%C",
        "~/deployer_mux_deploy_web1_2222",
        "~/deployer_mux_%C",
        "~/mux_%C",
    ]


def test_long_hostname_falls_back_to_connection_hash():
    host = Host("h" * 100 + ".example.com", user="deploy", port=22)

    path = resolve_control_path(host)

    assert path == "~/.ssh/deployer_mux_%C"
    assert len(path) <= MAX_CONTROL_PATH_LENGTH


def test_boundary_length_is_accepted():
    # 20 prefix chars + "_" + hostname + "_" = 104 exactly
    host = Host("x" * 82)
    path = resolve_control_path(host)
    assert len(path) == 104
    assert path == f"~/.ssh/deployer_mux__{'x' * 82}_"


@pytest.mark.parametrize(
    ("max_length", "expected"),
    [
        (23, "~/.ssh/deployer_mux__a_"),
        (22, "~/.ssh/deployer_mux_%C"),
        (20, "~/deployer_mux__a_"),
        (17, "~/deployer_mux_%C"),
        (8, "~/mux_%C"),
    ],
)
def test_first_fitting_candidate_wins(max_length: int, expected: str):
    # Later candidates also fit, but the earliest one is returned
    assert resolve_control_path(TINY_HOST, max_length=max_length) == expected


def test_no_candidate_fits():
    with pytest.raises(ConfigurationError, match="control path is too long"):
        resolve_control_path(TINY_HOST, max_length=7)
