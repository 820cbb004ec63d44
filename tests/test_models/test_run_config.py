"""Tests for RunConfig merging."""

import pytest

from deploy_ssh.models import COMMAND_TIMEOUT, UNSET, RunConfig


def test_defaults():
    config = RunConfig()
    assert config.timeout is UNSET
    assert config.tty is False


def test_merge_without_config_uses_defaults():
    assert RunConfig.merge(None, timeout=60) == RunConfig(timeout=60, tty=False)


def test_merge_without_any_timeout_uses_command_timeout():
    assert RunConfig.merge(None).timeout == COMMAND_TIMEOUT == 300


def test_merge_caller_keys_win():
    config = RunConfig.merge({"timeout": 5, "tty": True}, timeout=60)
    assert config.timeout == 5
    assert config.tty is True


def test_merge_keeps_unset_defaults():
    config = RunConfig.merge({"tty": True}, timeout=None)
    assert config.timeout is None
    assert config.tty is True


def test_merge_run_config_explicit_timeout_wins():
    config = RunConfig.merge(RunConfig(timeout=1), timeout=None)
    assert config == RunConfig(timeout=1, tty=False)


def test_merge_run_config_explicit_no_limit_wins():
    assert RunConfig.merge(RunConfig(timeout=None), timeout=60).timeout is None


def test_merge_run_config_unset_timeout_takes_default():
    config = RunConfig.merge(RunConfig(tty=True), timeout=None)
    assert config.timeout is None
    assert config.tty is True


def test_merge_rejects_unknown_keys():
    with pytest.raises(ValueError, match="Unknown run options: retries"):
        RunConfig.merge({"retries": 3})
