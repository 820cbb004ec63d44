"""Data models for deploy_ssh."""

from deploy_ssh.models.command import COMMAND_TIMEOUT, UNSET, CommandResult, RunConfig
from deploy_ssh.models.host import Host

__all__ = [
    "COMMAND_TIMEOUT",
    "CommandResult",
    "Host",
    "RunConfig",
    "UNSET",
]
