"""Services for deploy_ssh."""

from deploy_ssh.services.client import SSHClient
from deploy_ssh.services.control_path import (
    MAX_CONTROL_PATH_LENGTH,
    control_path_candidates,
    resolve_control_path,
)
from deploy_ssh.services.errors import (
    ConfigurationError,
    ProcessFailedError,
    RemoteCommandError,
    SSHError,
    TransferError,
    TransportProtocolError,
    TransportTimeoutError,
)
from deploy_ssh.services.multiplexing import ensure_session, is_multiplexing_enabled
from deploy_ssh.services.process import ProcessResult, run_process

__all__ = [
    "ConfigurationError",
    "MAX_CONTROL_PATH_LENGTH",
    "ProcessFailedError",
    "ProcessResult",
    "RemoteCommandError",
    "SSHClient",
    "SSHError",
    "TransferError",
    "TransportProtocolError",
    "TransportTimeoutError",
    "control_path_candidates",
    "ensure_session",
    "is_multiplexing_enabled",
    "resolve_control_path",
    "run_process",
]
