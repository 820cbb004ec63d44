"""Remote command execution and file sync over the ssh client.

Runs shell commands on remote hosts in batch or terminal mode, reuses
one authenticated connection per host through ssh multiplexing, and
recovers each command's exit status from the output stream.
"""

from deploy_ssh.models import CommandResult, Host, RunConfig
from deploy_ssh.services import (
    ConfigurationError,
    ProcessFailedError,
    RemoteCommandError,
    SSHClient,
    SSHError,
    TransferError,
    TransportProtocolError,
    TransportTimeoutError,
)
from deploy_ssh.utils.output import ConsoleOutput, OutputSink, StreamKind, Verbosity

__version__ = "0.1.0"

__all__ = [
    "CommandResult",
    "ConfigurationError",
    "ConsoleOutput",
    "Host",
    "OutputSink",
    "ProcessFailedError",
    "RemoteCommandError",
    "RunConfig",
    "SSHClient",
    "SSHError",
    "StreamKind",
    "TransferError",
    "TransportProtocolError",
    "TransportTimeoutError",
    "Verbosity",
]
