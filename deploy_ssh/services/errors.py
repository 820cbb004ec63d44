"""Exceptions raised by the remote execution engine."""

from collections.abc import Sequence


class SSHError(Exception):
    """Base exception for remote execution."""


class ConfigurationError(SSHError):
    """Connection settings cannot be turned into a usable invocation."""


class TransportTimeoutError(SSHError):
    """Process was killed after exceeding its timeout.

    Output captured before the kill is kept on the exception.
    """

    def __init__(
        self,
        args: Sequence[str],
        timeout: float,
        stdout: str = "",
        stderr: str = "",
    ):
        self.argv = tuple(args)
        self.timeout = timeout
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(f"Command {' '.join(self.argv)!r} timed out after {timeout}s")


class ProcessFailedError(SSHError):
    """Local process exited with non-zero status."""

    def __init__(
        self,
        args: Sequence[str],
        returncode: int,
        stdout: str = "",
        stderr: str = "",
    ):
        self.argv = tuple(args)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            f"Command {' '.join(self.argv)!r} failed (exit={returncode}): {stderr.strip()}"
        )


class TransferError(ProcessFailedError):
    """File synchronization with a host failed."""

    def __init__(
        self,
        hostname: str,
        args: Sequence[str],
        returncode: int,
        stdout: str = "",
        stderr: str = "",
    ):
        self.hostname = hostname
        super().__init__(args, returncode, stdout, stderr)


class RemoteCommandError(SSHError):
    """Remote command exited with non-zero status."""

    def __init__(
        self,
        hostname: str,
        command: str,
        exit_code: int,
        output: str = "",
        error_output: str = "",
    ):
        self.hostname = hostname
        self.command = command
        self.exit_code = exit_code
        self.output = output
        self.error_output = error_output
        detail = error_output.strip() or output.strip()
        message = f"[{hostname}] Command {command!r} failed (exit={exit_code})"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class TransportProtocolError(RemoteCommandError):
    """Session ended before the remote shell reported an exit status."""

    def __init__(
        self,
        hostname: str,
        command: str,
        exit_code: int = -1,
        output: str = "",
        error_output: str = "",
    ):
        super().__init__(hostname, command, exit_code, output, error_output)
