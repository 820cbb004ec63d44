"""Remote command and file transfer execution over the ssh client.

Example:
    from deploy_ssh import ConsoleOutput, Host, SSHClient

    client = SSHClient(ConsoleOutput(), multiplexing=True)
    web1 = Host("web1.example.com", user="deploy")

    output = await client.run(web1, "uptime")
    await client.upload(web1, "./dist", "/var/www")
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from deploy_ssh.models import COMMAND_TIMEOUT, CommandResult, Host, RunConfig
from deploy_ssh.services.errors import (
    ProcessFailedError,
    RemoteCommandError,
    TransferError,
    TransportProtocolError,
)
from deploy_ssh.services.multiplexing import ensure_session, is_multiplexing_enabled
from deploy_ssh.services.process import run_process
from deploy_ssh.services.sentinel import MISSING_EXIT_CODE, REMOTE_SCRIPT, decode, strip_sentinel
from deploy_ssh.utils.output import OutputSink, StreamKind
from deploy_ssh.utils.shell import join_args, quote_arg

logger = logging.getLogger(__name__)

RSYNC_FLAGS = "-azP"

RunOptions = RunConfig | Mapping[str, Any] | None


class SSHClient:
    """Runs commands and transfers files on remote hosts.

    Holds no per-host state, so one client can serve concurrent calls
    for any number of hosts.
    """

    def __init__(
        self,
        output: OutputSink,
        multiplexing: bool = True,
        command_timeout: float | None = COMMAND_TIMEOUT,
    ) -> None:
        """Initialize client.

        Args:
            output: Sink for live output lines and notices
            multiplexing: Default connection reuse setting for hosts
                without their own override
            command_timeout: Default timeout for run()
        """
        self.output = output
        self.multiplexing = multiplexing
        self.command_timeout = command_timeout

    async def run(self, host: Host, command: str, config: RunOptions = None) -> str:
        """Run a command on host and return its output.

        Args:
            host: Target host
            command: Shell command text
            config: RunConfig or mapping with ``timeout`` / ``tty``

        Returns:
            Command stdout with the exit status marker removed.

        Raises:
            RemoteCommandError: If the command exits non-zero.
            TransportProtocolError: If no exit status came back.
            TransportTimeoutError: If the timeout expires.
            ConfigurationError: If multiplexing cannot be set up.
        """
        config = RunConfig.merge(config, timeout=self.command_timeout)

        if config.tty:
            return await self._run_tty(host, command, config)

        result = await self.execute(host, command, config)
        if result.returncode == MISSING_EXIT_CODE:
            raise TransportProtocolError(
                host.label, command, result.returncode, result.output, result.error
            )
        if result.returncode != 0:
            raise RemoteCommandError(
                host.label, command, result.returncode, result.output, result.error
            )
        return result.output

    async def execute(self, host: Host, command: str, config: RunOptions = None) -> CommandResult:
        """Run a command in batch mode without checking its status.

        The command text is sent unescaped on stdin to ``bash -s`` on the
        remote side, which then prints the exit status marker.

        Returns:
            CommandResult with the decoded exit status (-1 if the marker
            never arrived).
        """
        config = RunConfig.merge(config, timeout=self.command_timeout)

        if is_multiplexing_enabled(host, self.multiplexing):
            options = await ensure_session(host, self.output)
        else:
            options = host.connection_options()

        args = ["ssh", *options, host.destination, REMOTE_SCRIPT]
        writer = LineWriter(self.output, host.label)
        try:
            result = await run_process(
                args,
                input=command,
                timeout=config.timeout,
                callback=writer,
            )
        finally:
            writer.flush()

        output, exit_code = decode(result.stdout)
        logger.debug(
            "[%s] exit=%d (ssh exit=%d) for %r",
            host.label,
            exit_code,
            result.returncode,
            command,
        )
        return CommandResult(output=output, error=result.stderr, returncode=exit_code)

    async def _run_tty(self, host: Host, command: str, config: RunConfig) -> str:
        """Run with a terminal attached.

        A terminal cannot be shared through a control socket, so
        multiplexing is skipped and the command is passed as one quoted
        argument. Output goes straight to the terminal and is not
        captured; the ssh exit status stands in for the remote one.
        """
        args = [
            "ssh",
            *host.connection_options(),
            "-tt",
            host.destination,
            quote_arg(command),
        ]
        result = await run_process(args, timeout=config.timeout, tty=True)
        if result.returncode != 0:
            raise RemoteCommandError(
                host.label, command, result.returncode, result.stdout, result.stderr
            )
        return result.stdout

    async def upload(
        self,
        host: Host,
        source: str,
        destination: str,
        config: RunOptions = None,
    ) -> None:
        """Copy a local path to host."""
        await self.rsync(
            host.label,
            source,
            f"{host.destination}:{destination}",
            config,
            ssh_options=host.connection_options(),
        )

    async def download(
        self,
        host: Host,
        source: str,
        destination: str,
        config: RunOptions = None,
    ) -> None:
        """Copy a path on host to the local machine."""
        await self.rsync(
            host.label,
            f"{host.destination}:{source}",
            destination,
            config,
            ssh_options=host.connection_options(),
        )

    async def rsync(
        self,
        hostname: str,
        source: str,
        destination: str,
        config: RunOptions = None,
        ssh_options: Sequence[str] = (),
    ) -> None:
        """Synchronize source to destination with rsync.

        Args:
            hostname: Label used to tag output lines
            source: rsync source, ``host:path`` when remote
            destination: rsync destination, ``host:path`` when remote
            config: RunConfig or mapping; timeout defaults to unbounded
            ssh_options: Flags for the ssh transport rsync spawns

        Raises:
            TransferError: If rsync exits non-zero.
            TransportTimeoutError: If the timeout expires.
        """
        config = RunConfig.merge(config, timeout=None)

        args = ["rsync", RSYNC_FLAGS]
        if ssh_options:
            args += ["-e", join_args(["ssh", *ssh_options])]
        args += [source, destination]

        if self.output.is_very_verbose:
            self.output.write_line(hostname, StreamKind.IN, join_args(args))

        writer = LineWriter(self.output, hostname)
        try:
            await run_process(
                args,
                timeout=config.timeout,
                callback=writer,
                check=True,
            )
        except ProcessFailedError as e:
            raise TransferError(hostname, e.argv, e.returncode, e.stdout, e.stderr) from e
        finally:
            writer.flush()


class LineWriter:
    """Stream callback that forwards complete lines to the output sink.

    Chunks arrive at arbitrary byte boundaries, so the trailing partial
    line of each stream is held until its newline arrives or flush() is
    called after the process exits. Lines are only echoed at debug
    verbosity.
    """

    def __init__(self, output: OutputSink, hostname: str) -> None:
        self.output = output
        self.hostname = hostname
        self._partial: dict[StreamKind, str] = {}

    def __call__(self, stream: StreamKind, buffer: str) -> None:
        if not self.output.is_debug:
            return
        lines = (self._partial.pop(stream, "") + buffer).split("\n")
        self._partial[stream] = lines.pop()
        for line in lines:
            self._write_line(stream, line)

    def flush(self) -> None:
        """Write out whatever is left of unterminated lines."""
        partial, self._partial = self._partial, {}
        for stream, text in partial.items():
            self._write_line(stream, text)

    def _write_line(self, stream: StreamKind, text: str) -> None:
        text = strip_sentinel(text).rstrip()
        # Omit empty lines
        if not text:
            return
        self.output.write_line(self.hostname, stream, text)
