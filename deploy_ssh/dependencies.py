"""Dependency container for deploy_ssh.

Builds the output sink and client from settings and passes them
explicitly, so the engine itself never reads global state.
"""

from dataclasses import dataclass

from deploy_ssh.config import Settings
from deploy_ssh.services.client import SSHClient
from deploy_ssh.utils.output import ConsoleOutput


@dataclass
class Dependencies:
    """Container for settings, output sink and client.

    Example:
        deps = Dependencies.create()
        output = await deps.client.run(host, "uptime")
    """

    settings: Settings
    output: ConsoleOutput
    client: SSHClient

    @classmethod
    def create(cls) -> "Dependencies":
        """Create dependencies from environment settings."""
        return cls.from_settings(Settings.from_env())

    @classmethod
    def from_settings(cls, settings: Settings) -> "Dependencies":
        """Create dependencies from explicit settings.

        Live output goes to stderr so it never mixes with the stdio
        transport on stdout.
        """
        output = ConsoleOutput(verbosity=settings.verbosity, decorated=settings.decorated)
        client = SSHClient(
            output,
            multiplexing=settings.multiplexing,
            command_timeout=settings.command_timeout,
        )
        return cls(settings=settings, output=output, client=client)
