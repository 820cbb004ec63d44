"""Remote host descriptor."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Host:
    """A remote endpoint and the ssh flags used to reach it.

    Args:
        hostname: Address passed to ssh (required, non-empty)
        user: Login user (default: whatever ssh picks)
        port: SSH port (default: whatever ssh picks)
        options: Raw ssh flags in order, e.g. ("-i", "~/.ssh/deploy")
        multiplexing: Force connection reuse on/off, None to inherit
            the client default
        alias: Display name used to tag output and errors
    """

    hostname: str
    user: str | None = None
    port: int | None = None
    options: tuple[str, ...] = field(default=())
    multiplexing: bool | None = None
    alias: str | None = None

    def __post_init__(self) -> None:
        if not self.hostname or not self.hostname.strip():
            raise ValueError("hostname must be a non-empty string")
        if self.port is not None and (
            not isinstance(self.port, int) or self.port < 1 or self.port > 65535
        ):
            raise ValueError(f"port must be 1-65535, got {self.port}")
        # Lists are accepted for convenience but the descriptor stays immutable
        object.__setattr__(self, "options", tuple(self.options))

    @property
    def label(self) -> str:
        """Name used when tagging output lines and errors."""
        return self.alias or self.hostname

    @property
    def destination(self) -> str:
        """The ``[user@]hostname`` argument for ssh and rsync."""
        if self.user:
            return f"{self.user}@{self.hostname}"
        return self.hostname

    def connection_options(self) -> list[str]:
        """Base ssh flags for this host, without multiplexing."""
        options: list[str] = []
        if self.port is not None:
            options += ["-p", str(self.port)]
        options += self.options
        return options

    def __str__(self) -> str:
        return self.destination
