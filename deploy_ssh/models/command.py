"""Command execution data models."""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

COMMAND_TIMEOUT = 300.0


class _Unset:
    """Marker for an option the caller left to the operation's default."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass
class CommandResult:
    """Result of a remote command execution."""

    output: str
    error: str
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class RunConfig:
    """Per-call execution options.

    Args:
        timeout: Seconds before the process is killed, None for no limit.
            Left unset, each operation applies its own default.
        tty: Attach a terminal and bypass multiplexing
    """

    timeout: float | None = UNSET
    tty: bool = False

    @classmethod
    def merge(
        cls,
        config: "RunConfig | Mapping[str, Any] | None" = None,
        **defaults: Any,
    ) -> "RunConfig":
        """Merge caller options over defaults.

        Keys supplied by the caller win. Fields of a RunConfig that were
        left unset fall back to the defaults, and an unset timeout with
        no default becomes COMMAND_TIMEOUT.

        Raises:
            ValueError: If the mapping contains unknown keys.
        """
        if isinstance(config, RunConfig):
            config = {
                f.name: getattr(config, f.name)
                for f in fields(cls)
                if getattr(config, f.name) is not UNSET
            }

        values = {**defaults, **(config or {})}
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown run options: {', '.join(unknown)}")
        if values.get("timeout", UNSET) is UNSET:
            values["timeout"] = COMMAND_TIMEOUT
        return cls(**values)
