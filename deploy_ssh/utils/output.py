"""Live output sink for remote command streams.

Lines are tagged with the host they came from so that output from
concurrent runs against different hosts stays readable when interleaved.
"""

import sys
import threading
from enum import Enum, IntEnum
from typing import Protocol, TextIO, runtime_checkable

# Decorated line styles
GREY = "\033[0;90m"
RED = "\033[0;31m"
CYAN = "\033[0;36m"
RESET = "\033[0m"


class StreamKind(Enum):
    """Where a line of output came from."""

    OUT = "out"
    ERR = "err"
    IN = "in"  # command line being sent to the host


class Verbosity(IntEnum):
    """Output verbosity levels, lowest to highest."""

    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    VERY_VERBOSE = 3
    DEBUG = 4

    @classmethod
    def parse(cls, value: str) -> "Verbosity":
        """Parse a level name such as ``very_verbose`` or ``debug``.

        Raises:
            ValueError: If the name is not a known level.
        """
        try:
            return cls[value.strip().upper().replace("-", "_")]
        except KeyError:
            names = ", ".join(level.name.lower() for level in cls)
            raise ValueError(f"Unknown verbosity '{value}'. Expected one of: {names}") from None


@runtime_checkable
class OutputSink(Protocol):
    """Consumer of streamed output lines."""

    @property
    def is_verbose(self) -> bool: ...

    @property
    def is_very_verbose(self) -> bool: ...

    @property
    def is_debug(self) -> bool: ...

    @property
    def is_decorated(self) -> bool: ...

    def write_line(self, hostname: str, stream: StreamKind, text: str) -> None:
        """Display one line of output for a host."""
        ...


def format_line(hostname: str, stream: StreamKind, text: str, decorated: bool) -> str:
    """Render a host-tagged output line.

    Plain form is ``[host] < text`` for process output and
    ``[host] > text`` for commands sent to the host.
    """
    if stream is StreamKind.IN:
        marker = f"{CYAN}>{RESET}" if decorated else ">"
        return f"[{hostname}] {marker} {text}"

    if not decorated:
        return f"[{hostname}] < {text}"
    if stream is StreamKind.ERR:
        return f"[{hostname}] {RED}<{GREY} {text}{RESET}"
    return f"[{hostname}] {GREY}< {text}{RESET}"


class ConsoleOutput:
    """Output sink writing host-tagged lines to a text stream."""

    def __init__(
        self,
        stream: TextIO | None = None,
        verbosity: Verbosity = Verbosity.NORMAL,
        decorated: bool | None = None,
    ) -> None:
        """Initialize console output.

        Args:
            stream: Destination stream (default: sys.stderr)
            verbosity: Verbosity level queried by the engine
            decorated: Use ANSI styles; None decorates only when the
                stream is a terminal
        """
        self.stream = stream if stream is not None else sys.stderr
        self.verbosity = verbosity
        if decorated is None:
            isatty = getattr(self.stream, "isatty", None)
            decorated = bool(isatty and isatty())
        self.decorated = decorated
        self._lock = threading.Lock()

    @property
    def is_verbose(self) -> bool:
        return self.verbosity >= Verbosity.VERBOSE

    @property
    def is_very_verbose(self) -> bool:
        return self.verbosity >= Verbosity.VERY_VERBOSE

    @property
    def is_debug(self) -> bool:
        return self.verbosity >= Verbosity.DEBUG

    @property
    def is_decorated(self) -> bool:
        return self.decorated

    def write_line(self, hostname: str, stream: StreamKind, text: str) -> None:
        line = format_line(hostname, stream, text, self.decorated)
        with self._lock:
            self.stream.write(line + "\n")
            self.stream.flush()
