"""Shared fixtures for deploy_ssh tests."""

import pytest

from deploy_ssh.utils.output import StreamKind, Verbosity


class RecordingOutput:
    """Output sink that keeps every line it is given."""

    def __init__(self, verbosity: Verbosity = Verbosity.DEBUG, decorated: bool = False) -> None:
        self.verbosity = verbosity
        self.decorated = decorated
        self.lines: list[tuple[str, StreamKind, str]] = []

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
        self.lines.append((hostname, stream, text))

    @property
    def texts(self) -> list[str]:
        return [text for _, _, text in self.lines]


@pytest.fixture
def output() -> RecordingOutput:
    """Sink at debug verbosity so every streamed line is recorded."""
    return RecordingOutput()


@pytest.fixture
def quiet_output() -> RecordingOutput:
    """Sink at normal verbosity: notices only, no streamed lines."""
    return RecordingOutput(verbosity=Verbosity.NORMAL)
