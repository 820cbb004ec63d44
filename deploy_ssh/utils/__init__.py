"""Utilities for deploy_ssh."""

from deploy_ssh.utils.console import ColorfulFormatter
from deploy_ssh.utils.output import (
    ConsoleOutput,
    OutputSink,
    StreamKind,
    Verbosity,
    format_line,
)
from deploy_ssh.utils.parser import parse_host
from deploy_ssh.utils.shell import join_args, quote_arg

__all__ = [
    "ColorfulFormatter",
    "ConsoleOutput",
    "OutputSink",
    "StreamKind",
    "Verbosity",
    "format_line",
    "join_args",
    "parse_host",
    "quote_arg",
]
