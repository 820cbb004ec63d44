"""Shell quoting helpers."""

import shlex
from collections.abc import Iterable


def quote_arg(arg: str) -> str:
    """Quote a single argument so a remote shell reads it literally.

    Args:
        arg: Argument to quote

    Returns:
        Shell-safe quoted argument
    """
    return shlex.quote(arg)


def join_args(args: Iterable[str]) -> str:
    """Render an argv list as one shell command line."""
    return " ".join(shlex.quote(arg) for arg in args)
