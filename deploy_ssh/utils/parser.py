"""Host target parsing."""

import re

from deploy_ssh.models import Host

TARGET_PATTERN = re.compile(
    r"^(?:(?P<user>[A-Za-z0-9._-]+)@)?"
    r"(?P<hostname>\[[0-9A-Fa-f:.]+\]|[A-Za-z0-9._-]+)"
    r"(?::(?P<port>\d+))?$"
)


def parse_host(target: str, multiplexing: bool | None = None) -> Host:
    """Parse a ``[user@]hostname[:port]`` target into a Host.

    IPv6 addresses are written in brackets, e.g. ``[::1]:2222``.

    Returns:
        Host descriptor for the target.

    Raises:
        ValueError: If target format is invalid.
    """
    target = target.strip()
    match = TARGET_PATTERN.match(target)
    if not match:
        raise ValueError(f"Invalid target '{target}'. Expected '[user@]hostname[:port]'")

    hostname = match.group("hostname").strip("[]")
    user = match.group("user")
    # A leading dash would be read by ssh as an option
    if hostname.startswith("-") or (user and user.startswith("-")):
        raise ValueError(f"Invalid target '{target}'")

    port = match.group("port")
    return Host(
        hostname=hostname,
        user=user,
        port=int(port) if port else None,
        multiplexing=multiplexing,
    )
