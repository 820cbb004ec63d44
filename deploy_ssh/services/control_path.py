"""Control socket path selection for ssh multiplexing.

Unix domain socket paths are limited to 104 characters on some
platforms; ssh refuses longer ControlPath values with::

    unix_listener: too long for Unix domain socket

Candidates run from most descriptive to tersest. ``%C`` is expanded by
ssh into a hash of the connection parameters, so it keeps the path
short whatever the hostname length. Candidates are never truncated.
"""

import logging

from deploy_ssh.models import Host
from deploy_ssh.services.errors import ConfigurationError

logger = logging.getLogger(__name__)

MAX_CONTROL_PATH_LENGTH = 104
CONNECTION_HASH_TOKEN = "%C"


def control_path_candidates(host: Host) -> list[str]:
    """Candidate control paths for a host, longest naming scheme first."""
    user = host.user or ""
    port = "" if host.port is None else str(host.port)
    connection = f"{user}_{host.hostname}_{port}"
    token = CONNECTION_HASH_TOKEN
    return [
        f"~/.ssh/deployer_mux_{connection}",
        f"~/.ssh/deployer_mux_{token}",
        f"~/deployer_mux_{connection}",
        f"~/deployer_mux_{token}",
        f"~/mux_{token}",
    ]


def resolve_control_path(host: Host, max_length: int = MAX_CONTROL_PATH_LENGTH) -> str:
    """Pick the first control path candidate that fits the length bound.

    Args:
        host: Host the socket is for
        max_length: Longest acceptable path

    Returns:
        Control path, possibly containing ssh tokens such as %C.

    Raises:
        ConfigurationError: If no candidate is short enough.
    """
    candidates = control_path_candidates(host)
    for path in candidates:
        if len(path) <= max_length:
            return path
        logger.debug("Control path too long (%d > %d): %s", len(path), max_length, path)

    raise ConfigurationError(
        f"The multiplexing control path is too long. Control path is: {candidates[-1]}"
    )
