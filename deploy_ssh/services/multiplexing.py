"""SSH connection multiplexing.

Commands against the same host share one authenticated connection
through a ControlMaster socket. ssh owns the socket: with
``ControlMaster=auto`` the first invocation creates the master and later
ones attach to it, so this module never locks or tracks sessions itself.
Two callers racing to create the same master are resolved by ssh.
"""

import logging

from deploy_ssh.models import Host
from deploy_ssh.services.control_path import resolve_control_path
from deploy_ssh.services.process import run_process
from deploy_ssh.utils.output import OutputSink, StreamKind

logger = logging.getLogger(__name__)

CONTROL_PERSIST_SECONDS = 60
PROBE_TIMEOUT = 60.0
MASTER_RUNNING = "Master running"
INIT_NOTICE = "ssh multiplexing initialization"


def is_multiplexing_enabled(host: Host, default: bool) -> bool:
    """Resolve the host's override against the process-wide default."""
    if host.multiplexing is None:
        return default
    return host.multiplexing


def multiplexing_options(host: Host, control_path: str) -> list[str]:
    """Host flags plus the session reuse options."""
    return [
        *host.connection_options(),
        "-o",
        "ControlMaster=auto",
        "-o",
        f"ControlPersist={CONTROL_PERSIST_SECONDS}",
        "-o",
        f"ControlPath={control_path}",
    ]


async def ensure_session(host: Host, output: OutputSink) -> list[str]:
    """Prepare ssh options that reuse a shared connection to host.

    Probes the control socket with ``ssh -O check``. When no master is
    running yet a notice is written to the output sink; the master itself
    is started by the next real invocation using the returned options.

    Returns:
        ssh options to use for the actual command.

    Raises:
        ConfigurationError: If no control path fits the length bound.
    """
    control_path = resolve_control_path(host)
    options = multiplexing_options(host, control_path)

    probe = await run_process(
        ["ssh", *options, "-O", "check", "-S", control_path, host.destination],
        timeout=PROBE_TIMEOUT,
    )

    if MASTER_RUNNING in probe.stdout + probe.stderr:
        logger.debug("Reusing ssh master for %s (%s)", host.label, control_path)
    else:
        logger.debug("No ssh master for %s yet (%s)", host.label, control_path)
        output.write_line(host.label, StreamKind.OUT, INIT_NOTICE)

    return options
