"""MCP tools for running commands and syncing files on remote hosts."""

import logging

from deploy_ssh.services.errors import RemoteCommandError, SSHError, TransferError
from deploy_ssh.services.state import get_dependencies
from deploy_ssh.utils.parser import parse_host

logger = logging.getLogger(__name__)


def format_command_error(error: RemoteCommandError) -> str:
    """Render a failed remote command for a tool response."""
    lines = [f"Error: Command failed on {error.hostname} (exit code {error.exit_code})"]
    if error.exit_code == -1:
        lines.append("The ssh session ended before the command reported a status.")
    if error.output:
        lines.append(f"Output:\n{error.output.rstrip()}")
    if error.error_output:
        lines.append(f"Stderr:\n{error.error_output.rstrip()}")
    return "\n".join(lines)


def format_transfer_error(error: TransferError) -> str:
    """Render a failed rsync run for a tool response."""
    message = f"Error: Transfer failed on {error.hostname} (exit code {error.returncode})"
    if error.stderr.strip():
        message += f"\n{error.stderr.rstrip()}"
    return message


async def ssh_run(target: str, command: str, timeout: float | None = None) -> str:
    """Run a shell command on a remote host.

    Args:
        target: Host as "[user@]hostname[:port]"
        command: Shell command, run by bash on the remote host
        timeout: Seconds before the command is killed (default from settings)

    Returns:
        Command output, or an error description.
    """
    try:
        host = parse_host(target)
    except ValueError as e:
        return f"Error: {e}"

    client = get_dependencies().client
    config = {} if timeout is None else {"timeout": timeout}
    try:
        output = await client.run(host, command, config)
    except RemoteCommandError as e:
        return format_command_error(e)
    except SSHError as e:
        return f"Error: {e}"

    return output if output else "(no output)"


async def ssh_upload(target: str, source: str, destination: str) -> str:
    """Copy a local file or directory to a remote host with rsync.

    Args:
        target: Host as "[user@]hostname[:port]"
        source: Local path
        destination: Remote path

    Returns:
        Confirmation, or an error description.
    """
    try:
        host = parse_host(target)
    except ValueError as e:
        return f"Error: {e}"

    try:
        await get_dependencies().client.upload(host, source, destination)
    except TransferError as e:
        return format_transfer_error(e)
    except SSHError as e:
        return f"Error: {e}"

    logger.info("Uploaded %s to %s:%s", source, host.label, destination)
    return f"Uploaded {source} to {host.destination}:{destination}"


async def ssh_download(target: str, source: str, destination: str) -> str:
    """Copy a file or directory from a remote host with rsync.

    Args:
        target: Host as "[user@]hostname[:port]"
        source: Remote path
        destination: Local path

    Returns:
        Confirmation, or an error description.
    """
    try:
        host = parse_host(target)
    except ValueError as e:
        return f"Error: {e}"

    try:
        await get_dependencies().client.download(host, source, destination)
    except TransferError as e:
        return format_transfer_error(e)
    except SSHError as e:
        return f"Error: {e}"

    logger.info("Downloaded %s:%s to %s", host.label, source, destination)
    return f"Downloaded {host.destination}:{source} to {destination}"
