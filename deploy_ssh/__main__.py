"""Entry point for the deploy_ssh server."""

import logging

from deploy_ssh.server import mcp  # also configures logging
from deploy_ssh.services.state import get_dependencies

logger = logging.getLogger(__name__)


def run_server() -> None:
    """Run the MCP server with the configured transport."""
    settings = get_dependencies().settings

    if settings.transport == "stdio":
        logger.info("Starting deploy_ssh server (transport=stdio)")
        mcp.run(transport="stdio")
    else:
        logger.info(
            "Starting deploy_ssh server (transport=http, host=%s, port=%d)",
            settings.http_host,
            settings.http_port,
        )
        mcp.run(transport="http", host=settings.http_host, port=settings.http_port)


if __name__ == "__main__":
    run_server()
