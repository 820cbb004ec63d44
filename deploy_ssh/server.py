"""deploy_ssh FastMCP server.

Thin wiring of tools, middleware and the health route. Execution logic
lives in services/.
"""

import logging
import os
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from deploy_ssh.config import Settings
from deploy_ssh.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from deploy_ssh.services.state import get_dependencies
from deploy_ssh.tools import ssh_download, ssh_run, ssh_upload
from deploy_ssh.utils.console import ColorfulFormatter

NOISY_LOGGERS = [
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "httpcore",
    "fastmcp",
    "starlette",
    "anyio",
]


def _configure_logging() -> None:
    """Configure colorful logging for the deploy_ssh package.

    Called at module load time so loggers are ready however the server
    is started.
    """
    log_level = Settings.from_env().log_level
    use_colors = os.getenv("DEPLOY_SSH_LOG_COLORS", "true").lower() != "false"
    if not sys.stderr.isatty():
        use_colors = False

    package_logger = logging.getLogger("deploy_ssh")
    package_logger.setLevel(getattr(logging, log_level, logging.INFO))

    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


_configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Log effective execution settings at startup."""
    settings = get_dependencies().settings
    logger.info(
        "deploy_ssh server starting (multiplexing=%s, command_timeout=%ss, verbosity=%s)",
        settings.multiplexing,
        settings.command_timeout,
        settings.verbosity.name.lower(),
    )
    try:
        yield {"multiplexing": settings.multiplexing}
    finally:
        # Control masters persist on their own and expire after ControlPersist
        logger.info("deploy_ssh server shutdown complete")


def configure_middleware(server: FastMCP, settings: Settings) -> None:
    """Add middleware in order: ErrorHandling -> Logging (first added = innermost)."""
    server.add_middleware(ErrorHandlingMiddleware(include_traceback=settings.include_traceback))
    server.add_middleware(
        LoggingMiddleware(
            include_payloads=settings.log_payloads,
            slow_threshold_ms=float(settings.slow_threshold_ms),
        )
    )


def create_server() -> FastMCP:
    """Create and configure the MCP server.

    Returns:
        Configured FastMCP server instance
    """
    server = FastMCP("deploy_ssh", lifespan=app_lifespan)

    configure_middleware(server, get_dependencies().settings)

    server.tool()(ssh_run)
    server.tool()(ssh_upload)
    server.tool()(ssh_download)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    return server


# Default server instance
mcp = create_server()
