"""deploy_ssh middleware components."""

from deploy_ssh.middleware.base import DeployMiddleware
from deploy_ssh.middleware.errors import ErrorHandlingMiddleware
from deploy_ssh.middleware.logging import LoggingMiddleware

__all__ = [
    "DeployMiddleware",
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
]
