"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

from deploy_ssh.models import COMMAND_TIMEOUT
from deploy_ssh.utils.output import Verbosity

logger = logging.getLogger(__name__)

PREFIX = "DEPLOY_SSH_"


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Execution
    command_timeout: float = field(default=COMMAND_TIMEOUT)
    multiplexing: bool = field(default=True)

    # Live output
    verbosity: Verbosity = field(default=Verbosity.NORMAL)
    decorated: bool | None = field(default=None)  # None: decorate on a TTY

    # Transport
    transport: str = field(default="stdio")
    http_host: str = field(default="127.0.0.1")
    http_port: int = field(default=8000)

    # Logging
    log_level: str = field(default="INFO")
    log_payloads: bool = field(default=False)
    slow_threshold_ms: int = field(default=1000)
    include_traceback: bool = field(default=False)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from DEPLOY_SSH_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            command_timeout=cls._get_float("COMMAND_TIMEOUT", COMMAND_TIMEOUT),
            multiplexing=cls._get_bool("MULTIPLEXING", True),
            verbosity=cls._get_verbosity(),
            decorated=cls._get_optional_bool("DECORATED"),
            transport=cls._get_transport(),
            http_host=os.getenv(f"{PREFIX}HTTP_HOST", "127.0.0.1"),
            http_port=cls._get_int("HTTP_PORT", 8000),
            log_level=os.getenv(f"{PREFIX}LOG_LEVEL", "INFO").upper(),
            log_payloads=cls._get_bool("LOG_PAYLOADS", False),
            slow_threshold_ms=cls._get_int("SLOW_THRESHOLD_MS", 1000),
            include_traceback=cls._get_bool("INCLUDE_TRACEBACK", False),
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        value = os.getenv(PREFIX + key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s%s: %s, using default %d", PREFIX, key, value, default)
            return default

    @staticmethod
    def _get_float(key: str, default: float) -> float:
        value = os.getenv(PREFIX + key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            logger.warning("Invalid number for %s%s: %s, using default %s", PREFIX, key, value, default)
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key without prefix
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(PREFIX + key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @classmethod
    def _get_optional_bool(cls, key: str) -> bool | None:
        """Tri-state boolean: unset or 'auto' means None."""
        value = os.getenv(PREFIX + key)
        if value is None or value.strip().lower() in ("", "auto"):
            return None
        return cls._get_bool(key, False)

    @staticmethod
    def _get_verbosity() -> Verbosity:
        value = os.getenv(f"{PREFIX}VERBOSITY")
        if not value:
            return Verbosity.NORMAL
        try:
            return Verbosity.parse(value)
        except ValueError as e:
            logger.warning("%s, using normal", e)
            return Verbosity.NORMAL

    @staticmethod
    def _get_transport() -> str:
        """Get transport from environment with validation.

        Returns:
            Transport type ("http" or "stdio")
        """
        transport = os.getenv(f"{PREFIX}TRANSPORT", "").lower()
        if transport in ("http", "stdio"):
            return transport
        return "stdio"
