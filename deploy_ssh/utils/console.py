"""Colorful console logging formatter."""

import logging
import re
from datetime import datetime

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bright_cyan": "\033[96m",
    "bg_red": "\033[41m",
}

LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

# Logger name prefix -> color
COMPONENT_COLORS = {
    "deploy_ssh.server": COLORS["bright_cyan"],
    "deploy_ssh.services.multiplexing": COLORS["bright_magenta"],
    "deploy_ssh.services": COLORS["bright_blue"],
    "deploy_ssh.tools": COLORS["cyan"],
    "deploy_ssh.middleware": COLORS["yellow"],
    "deploy_ssh.config": COLORS["green"],
}

PACKAGE_PREFIX = "deploy_ssh."

DURATION_PATTERN = re.compile(r"(\d+\.?\d*ms)")
HOST_TAG_PATTERN = re.compile(r"(\[[\w.\-@]+\])")


class ColorfulFormatter(logging.Formatter):
    """Log formatter with fixed-width levels and component highlighting."""

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to use ANSI colors.
        """
        super().__init__()
        self.use_colors = use_colors

    def _colorize(self, text: str, color: str) -> str:
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def _component_color(self, name: str) -> str:
        for prefix, color in COMPONENT_COLORS.items():
            if name.startswith(prefix):
                return color
        return COLORS["white"]

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created)
        return f"{dt:%H:%M:%S}.{int(record.msecs):03d}"

    def _format_component(self, record: logging.LogRecord) -> str:
        name = record.name.removeprefix(PACKAGE_PREFIX)
        return self._colorize(f"{name:<22}", self._component_color(record.name))

    def _highlight_message(self, message: str) -> str:
        """Highlight host tags and durations."""
        if not self.use_colors:
            return message
        message = HOST_TAG_PATTERN.sub(
            f"{COLORS['bright_magenta']}\\1{COLORS['reset']}", message
        )
        return DURATION_PATTERN.sub(f"{COLORS['bright_yellow']}\\1{COLORS['reset']}", message)

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self._colorize(self._format_timestamp(record), COLORS["dim"])
        level = self._colorize(
            f"{record.levelname:<8}", LEVEL_COLORS.get(record.levelname, COLORS["white"])
        )
        component = self._format_component(record)
        sep = self._colorize("|", COLORS["dim"])
        message = self._highlight_message(record.getMessage())

        line = f"{timestamp} {sep} {level} {sep} {component} {sep} {message}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line
