"""Colorful console logging formatter."""

import logging
import re
import sys
from datetime import datetime

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "white": "\033[37m",
    "cyan": "\033[36m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bg_red": "\033[41m",
}

LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

COMPONENT_COLORS = {
    "e2e_installer.services.connection": COLORS["bright_magenta"],
    "e2e_installer.services.executors": COLORS["bright_blue"],
    "e2e_installer.services": COLORS["cyan"],
    "e2e_installer.config": COLORS["bright_green"],
    "default": COLORS["white"],
}

_SSH_ADDRESS = re.compile(r"(\w+@[\w.\-]+:\d+)")
_ATTEMPT = re.compile(r"(attempt \d+/\d+)")


class ColorfulFormatter(logging.Formatter):
    """Log formatter with colored levels and component names."""

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

    def _get_component_color(self, name: str) -> str:
        for prefix, color in COMPONENT_COLORS.items():
            if prefix != "default" and name.startswith(prefix):
                return color
        return COMPONENT_COLORS["default"]

    def _format_component(self, record: logging.LogRecord) -> str:
        name = record.name.removeprefix("e2e_installer.")
        return self._colorize(f"{name:<20}", self._get_component_color(record.name))

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as ``time | level | component | message``."""
        dt = datetime.fromtimestamp(record.created)
        timestamp = self._colorize(
            f"{dt:%H:%M:%S}.{int(record.msecs):03d}", COLORS["dim"]
        )
        level = self._colorize(
            f"{record.levelname:<8}",
            LEVEL_COLORS.get(record.levelname, COLORS["white"]),
        )
        component = self._format_component(record)
        sep = self._colorize("|", COLORS["dim"])
        message = self._highlight_message(record.getMessage())

        line = f"{timestamp} {sep} {level} {sep} {component} {sep} {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line

    def _highlight_message(self, message: str) -> str:
        """Highlight SSH addresses and retry counters."""
        if not self.use_colors:
            return message
        message = _SSH_ADDRESS.sub(
            f"{COLORS['bright_magenta']}\\1{COLORS['reset']}", message
        )
        return _ATTEMPT.sub(f"{COLORS['bright_yellow']}\\1{COLORS['reset']}", message)


def configure_logging(level: str = "INFO", use_colors: bool = True) -> None:
    """Configure colorful logging for the e2e_installer package.

    Colors are disabled when stderr is not a TTY.
    """
    if not sys.stderr.isatty():
        use_colors = False

    package_logger = logging.getLogger("e2e_installer")
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Only add handler if not already configured
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    logging.getLogger("asyncssh").setLevel(logging.WARNING)
