"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

from e2e_installer.models import image_reference
from e2e_installer.services.connection import RetryPolicy

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # What to run
    install_ctk: bool = field(default=False)
    image_repo: str = field(default="")
    image_tag: str = field(default="")

    # Remote target (local when remote_host is empty)
    ssh_key: str = field(default="")
    ssh_user: str = field(default="")
    remote_host: str = field(default="")

    # Connection retry
    connect_attempts: int = field(default=20)
    retry_interval: float = field(default=1.0)

    # Local execution
    shell: str = field(default="bash")

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from E2E_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            install_ctk=cls._get_bool("E2E_INSTALL_CTK", False),
            image_repo=os.getenv("E2E_IMAGE_REPO", ""),
            image_tag=os.getenv("E2E_IMAGE_TAG", ""),
            ssh_key=os.getenv("E2E_SSH_KEY", ""),
            ssh_user=os.getenv("E2E_SSH_USER", ""),
            remote_host=os.getenv("E2E_REMOTE_HOST", ""),
            connect_attempts=cls._get_int("E2E_CONNECT_ATTEMPTS", 20),
            retry_interval=cls._get_float("E2E_RETRY_INTERVAL", 1.0),
            shell=os.getenv("E2E_SHELL", "bash"),
            log_level=os.getenv("E2E_LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("E2E_LOG_COLORS", True),
        )

    @property
    def image(self) -> str:
        """Image reference built from repo and tag."""
        return image_reference(self.image_repo, self.image_tag)

    def retry_policy(self) -> RetryPolicy:
        """Build the connection retry policy."""
        return RetryPolicy(
            max_attempts=self.connect_attempts,
            retry_interval=self.retry_interval,
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get a positive integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or invalid

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            parsed = int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default
        if parsed <= 0:
            logger.warning("Non-positive %s: %s, using default %d", key, value, default)
            return default
        return parsed

    @staticmethod
    def _get_float(key: str, default: float) -> float:
        """Get a non-negative float from environment."""
        value = os.getenv(key)
        if value is None:
            return default

        try:
            parsed = float(value)
        except ValueError:
            logger.warning("Invalid float for %s: %s, using default %s", key, value, default)
            return default
        if parsed < 0:
            logger.warning("Negative %s: %s, using default %s", key, value, default)
            return default
        return parsed

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")
