"""Entry point for running the container toolkit install script."""

import asyncio
import logging
import sys

from e2e_installer.config import Settings
from e2e_installer.models import ScriptParams
from e2e_installer.services import Installer, InstallerError
from e2e_installer.templates import DOCKER_INSTALL_TEMPLATE
from e2e_installer.utils import configure_logging

logger = logging.getLogger(__name__)


def build_installer(settings: Settings) -> Installer:
    """Create the docker install Installer from settings."""
    return Installer(
        template=DOCKER_INSTALL_TEMPLATE,
        params=ScriptParams(image=settings.image),
        ssh_key=settings.ssh_key,
        ssh_user=settings.ssh_user,
        remote_host=settings.remote_host,
        policy=settings.retry_policy(),
        shell=settings.shell,
    )


def main(settings: Settings | None = None) -> int:
    """Run the install script if requested.

    Returns:
        Process exit code
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level, settings.log_colors)

    if not settings.install_ctk:
        logger.info("E2E_INSTALL_CTK not set, nothing to do")
        return 0
    if not settings.image_repo:
        logger.error("E2E_IMAGE_REPO is required to install the toolkit")
        return 1

    installer = build_installer(settings)
    logger.info("Installing %s on %s", settings.image, settings.remote_host or "localhost")
    try:
        asyncio.run(installer.install())
    except InstallerError as e:
        logger.error("Install failed: %s", e)
        return 1

    logger.info("Install completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
