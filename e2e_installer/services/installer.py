"""Render a script template and run it on the configured target."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from e2e_installer.models import ExecutionTarget, ScriptParams, resolve_target
from e2e_installer.services.connection import RetryPolicy
from e2e_installer.services.executors import select_runner
from e2e_installer.services.renderer import render

logger = logging.getLogger(__name__)


@dataclass
class Installer:
    """Install something by running a templated script.

    Runs locally when remote_host is empty, otherwise over SSH.
    """

    template: str
    params: ScriptParams | Mapping[str, Any]
    ssh_key: str = ""
    ssh_user: str = ""
    remote_host: str = ""
    policy: RetryPolicy = field(default_factory=RetryPolicy)
    shell: str = "bash"

    @property
    def target(self) -> ExecutionTarget:
        """Execution target derived from the remote host setting."""
        return resolve_target(self.ssh_key, self.ssh_user, self.remote_host)

    def render(self) -> str:
        """Render the template with this installer's parameters."""
        return render(self.template, self.params)

    async def run(self) -> str:
        """Render and run the script.

        Returns:
            Captured stdout of the script
        """
        script = self.render()
        runner = select_runner(self.target, self.policy, shell=self.shell)
        logger.info("Running install script on %s", self.remote_host or "localhost")
        return await runner.run(script)

    async def install(self) -> None:
        """Run the install script, discarding its output.

        Raises:
            InstallerError: Any rendering, connection or execution failure
        """
        await self.run()
