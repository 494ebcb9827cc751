"""Protocol interfaces for dependency inversion.

Usage Example:

    from e2e_installer.protocols import ScriptRunner

    async def provision(runner: ScriptRunner, script: str) -> str:
        return await runner.run(script)

    # Any object with a matching ``run`` coroutine works, including
    # LocalRunner, RemoteRunner or a test double.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ScriptRunner(Protocol):
    """Protocol for running a rendered script somewhere.

    Implementations capture stdout and stderr separately and return
    stdout on success. Failures raise ExecutionError carrying both
    streams.
    """

    async def run(self, script: str) -> str:
        """Run a script to completion.

        Args:
            script: Rendered script text

        Returns:
            Captured standard output
        """
        ...
