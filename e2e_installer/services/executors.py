"""Local and remote script execution."""

import asyncio
import logging
from dataclasses import dataclass, field

import asyncssh

from e2e_installer.models import ExecutionTarget, LocalTarget, RemoteTarget
from e2e_installer.protocols import ScriptRunner
from e2e_installer.services.connection import (
    ConnectFunc,
    RetryPolicy,
    SleepFunc,
    connect_with_retry,
)
from e2e_installer.services.errors import ExecutionError, SessionError

logger = logging.getLogger(__name__)


def _decode(stream: str | bytes | None) -> str:
    """Normalize captured output to text."""
    if stream is None:
        return ""
    if isinstance(stream, bytes):
        return stream.decode("utf-8", errors="replace")
    return stream


@dataclass(frozen=True)
class LocalRunner:
    """Run scripts in a local subprocess through a shell."""

    shell: str = "bash"

    async def run(self, script: str) -> str:
        """Run script as ``<shell> -c <script>``.

        Returns:
            Captured stdout.

        Raises:
            ExecutionError: If the shell cannot be started or exits nonzero.
        """
        logger.debug("Running script locally with %s", self.shell)
        try:
            proc = await asyncio.create_subprocess_exec(
                self.shell,
                "-c",
                script,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise ExecutionError(f"failed to start {self.shell}: {e}") from e

        # communicate() drains both pipes so the child never blocks on a full buffer
        raw_stdout, raw_stderr = await proc.communicate()
        stdout = _decode(raw_stdout)
        stderr = _decode(raw_stderr)

        if proc.returncode != 0:
            logger.error("Local script exited with status %s", proc.returncode)
            raise ExecutionError(
                f"exit status {proc.returncode}",
                stdout=stdout,
                stderr=stderr,
                returncode=proc.returncode,
            )

        logger.info("Local script completed")
        return stdout


@dataclass(frozen=True)
class RemoteRunner:
    """Run scripts on a remote host in a single SSH session.

    A connection is opened per call and closed before returning.
    """

    target: RemoteTarget
    policy: RetryPolicy = field(default_factory=RetryPolicy)
    connect: ConnectFunc | None = None
    sleep: SleepFunc | None = None

    async def run(self, script: str) -> str:
        """Run script as the command of one SSH session.

        Returns:
            Captured stdout.

        Raises:
            ConnectionError: If no connection could be established
                (CredentialError and ConnectionExhaustedError included).
            SessionError: If the session could not be opened.
            ExecutionError: If the script exits nonzero.
        """
        conn = await connect_with_retry(
            self.target,
            self.policy,
            connect=self.connect,
            sleep=self.sleep,
        )
        try:
            return await self._run_session(conn, script)
        finally:
            logger.info("Closing SSH connection to %s", self.target.host)
            conn.close()

    async def _run_session(self, conn: asyncssh.SSHClientConnection, script: str) -> str:
        try:
            # Bytes are decoded by _decode; remote stdin sees EOF immediately
            process = await conn.create_process(
                script, stdin=asyncssh.DEVNULL, encoding=None
            )
        except (OSError, asyncssh.Error) as e:
            logger.error("Cannot open session on %s: %s", self.target.host, e)
            raise SessionError(self.target.host, e) from e

        try:
            result = await process.wait(check=False)
        except (OSError, asyncssh.Error) as e:
            raise ExecutionError(f"session on {self.target.host} failed: {e}") from e
        finally:
            process.close()

        stdout = _decode(result.stdout)
        stderr = _decode(result.stderr)

        if result.returncode != 0:
            logger.error(
                "Remote script on %s exited with status %s",
                self.target.host,
                result.returncode,
            )
            raise ExecutionError(
                f"exit status {result.returncode}",
                stdout=stdout,
                stderr=stderr,
                returncode=result.returncode,
            )

        logger.info("Remote script on %s completed", self.target.host)
        return stdout


def select_runner(
    target: ExecutionTarget,
    policy: RetryPolicy | None = None,
    shell: str = "bash",
) -> ScriptRunner:
    """Return the runner for a target.

    Args:
        target: LocalTarget or RemoteTarget
        policy: Connection retry policy for remote targets
        shell: Interpreter for local targets

    Raises:
        TypeError: If target is neither variant
    """
    if isinstance(target, LocalTarget):
        logger.debug("Selected local runner")
        return LocalRunner(shell=shell)
    if isinstance(target, RemoteTarget):
        logger.debug("Selected remote runner for %s", target.address)
        return RemoteRunner(target, policy or RetryPolicy())
    raise TypeError(f"unsupported execution target: {target!r}")
