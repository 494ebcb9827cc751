"""SSH connection helper with bounded retry.

Freshly provisioned hosts may not accept SSH connections yet, so
connecting retries on a fixed interval up to a fixed attempt count.
Credential problems are never retried.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import asyncssh

from e2e_installer.models import RemoteTarget
from e2e_installer.services.errors import ConnectionExhaustedError, CredentialError

logger = logging.getLogger(__name__)

ConnectFunc = Callable[..., Awaitable[asyncssh.SSHClientConnection]]
SleepFunc = Callable[[float], Awaitable[Any]]


@dataclass(frozen=True)
class RetryPolicy:
    """How often and how fast to retry a failing connection."""

    max_attempts: int = 20
    retry_interval: float = 1.0

    def __post_init__(self) -> None:
        if self.max_attempts <= 0:
            raise ValueError(f"max_attempts must be > 0, got {self.max_attempts}")
        if self.retry_interval < 0:
            raise ValueError(f"retry_interval must be >= 0, got {self.retry_interval}")


def load_client_key(target: RemoteTarget) -> asyncssh.SSHKey:
    """Read and parse the private key for a remote target.

    Args:
        target: Remote target naming the key path

    Returns:
        Parsed private key

    Raises:
        CredentialError: If the file is unreadable or the key is invalid
    """
    try:
        return asyncssh.read_private_key(target.ssh_key)
    except (OSError, asyncssh.KeyImportError) as e:
        logger.error("Cannot load SSH key %s: %s", target.ssh_key, e)
        raise CredentialError(target.host, target.ssh_key, e) from e


async def connect_with_retry(
    target: RemoteTarget,
    policy: RetryPolicy | None = None,
    *,
    connect: ConnectFunc | None = None,
    sleep: SleepFunc | None = None,
) -> asyncssh.SSHClientConnection:
    """Open an SSH connection, retrying while the host refuses it.

    Args:
        target: Remote host, user and key path
        policy: Attempt count and interval, defaults to RetryPolicy()
        connect: Coroutine opening the connection, defaults to asyncssh.connect
        sleep: Coroutine waiting between attempts, defaults to asyncio.sleep

    Returns:
        The first connection that succeeds

    Raises:
        CredentialError: If the private key cannot be loaded
        ConnectionExhaustedError: If every attempt fails
    """
    policy = policy or RetryPolicy()
    connect = connect or asyncssh.connect
    sleep = sleep or asyncio.sleep
    key = load_client_key(target)

    # Host keys are not verified. Only acceptable for throwaway test hosts.
    logger.warning(
        "SSH host key verification DISABLED for %s - vulnerable to MITM attacks",
        target.host,
    )

    last_error: Exception | None = None
    for attempt in range(1, policy.max_attempts + 1):
        logger.info(
            "Opening SSH connection to %s (attempt %d/%d)",
            target.address,
            attempt,
            policy.max_attempts,
        )
        try:
            conn = await connect(
                target.host,
                port=target.port,
                username=target.ssh_user,
                client_keys=[key],
                known_hosts=None,
            )
        except (OSError, asyncssh.Error) as e:
            last_error = e
            logger.warning(
                "Connection to %s failed: %s (attempt %d/%d)",
                target.host,
                e,
                attempt,
                policy.max_attempts,
            )
            if attempt < policy.max_attempts:
                await sleep(policy.retry_interval)
            continue

        logger.info("SSH connection established to %s", target.address)
        return conn

    assert last_error is not None
    logger.error(
        "Giving up on %s after %d attempts", target.host, policy.max_attempts
    )
    raise ConnectionExhaustedError(target.host, policy.max_attempts, last_error)
