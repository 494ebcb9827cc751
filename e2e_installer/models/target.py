"""Execution target data models."""

from dataclasses import dataclass

SSH_PORT = 22


@dataclass(frozen=True)
class LocalTarget:
    """Run scripts on this machine."""


@dataclass(frozen=True)
class RemoteTarget:
    """Run scripts on a remote host over SSH."""

    ssh_key: str
    ssh_user: str
    host: str

    @property
    def port(self) -> int:
        """SSH port is always the protocol default."""
        return SSH_PORT

    @property
    def address(self) -> str:
        """Return ``user@host:port`` for log messages."""
        return f"{self.ssh_user}@{self.host}:{self.port}"


ExecutionTarget = LocalTarget | RemoteTarget


def resolve_target(
    ssh_key: str | None,
    ssh_user: str | None,
    remote_host: str | None,
) -> ExecutionTarget:
    """Pick the execution target from the configured remote host.

    Args:
        ssh_key: Path to the private key used for remote login
        ssh_user: Remote login user
        remote_host: Remote host address, empty or None for local execution

    Returns:
        LocalTarget when no host is given, otherwise a RemoteTarget
    """
    if not remote_host:
        return LocalTarget()
    return RemoteTarget(ssh_key=ssh_key or "", ssh_user=ssh_user or "", host=remote_host)
