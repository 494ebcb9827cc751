"""Shared fixtures for e2e_installer tests."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import asyncssh
import pytest

from e2e_installer.models import RemoteTarget


@pytest.fixture
def key_file(tmp_path: Path) -> Path:
    """Write a freshly generated ed25519 private key."""
    key = asyncssh.generate_private_key("ssh-ed25519")
    path = tmp_path / "id_ed25519"
    path.write_bytes(key.export_private_key())
    return path


@pytest.fixture
def remote_target(key_file: Path) -> RemoteTarget:
    """Remote target with a valid key."""
    return RemoteTarget(ssh_key=str(key_file), ssh_user="ubuntu", host="10.0.0.5")


@pytest.fixture
def make_connection() -> Callable[..., MagicMock]:
    """Factory for mock SSH connections whose session returns a result."""

    def _make(stdout: str = "", stderr: str = "", returncode: int | None = 0) -> MagicMock:
        process = MagicMock()
        process.wait = AsyncMock(
            return_value=MagicMock(stdout=stdout, stderr=stderr, returncode=returncode)
        )
        conn = MagicMock()
        conn.create_process = AsyncMock(return_value=process)
        return conn

    return _make
