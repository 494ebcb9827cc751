"""Tests for RemoteRunner against an in-process SSH server."""

import asyncio
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any

import asyncssh
import pytest
import pytest_asyncio

from e2e_installer.models import RemoteTarget
from e2e_installer.services.connection import RetryPolicy
from e2e_installer.services.errors import ExecutionError
from e2e_installer.services.executors import RemoteRunner

# Canned remote commands: stdout, stderr, exit status
COMMANDS = {
    "greet": (b"hello\n", b"warn\n", 0),
    "fail": (b"partial\n", b"boom\n", 3),
    "binary": (b"ok \xff\n" * 3, b"bad \xfe\n", 0),
    "binary-fail": (b"ok \xff\n", b"bad \xfe\n", 3),
}


async def _handle(process: asyncssh.SSHServerProcess) -> None:
    """Serve canned commands, plus ``cat`` which echoes stdin until EOF."""
    if process.command == "cat":
        data = await process.stdin.read()
        process.stdout.write(data)
        process.exit(0)
        return

    stdout, stderr, status = COMMANDS.get(process.command, (b"", b"not found\n", 127))
    process.stdout.write(stdout)
    process.stderr.write(stderr)
    process.exit(status)


@pytest_asyncio.fixture
async def ssh_port(key_file: Path) -> AsyncIterator[int]:
    """Run an SSH server on 127.0.0.1 that accepts the test key."""
    client_key = asyncssh.read_private_key(str(key_file))
    authorized = asyncssh.import_authorized_keys(client_key.export_public_key().decode())
    server = await asyncssh.listen(
        "127.0.0.1",
        0,
        server_host_keys=[asyncssh.generate_private_key("ssh-ed25519")],
        authorized_client_keys=authorized,
        process_factory=_handle,
        encoding=None,
    )
    try:
        yield server.get_port()
    finally:
        server.close()
        await server.wait_closed()


@pytest.fixture
def opened() -> list[asyncssh.SSHClientConnection]:
    """Connections opened by the runner under test."""
    return []


@pytest.fixture
def runner(
    key_file: Path, ssh_port: int, opened: list[asyncssh.SSHClientConnection]
) -> RemoteRunner:
    """RemoteRunner whose connections go to the local test server."""

    async def connect(host: str, **kwargs: Any) -> asyncssh.SSHClientConnection:
        kwargs["port"] = ssh_port
        conn = await asyncssh.connect(host, **kwargs)
        opened.append(conn)
        return conn

    target = RemoteTarget(ssh_key=str(key_file), ssh_user="tester", host="127.0.0.1")
    return RemoteRunner(target, RetryPolicy(max_attempts=1), connect=connect)


async def _assert_closed(opened: list[asyncssh.SSHClientConnection]) -> None:
    assert len(opened) == 1
    await asyncio.wait_for(opened[0].wait_closed(), timeout=5)


@pytest.mark.asyncio
async def test_returns_stdout(
    runner: RemoteRunner, opened: list[asyncssh.SSHClientConnection]
) -> None:
    """Successful session returns stdout only and closes the connection."""
    result = await asyncio.wait_for(runner.run("greet"), timeout=10)

    assert result == "hello\n"
    await _assert_closed(opened)


@pytest.mark.asyncio
async def test_nonzero_exit_carries_both_streams(
    runner: RemoteRunner, opened: list[asyncssh.SSHClientConnection]
) -> None:
    """Remote failure reports exit status, stdout and stderr."""
    with pytest.raises(ExecutionError) as exc_info:
        await asyncio.wait_for(runner.run("fail"), timeout=10)

    error = exc_info.value
    assert error.returncode == 3
    assert error.stdout == "partial\n"
    assert error.stderr == "boom\n"
    await _assert_closed(opened)


@pytest.mark.asyncio
async def test_invalid_utf8_output_is_kept(runner: RemoteRunner) -> None:
    """Undecodable bytes are replaced, not dropped."""
    result = await asyncio.wait_for(runner.run("binary"), timeout=10)

    assert result == "ok \ufffd\n" * 3


@pytest.mark.asyncio
async def test_invalid_utf8_in_failure_streams(runner: RemoteRunner) -> None:
    """Failure streams with undecodable bytes still reach the error."""
    with pytest.raises(ExecutionError) as exc_info:
        await asyncio.wait_for(runner.run("binary-fail"), timeout=10)

    assert exc_info.value.stdout == "ok \ufffd\n"
    assert exc_info.value.stderr == "bad \ufffd\n"


@pytest.mark.asyncio
async def test_script_reading_stdin_sees_eof(
    runner: RemoteRunner, opened: list[asyncssh.SSHClientConnection]
) -> None:
    """Remote stdin is closed, so a reading script finishes."""
    result = await asyncio.wait_for(runner.run("cat"), timeout=10)

    assert result == ""
    await _assert_closed(opened)
