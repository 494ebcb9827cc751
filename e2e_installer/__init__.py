"""Render shell scripts and run them locally or on a remote host over SSH."""

from e2e_installer.models import LocalTarget, RemoteTarget, ScriptParams
from e2e_installer.services import (
    Installer,
    InstallerError,
    RetryPolicy,
    render,
    select_runner,
)

__all__ = [
    "Installer",
    "InstallerError",
    "LocalTarget",
    "RemoteTarget",
    "RetryPolicy",
    "ScriptParams",
    "render",
    "select_runner",
]
