"""Data models for e2e_installer."""

from e2e_installer.models.script import ScriptParams, image_reference
from e2e_installer.models.target import (
    SSH_PORT,
    ExecutionTarget,
    LocalTarget,
    RemoteTarget,
    resolve_target,
)

__all__ = [
    "ExecutionTarget",
    "LocalTarget",
    "RemoteTarget",
    "SSH_PORT",
    "ScriptParams",
    "image_reference",
    "resolve_target",
]
