"""Services for e2e_installer."""

from e2e_installer.services.connection import (
    RetryPolicy,
    connect_with_retry,
    load_client_key,
)
from e2e_installer.services.errors import (
    ConnectionError,
    ConnectionExhaustedError,
    CredentialError,
    ExecutionError,
    InstallerError,
    SessionError,
    TemplateError,
)
from e2e_installer.services.executors import LocalRunner, RemoteRunner, select_runner
from e2e_installer.services.installer import Installer
from e2e_installer.services.renderer import render

__all__ = [
    "ConnectionError",
    "ConnectionExhaustedError",
    "CredentialError",
    "ExecutionError",
    "Installer",
    "InstallerError",
    "LocalRunner",
    "RemoteRunner",
    "RetryPolicy",
    "SessionError",
    "TemplateError",
    "connect_with_retry",
    "load_client_key",
    "render",
    "select_runner",
]
