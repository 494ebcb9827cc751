"""Exceptions raised while rendering and running scripts."""


class InstallerError(Exception):
    """Base class for all e2e_installer failures."""


class TemplateError(InstallerError):
    """Script template could not be parsed or rendered."""

    def __init__(self, message: str, original_error: Exception | None = None):
        self.original_error = original_error
        super().__init__(message)


class ConnectionError(InstallerError):
    """Failed to establish SSH connection."""

    def __init__(self, host_name: str, original_error: Exception):
        """Initialize connection error.

        Args:
            host_name: Address of the SSH host
            original_error: Original exception that caused the failure
        """
        self.host_name = host_name
        self.original_error = original_error
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"failed to connect to {self.host_name}: {self.original_error}"


class CredentialError(ConnectionError):
    """Private key file is unreadable or cannot be parsed. Never retried."""

    def __init__(self, host_name: str, key_path: str, original_error: Exception):
        self.key_path = key_path
        super().__init__(host_name, original_error)

    def _describe(self) -> str:
        return (
            f"failed to load SSH key {self.key_path} for {self.host_name}: "
            f"{self.original_error}"
        )


class ConnectionExhaustedError(ConnectionError):
    """Every connection attempt failed."""

    def __init__(self, host_name: str, attempts: int, original_error: Exception):
        self.attempts = attempts
        super().__init__(host_name, original_error)

    def _describe(self) -> str:
        return (
            f"failed to connect to {self.host_name} after {self.attempts} "
            f"attempts, giving up: {self.original_error}"
        )


class SessionError(InstallerError):
    """SSH session could not be opened on an established connection."""

    def __init__(self, host_name: str, original_error: Exception):
        self.host_name = host_name
        self.original_error = original_error
        super().__init__(f"failed to create session on {host_name}: {original_error}")


class ExecutionError(InstallerError):
    """Script ran but failed, or could not be started.

    Both captured streams are kept verbatim for diagnostics.
    """

    def __init__(
        self,
        cause: str,
        stdout: str = "",
        stderr: str = "",
        returncode: int | None = None,
    ):
        self.cause = cause
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(
            f"script execution failed: {cause}\nSTDOUT: {stdout}\nSTDERR: {stderr}"
        )
