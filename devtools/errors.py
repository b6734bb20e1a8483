"""
Exceptions raised by the installer. Each carries the process exit code it maps to.
"""

from typing import Optional, Sequence


class InstallerError(RuntimeError):
    """Base class for fatal installer failures."""

    exit_code = 1


class PrivilegeError(InstallerError):
    """Raised when the process lacks administrative rights."""


class PlanningError(InstallerError):
    """Raised when declared tool prerequisites cannot be satisfied."""


class ToolNotFoundError(InstallerError):
    """Raised when a caller requires a tool version that is unavailable."""


class DownloadError(InstallerError):
    """Raised when a vendor download fails."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Download failed for {url}: {reason}")


class CommandError(InstallerError):
    """Raised when an external command exits non-zero."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: Optional[str] = None):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr or ""
        message = f"Command failed with exit code {returncode}: {' '.join(self.command)}"
        if self.stderr.strip():
            message += f"\n{self.stderr.strip()}"
        super().__init__(message)

    @property
    def exit_code(self) -> int:
        return self.returncode if self.returncode > 0 else 1
