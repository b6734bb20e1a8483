"""
Existence probe and tolerated version queries.
"""

import logging
from typing import Optional

from ..models.installation import ProbeStatus, VersionResult
from ..models.tool import ToolSpec
from .runner import COMMAND_NOT_FOUND, CommandRunner


class ToolProbe:
    """Answers "is this tool installed, and which version" without ever raising."""

    def __init__(self, runner: CommandRunner):
        self.logger = logging.getLogger(__name__)
        self.runner = runner

    def exists(self, command: str) -> bool:
        """Check whether ``command`` resolves to an executable on the search path."""
        return self.runner.which(command) is not None

    def version(self, spec: ToolSpec, executable: Optional[str] = None) -> VersionResult:
        """
        Run the tool's version command.

        Args:
            spec: Tool specification
            executable: Query through this path instead of the bare command

        Returns:
            Version result; the first non-empty output line on success
        """
        cmd = spec.version_command(executable)
        result = self.runner.run(cmd, capture=True, check=False)

        if result.returncode == COMMAND_NOT_FOUND and not (result.stdout or "").strip():
            return VersionResult(command=cmd[0], status=ProbeStatus.ABSENT, error=result.stderr or None)

        if result.returncode != 0:
            self.logger.debug(f"Version query {' '.join(cmd)} exited {result.returncode}")
            return VersionResult(
                command=cmd[0],
                status=ProbeStatus.FAILED,
                error=(result.stderr or "").strip() or f"exit code {result.returncode}"
            )

        lines = [line.strip() for line in (result.stdout or "").splitlines() if line.strip()]
        if not lines:
            return VersionResult(command=cmd[0], status=ProbeStatus.FAILED, error="empty version output")
        return VersionResult(command=cmd[0], status=ProbeStatus.VALUE, value=lines[0])
