"""
Command runner for external processes (apt, vendor installers, version queries).
"""

import logging
import os
import shutil
import subprocess
from typing import Dict, List, Optional, Sequence

from ..errors import CommandError


# Shell exit statuses for a missing and a non-executable command
COMMAND_NOT_FOUND = 127
COMMAND_NOT_EXECUTABLE = 126


class CommandRunner:
    """Runs external commands synchronously, aborting on failure unless told otherwise."""

    def __init__(self, search_path: Optional[str] = None):
        """
        Initialize the runner.

        Args:
            search_path: PATH used to resolve executables (process PATH if unset)
        """
        self.logger = logging.getLogger(__name__)
        self.search_path = search_path

    def which(self, name: str) -> Optional[str]:
        """Resolve an executable on the search path."""
        return shutil.which(name, path=self.search_path)

    def run(self,
            args: Sequence[str],
            env: Optional[Dict[str, str]] = None,
            input_text: Optional[str] = None,
            capture: bool = False,
            check: bool = True) -> subprocess.CompletedProcess:
        """
        Run a command and wait for it to finish.

        Args:
            args: Command and arguments
            env: Extra environment variables layered over the process environment
            input_text: Text fed to the command's stdin
            capture: Capture stdout/stderr instead of inheriting them
            check: Raise CommandError on a non-zero exit

        Returns:
            The completed process
        """
        cmd: List[str] = [str(a) for a in args]
        full_env = None
        if env or self.search_path:
            full_env = {**os.environ, **(env or {})}
            if self.search_path and "PATH" not in (env or {}):
                full_env["PATH"] = self.search_path

        self.logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                env=full_env,
                input=input_text,
                capture_output=capture,
                text=True,
                errors="replace",
                check=False
            )
        except OSError as e:
            # 127 when missing, 126 when present but not executable (ENOEXEC, EACCES)
            returncode = COMMAND_NOT_FOUND if isinstance(e, FileNotFoundError) else COMMAND_NOT_EXECUTABLE
            if check:
                raise CommandError(cmd, returncode, str(e)) from e
            return subprocess.CompletedProcess(cmd, returncode, "", str(e))

        if check and result.returncode != 0:
            raise CommandError(cmd, result.returncode, result.stderr if capture else None)
        return result
