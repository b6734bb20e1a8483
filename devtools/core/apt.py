"""
Thin wrapper around apt-get.
"""

import logging
from pathlib import Path

from .runner import CommandRunner


class AptClient:
    """Refreshes the package index and installs packages; failures are fatal."""

    def __init__(self, runner: CommandRunner, frontend: str = "noninteractive"):
        self.logger = logging.getLogger(__name__)
        self.runner = runner
        self.env = {"DEBIAN_FRONTEND": frontend}

    def update(self) -> None:
        self.runner.run(["apt-get", "update", "-y"], env=self.env)

    def install(self, *packages: str) -> None:
        """Refresh the index, then install named packages without recommended extras."""
        if not packages:
            self.logger.info("No packages requested; skipping apt install")
            return
        self.update()
        self.runner.run(
            ["apt-get", "install", "-y", "--no-install-recommends", *packages],
            env=self.env
        )

    def install_file(self, package_file: Path) -> None:
        """Refresh the index, then install a downloaded .deb with its dependencies."""
        self.update()
        self.runner.run(["apt-get", "install", "-y", str(package_file)], env=self.env)
