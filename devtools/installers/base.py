"""
Shared installer state machine: probe, acquire if absent, report version.
"""

import logging
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from config.settings import Settings
from ..core.apt import AptClient
from ..core.downloader import Downloader
from ..core.probe import ToolProbe
from ..core.runner import CommandRunner
from ..models.installation import InstallationResult, VersionResult
from ..models.tool import ToolSpec, ToolStatus


class ToolInstaller(ABC):
    """
    Base class for one developer tool.

    A tool is either present (left untouched) or absent (acquired once).
    Acquisition errors propagate; version queries never do.
    """

    spec: ToolSpec

    def __init__(self,
                 settings: Settings,
                 runner: CommandRunner,
                 apt: AptClient,
                 downloader: Downloader):
        self.logger = logging.getLogger(type(self).__module__)
        self.settings = settings
        self.runner = runner
        self.apt = apt
        self.downloader = downloader
        self.probe = ToolProbe(runner)

    @property
    def name(self) -> str:
        return self.spec.name

    def is_present(self) -> bool:
        return self.probe.exists(self.spec.command)

    def version(self) -> VersionResult:
        return self.probe.version(self.spec)

    def installed_version(self) -> VersionResult:
        """Version read right after acquisition; subclasses may query a known path."""
        return self.version()

    @abstractmethod
    def acquire(self) -> ToolStatus:
        """Install the tool. Returns INSTALLED, or SKIPPED for a tolerated skip."""

    def install(self) -> InstallationResult:
        result = InstallationResult(tool_name=self.spec.name)
        display = self.spec.display_name

        if self.is_present():
            version = self.version().text
            self.logger.info(f"{display} already installed: {version}")
            result.complete(ToolStatus.PRESENT, version)
            return result

        status = self.acquire()
        if status is ToolStatus.SKIPPED:
            result.complete(status, message=f"{display} installation skipped")
            return result

        version = self.installed_version().text
        self.logger.info(f"{display} installed: {version}")
        result.complete(status, version)
        return result

    def run_vendor_script(self, url: str, interpreter: List[str],
                          env: Optional[Dict[str, str]] = None) -> None:
        """Download a vendor install script and pipe it into ``interpreter``."""
        script = self.downloader.fetch_text(url)
        self.runner.run(interpreter, env=env, input_text=script)


class DebPackageInstaller(ToolInstaller):
    """Installs a vendor .deb downloaded into a scratch directory."""

    package_filename: str

    @property
    @abstractmethod
    def download_url(self) -> str:
        """URL of the .deb to install."""

    def acquire(self) -> ToolStatus:
        temp_root = self.settings.temp_dir
        # Removed on every exit path, including a failed apt install
        with tempfile.TemporaryDirectory(prefix=f"devtools-{self.spec.name}-", dir=temp_root) as temp_dir:
            package_path = Path(temp_dir) / self.package_filename
            self.downloader.fetch_file(self.download_url, package_path)
            self.apt.install_file(package_path)
        return ToolStatus.INSTALLED
