"""
Orchestrator: privilege check, prerequisites, each tool in order, summary.
"""

import logging
import os
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from config.settings import Settings
from ..installers import ToolInstaller, build_installers
from ..models.installation import InstallationResult
from ..models.tool import ToolStatus
from .apt import AptClient
from .downloader import Downloader
from .planner import plan_install_order
from .privilege import require_root
from .probe import ToolProbe
from .reporter import SummaryReporter
from .runner import CommandRunner


class DevToolsOrchestrator:
    """Runs the whole provisioning sequence, stopping at the first fatal error."""

    def __init__(self,
                 settings: Settings,
                 runner: Optional[CommandRunner] = None,
                 downloader: Optional[Downloader] = None,
                 installers: Optional[List[ToolInstaller]] = None,
                 geteuid: Callable[[], int] = os.geteuid):
        """
        Initialize the orchestrator.

        Args:
            settings: Application settings
            runner: Command runner (a real subprocess runner if omitted)
            downloader: Downloader (urllib based if omitted)
            installers: Tool installers (the standard six if omitted)
            geteuid: Effective uid source for the privilege check
        """
        self.logger = logging.getLogger(__name__)
        self.settings = settings
        self.runner = runner or CommandRunner()
        self.downloader = downloader or Downloader(timeout=settings.download_timeout)
        self.apt = AptClient(self.runner, frontend=settings.apt.frontend)
        self.geteuid = geteuid

        if installers is None:
            installers = build_installers(settings, self.runner, self.apt, self.downloader)
        self.installers = plan_install_order(installers)

        self.reporter = SummaryReporter(
            probe=ToolProbe(self.runner),
            specs=[i.spec for i in self.installers],
            log_file=settings.logging.file_path
        )

    def install_prerequisites(self) -> None:
        self.logger.info("Installing prerequisites...")
        self.apt.install(*self.settings.apt.prerequisites)

    def run(self) -> Dict[str, Any]:
        """
        Main orchestration method.

        Returns:
            Summary of results
        """
        start_time = datetime.utcnow()
        require_root(self.geteuid)
        self.install_prerequisites()

        results: List[InstallationResult] = []
        for installer in self.installers:
            results.append(installer.install())

        reports = self.reporter.report()
        if self.settings.report_path:
            self.reporter.save_json(self.settings.report_path, reports, results)
        self.logger.info("Done.")

        return {
            "results": results,
            "reports": reports,
            "installed": [r.tool_name for r in results if r.status is ToolStatus.INSTALLED],
            "skipped": [r.tool_name for r in results if r.status is ToolStatus.SKIPPED],
            "duration_seconds": (datetime.utcnow() - start_time).total_seconds()
        }
