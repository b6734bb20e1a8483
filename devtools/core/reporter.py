"""
Final summary: re-probe every tool and report what is installed.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..models.installation import InstallationResult, ToolReport
from ..models.tool import ToolSpec
from .probe import ToolProbe


class SummaryReporter:
    """Logs one status line per tool. Never raises on a missing or broken tool."""

    def __init__(self, probe: ToolProbe, specs: Sequence[ToolSpec], log_file: Optional[Path] = None):
        self.logger = logging.getLogger(__name__)
        self.probe = probe
        self.specs = list(specs)
        self.log_file = log_file

    def collect(self) -> List[ToolReport]:
        reports = []
        for spec in self.specs:
            if self.probe.exists(spec.command):
                version = self.probe.version(spec).text
                reports.append(ToolReport(tool_name=spec.name, installed=True, version=version))
            else:
                reports.append(ToolReport(tool_name=spec.name, installed=False))
        return reports

    def report(self) -> List[ToolReport]:
        """Log the summary block and return its rows."""
        self.logger.info("---- Summary ----")
        reports = self.collect()
        for report in reports:
            self.logger.info(report.line)
        self.logger.info(f"Log file: {self.log_file if self.log_file else '(stdout only)'}")
        return reports

    def save_json(self, path: Path,
                  reports: Sequence[ToolReport],
                  results: Sequence[InstallationResult] = ()) -> Path:
        """
        Save the run summary as JSON.

        Args:
            path: Output file
            reports: Summary rows
            results: Per-installer outcomes of this run

        Returns:
            Path to saved file
        """
        data: Dict[str, Any] = {
            "timestamp": datetime.utcnow().isoformat(),
            "log_file": str(self.log_file) if self.log_file else None,
            "tools": [r.model_dump() for r in reports],
            "results": [r.model_dump(mode="json") for r in results],
        }
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            json.dump(data, f, indent=2, default=str)

        self.logger.info(f"Saved JSON report to {path}")
        return path
