"""
Core modules for the developer tools installer.

The orchestrator depends on the installers package, which depends on these
modules; import it from ``devtools.core.orchestrator``.
"""

from .apt import AptClient
from .downloader import Downloader
from .probe import ToolProbe
from .reporter import SummaryReporter
from .runner import CommandRunner

__all__ = [
    "AptClient",
    "Downloader",
    "ToolProbe",
    "SummaryReporter",
    "CommandRunner"
]
