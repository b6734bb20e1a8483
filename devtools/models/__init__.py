"""
Data models for the developer tools installer.
"""

from .tool import ToolSpec, ToolStatus
from .installation import InstallationResult, ProbeStatus, ToolReport, VersionResult

__all__ = [
    "ToolSpec",
    "ToolStatus",
    "InstallationResult",
    "ProbeStatus",
    "ToolReport",
    "VersionResult"
]
