"""
Installation, version probe and summary result models.
"""

from enum import Enum
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

from ..errors import ToolNotFoundError
from .tool import ToolStatus


class ProbeStatus(str, Enum):
    """Outcome of a tolerated version query."""
    VALUE = "value"
    ABSENT = "absent"
    FAILED = "failed"


class VersionResult(BaseModel):
    """Version query result distinguishing a value, a missing tool and a failure."""
    command: str = Field(..., description="Executable that was queried")
    status: ProbeStatus = Field(..., description="Query outcome")
    value: Optional[str] = Field(None, description="Version string when status is value")
    error: Optional[str] = Field(None, description="Error output when the query failed")

    @property
    def text(self) -> str:
        """Benign string for log lines; empty unless a version was read."""
        return self.value if self.status is ProbeStatus.VALUE and self.value else ""

    def require(self) -> str:
        """Return the version, treating absence or failure as fatal."""
        if self.status is not ProbeStatus.VALUE:
            raise ToolNotFoundError(
                f"{self.command}: version unavailable ({self.status.value}"
                f"{': ' + self.error if self.error else ''})"
            )
        return self.value or ""


class InstallationResult(BaseModel):
    """Outcome of one installer run."""
    tool_name: str = Field(..., description="Tool name")
    status: ToolStatus = Field(default=ToolStatus.PENDING)
    version: str = Field(default="", description="Version reported after the run")
    message: Optional[str] = Field(None, description="Why the installer skipped or failed")

    # Timing
    started_at: datetime = Field(default_factory=datetime.utcnow)
    completed_at: Optional[datetime] = None
    duration_seconds: Optional[float] = None

    def complete(self, status: ToolStatus, version: str = "", message: Optional[str] = None) -> None:
        """Mark installation as complete."""
        self.status = status
        self.version = version
        self.message = message
        self.completed_at = datetime.utcnow()
        if self.started_at:
            self.duration_seconds = (self.completed_at - self.started_at).total_seconds()

    @property
    def acquired(self) -> bool:
        return self.status is ToolStatus.INSTALLED


class ToolReport(BaseModel):
    """One row of the final summary."""
    tool_name: str
    installed: bool
    version: str = ""

    @property
    def line(self) -> str:
        if not self.installed:
            return f"{self.tool_name}: (not installed)"
        return f"{self.tool_name}: {self.version}"
