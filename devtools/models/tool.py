"""
Tool-related data models.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


class ToolStatus(str, Enum):
    """Outcome of a tool installer run."""
    PENDING = "pending"
    PRESENT = "present"
    INSTALLED = "installed"
    SKIPPED = "skipped"


class ToolSpec(BaseModel):
    """Specification for a tool to be installed."""
    name: str = Field(..., description="Short tool name used in the summary")
    display_name: str = Field(..., description="Human readable name used in log messages")
    command: str = Field(..., description="Executable probed on the search path")
    version_args: List[str] = Field(..., description="Arguments that print the installed version")
    requires: List[str] = Field(default_factory=list, description="Tools that must be installed first")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "pnpm",
                "display_name": "pnpm",
                "command": "pnpm",
                "version_args": ["-v"],
                "requires": ["node"]
            }
        }

    def version_command(self, executable: Optional[str] = None) -> List[str]:
        """Full version query, optionally through an explicit executable path."""
        return [executable or self.command, *self.version_args]
