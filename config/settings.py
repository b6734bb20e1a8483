"""
Configuration settings for the developer tools installer.
"""

from typing import Optional, List
from pathlib import Path
from pydantic import BaseModel, Field, validator
from pydantic_settings import BaseSettings


DEFAULT_PREREQUISITES = [
    "ca-certificates",
    "curl",
    "wget",
    "gnupg",
    "lsb-release",
    "apt-transport-https",
    "software-properties-common",
    "unzip",
]


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(
        default="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        description="Log format"
    )
    file_path: Optional[Path] = Field(default=Path("/var/log/devtools-installer.log"))
    max_file_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(default=5, description="Number of log backups to keep")


class AptConfig(BaseModel):
    """System package manager configuration."""
    prerequisites: List[str] = Field(
        default_factory=lambda: list(DEFAULT_PREREQUISITES),
        description="Packages installed before any tool"
    )
    frontend: str = Field(default="noninteractive", description="DEBIAN_FRONTEND value")


class NodeConfig(BaseModel):
    """Node.js (NodeSource) configuration."""
    major: str = Field(default="20", description="Node.js major version")
    setup_url_template: str = Field(
        default="https://deb.nodesource.com/setup_{major}.x",
        description="NodeSource repository setup script"
    )

    @validator('major')
    def validate_major(cls, v):
        if not v.isdigit() or int(v) <= 0:
            raise ValueError(f"Node.js major version must be a positive integer: {v!r}")
        return v

    @property
    def setup_url(self) -> str:
        return self.setup_url_template.format(major=self.major)


class BunConfig(BaseModel):
    """Bun runtime configuration."""
    installer_url: str = Field(default="https://bun.com/install")
    install_dir: Path = Field(default=Path("/opt/bun"), description="System-wide BUN_INSTALL")
    bin_dir: Path = Field(default=Path("/usr/local/bin"), description="Directory for the bun symlink")
    profile_path: Path = Field(
        default=Path("/etc/profile.d/bun.sh"),
        description="Shell profile fragment for interactive sessions"
    )


class UvConfig(BaseModel):
    """uv configuration."""
    installer_url: str = Field(default="https://astral.sh/uv/install.sh")
    install_dir: Path = Field(default=Path("/usr/local/bin"), description="UV_INSTALL_DIR")
    unmanaged: bool = Field(default=True, description="Disable uv self-update (UV_UNMANAGED_INSTALL)")


class VSCodeConfig(BaseModel):
    """VS Code configuration."""
    download_url: str = Field(
        default="https://code.visualstudio.com/sha/download?build=stable&os=linux-deb-x64"
    )


class PowerShellConfig(BaseModel):
    """PowerShell configuration."""
    version: str = Field(default="7.5.4", description="Pinned PowerShell release")
    url_template: str = Field(
        default=(
            "https://github.com/PowerShell/PowerShell/releases/download/"
            "v{version}/powershell_{version}-1.deb_amd64.deb"
        )
    )

    @property
    def download_url(self) -> str:
        return self.url_template.format(version=self.version)


class Settings(BaseSettings):
    """Main application settings."""
    # Component configs
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    apt: AptConfig = Field(default_factory=AptConfig)
    node: NodeConfig = Field(default_factory=NodeConfig)
    bun: BunConfig = Field(default_factory=BunConfig)
    uv: UvConfig = Field(default_factory=UvConfig)
    vscode: VSCodeConfig = Field(default_factory=VSCodeConfig)
    powershell: PowerShellConfig = Field(default_factory=PowerShellConfig)

    # Operational settings
    temp_dir: Optional[Path] = Field(
        default=None,
        description="Parent directory for download scratch space (system default if unset)"
    )
    download_timeout: float = Field(default=300.0, description="Socket timeout for downloads in seconds")
    report_path: Optional[Path] = Field(default=None, description="Write a JSON summary report here")

    class Config:
        env_prefix = "DEVTOOLS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_nested_delimiter = "__"
        extra = "ignore"  # Ignore extra fields from environment
