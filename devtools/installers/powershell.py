from ..models.tool import ToolSpec, ToolStatus
from .base import DebPackageInstaller


class PowerShellInstaller(DebPackageInstaller):
    """PowerShell pinned release .deb from GitHub."""

    spec = ToolSpec(
        name="pwsh",
        display_name="PowerShell",
        command="pwsh",
        version_args=["-NoLogo", "-NoProfile", "-Command", "$PSVersionTable.PSVersion.ToString()"]
    )
    package_filename = "powershell.deb"

    @property
    def download_url(self) -> str:
        return self.settings.powershell.download_url

    def acquire(self) -> ToolStatus:
        self.logger.info(
            f"Installing PowerShell {self.settings.powershell.version} (.deb from GitHub releases)..."
        )
        return super().acquire()
