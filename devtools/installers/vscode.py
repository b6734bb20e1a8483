from ..models.tool import ToolSpec, ToolStatus
from .base import DebPackageInstaller


class VSCodeInstaller(DebPackageInstaller):
    """VS Code stable .deb from Microsoft's download redirect."""

    spec = ToolSpec(
        name="code",
        display_name="VS Code",
        command="code",
        version_args=["--version"]
    )
    package_filename = "vscode.deb"

    @property
    def download_url(self) -> str:
        return self.settings.vscode.download_url

    def acquire(self) -> ToolStatus:
        self.logger.info("Installing VS Code (.deb)...")
        return super().acquire()
