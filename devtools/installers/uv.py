from ..models.tool import ToolSpec, ToolStatus
from .base import ToolInstaller


class UvInstaller(ToolInstaller):
    """uv from Astral's standalone installer, unmanaged."""

    spec = ToolSpec(
        name="uv",
        display_name="uv",
        command="uv",
        version_args=["--version"]
    )

    def acquire(self) -> ToolStatus:
        uv = self.settings.uv
        self.logger.info(f"Installing uv to {uv.install_dir}...")
        env = {"UV_INSTALL_DIR": str(uv.install_dir)}
        if uv.unmanaged:
            env["UV_UNMANAGED_INSTALL"] = "1"
        self.run_vendor_script(uv.installer_url, ["sh"], env=env)
        return ToolStatus.INSTALLED
