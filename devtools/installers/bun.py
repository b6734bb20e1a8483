"""
Bun installed system-wide outside the package manager.
"""

from ..errors import InstallerError
from ..models.installation import VersionResult
from ..models.tool import ToolSpec, ToolStatus
from .base import ToolInstaller


PROFILE_TEMPLATE = """export BUN_INSTALL={install_dir}
export PATH="$BUN_INSTALL/bin:$PATH"
"""


class BunInstaller(ToolInstaller):
    spec = ToolSpec(
        name="bun",
        display_name="bun",
        command="bun",
        version_args=["--version"]
    )

    @property
    def link_path(self):
        return self.settings.bun.bin_dir / "bun"

    def acquire(self) -> ToolStatus:
        bun = self.settings.bun
        self.logger.info(f"Installing bun system-wide to {bun.install_dir}...")
        bun.install_dir.mkdir(parents=True, exist_ok=True)
        self.run_vendor_script(
            bun.installer_url,
            ["bash"],
            env={"BUN_INSTALL": str(bun.install_dir)}
        )

        # ln -sf semantics: replace a file or link, refuse a real directory
        bun.bin_dir.mkdir(parents=True, exist_ok=True)
        if self.link_path.is_dir() and not self.link_path.is_symlink():
            raise InstallerError(f"Cannot link bun: {self.link_path} is a directory")
        if self.link_path.is_symlink() or self.link_path.exists():
            self.link_path.unlink()
        self.link_path.symlink_to(bun.install_dir / "bin" / "bun")

        # PATH for future interactive shells
        bun.profile_path.parent.mkdir(parents=True, exist_ok=True)
        bun.profile_path.write_text(PROFILE_TEMPLATE.format(install_dir=bun.install_dir))
        return ToolStatus.INSTALLED

    def installed_version(self) -> VersionResult:
        # The current process PATH may not include bin_dir yet
        return self.probe.version(self.spec, executable=str(self.link_path))
