"""
pnpm through Node's bundled Corepack.
"""

from ..models.tool import ToolSpec, ToolStatus
from .base import ToolInstaller


class PnpmInstaller(ToolInstaller):
    spec = ToolSpec(
        name="pnpm",
        display_name="pnpm",
        command="pnpm",
        version_args=["-v"],
        requires=["node"]
    )

    def acquire(self) -> ToolStatus:
        if not self.probe.exists("corepack"):
            self.logger.warning("corepack not found (should come with modern Node). Skipping pnpm.")
            return ToolStatus.SKIPPED

        self.logger.info("Enabling Corepack and installing pnpm...")
        for args in (["corepack", "enable"],
                     ["corepack", "prepare", "pnpm@latest", "--activate"]):
            result = self.runner.run(args, check=False)
            if result.returncode != 0:
                self.logger.warning(f"'{' '.join(args)}' exited with {result.returncode}; continuing")
        return ToolStatus.INSTALLED
