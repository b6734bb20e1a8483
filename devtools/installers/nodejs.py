"""
Node.js from the NodeSource apt repository.
"""

from ..models.tool import ToolSpec, ToolStatus
from .base import ToolInstaller


class NodeJSInstaller(ToolInstaller):
    spec = ToolSpec(
        name="node",
        display_name="Node.js",
        command="node",
        version_args=["-v"]
    )

    def acquire(self) -> ToolStatus:
        node = self.settings.node
        self.logger.info(f"Installing Node.js via NodeSource ({node.major}.x)...")
        # Sets up the NodeSource repository and signing key
        self.run_vendor_script(node.setup_url, ["bash", "-"])
        self.apt.install("nodejs")
        return ToolStatus.INSTALLED
