"""
Per-tool installers, in their declared install order.
"""

from typing import List

from config.settings import Settings
from ..core.apt import AptClient
from ..core.downloader import Downloader
from ..core.runner import CommandRunner
from .base import DebPackageInstaller, ToolInstaller
from .bun import BunInstaller
from .nodejs import NodeJSInstaller
from .pnpm import PnpmInstaller
from .powershell import PowerShellInstaller
from .uv import UvInstaller
from .vscode import VSCodeInstaller

INSTALLER_CLASSES = [
    NodeJSInstaller,
    PnpmInstaller,
    BunInstaller,
    UvInstaller,
    VSCodeInstaller,
    PowerShellInstaller,
]


def build_installers(settings: Settings,
                     runner: CommandRunner,
                     apt: AptClient,
                     downloader: Downloader) -> List[ToolInstaller]:
    """Instantiate every installer in declared order."""
    return [cls(settings, runner, apt, downloader) for cls in INSTALLER_CLASSES]


__all__ = [
    "INSTALLER_CLASSES",
    "build_installers",
    "ToolInstaller",
    "DebPackageInstaller",
    "NodeJSInstaller",
    "PnpmInstaller",
    "BunInstaller",
    "UvInstaller",
    "VSCodeInstaller",
    "PowerShellInstaller",
]
