"""
Root privilege check, run once before anything touches the system.
"""

import logging
import os
import sys
from typing import Callable, Optional

from ..errors import PrivilegeError


logger = logging.getLogger(__name__)


def require_root(geteuid: Callable[[], int] = os.geteuid, program: Optional[str] = None) -> None:
    """Raise PrivilegeError unless the effective user is root."""
    if geteuid() == 0:
        return
    program = program or os.path.basename(sys.argv[0]) or "devtools-installer"
    message = f"This script needs sudo/root. Re-run as: sudo {program}"
    logger.error(message)
    raise PrivilegeError(message)
