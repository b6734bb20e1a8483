#!/usr/bin/env python3
"""
Main entry point for the developer tools installer.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from config.settings import Settings
from devtools.core.orchestrator import DevToolsOrchestrator
from devtools.errors import InstallerError, PrivilegeError
from devtools.utils.logging import setup_root_logger


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Install Node.js, pnpm, bun, uv, VS Code and PowerShell (run as root)"
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file (JSON format)"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from settings, INFO)"
    )

    parser.add_argument(
        "--report",
        type=Path,
        help="Write a JSON summary report to this path"
    )

    return parser.parse_args(argv)


def load_config(args) -> Settings:
    """Load configuration from file, environment and command line."""
    config_data = {}
    if args.config:
        if not args.config.exists():
            raise ValueError(f"Config file not found: {args.config}")
        with open(args.config) as f:
            config_data = json.load(f)

    # Override with command line args
    if args.log_level:
        config_data.setdefault("logging", {})["level"] = args.log_level
    if args.report:
        config_data["report_path"] = str(args.report)

    return Settings(**config_data)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    load_dotenv()
    args = parse_arguments(argv)

    try:
        settings = load_config(args)
    except (ValueError, OSError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_root_logger(
        settings.logging.file_path,
        settings.logging.level,
        format_string=settings.logging.format,
        max_bytes=settings.logging.max_file_size_mb * 1024 * 1024,
        backup_count=settings.logging.backup_count
    )
    logger = logging.getLogger(__name__)

    try:
        orchestrator = DevToolsOrchestrator(settings)
        orchestrator.run()
    except PrivilegeError as e:
        # Already logged by the guard
        return e.exit_code
    except InstallerError as e:
        logger.error(f"Fatal error: {e}")
        return e.exit_code
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
