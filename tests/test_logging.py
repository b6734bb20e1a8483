"""Tests for console plus best-effort file logging."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import pytest

from devtools.utils.logging import setup_root_logger

ISO_PREFIX = re.compile(r"^\[\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}\] ")


@pytest.mark.unit
def test_messages_go_to_stdout_and_file(tmp_path: Path, restore_root_logger, capsys: pytest.CaptureFixture) -> None:
    log_file = tmp_path / "log" / "devtools-installer.log"

    assert setup_root_logger(log_file, "INFO") is True
    logging.getLogger("devtools.test").info("Installing uv to /usr/local/bin...")
    for handler in logging.getLogger().handlers:
        handler.flush()

    line = log_file.read_text().splitlines()[-1]
    assert ISO_PREFIX.match(line)
    assert line.endswith("Installing uv to /usr/local/bin...")
    assert "Installing uv to /usr/local/bin..." in capsys.readouterr().out


@pytest.mark.unit
def test_unwritable_log_file_falls_back_to_stdout(tmp_path: Path, restore_root_logger, capsys: pytest.CaptureFixture) -> None:
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("")

    assert setup_root_logger(blocker / "devtools-installer.log", "INFO") is False
    logging.getLogger("devtools.test").info("still logging")

    out = capsys.readouterr().out
    assert "Cannot write log file" in out
    assert "still logging" in out


@pytest.mark.unit
def test_file_logging_can_be_disabled(restore_root_logger) -> None:
    assert setup_root_logger(None, "DEBUG") is False
    assert logging.getLogger().level == logging.DEBUG
    assert len(logging.getLogger().handlers) == 1
