"""Tests for the final summary."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from devtools.core.apt import AptClient
from devtools.core.probe import ToolProbe
from devtools.core.reporter import SummaryReporter
from devtools.core.runner import CommandRunner
from devtools.installers import INSTALLER_CLASSES, UvInstaller
from devtools.models.tool import ToolStatus


def _reporter(runner, log_file=None) -> SummaryReporter:
    return SummaryReporter(ToolProbe(runner), [cls.spec for cls in INSTALLER_CLASSES], log_file=log_file)


@pytest.mark.unit
def test_nothing_installed_reports_every_tool_missing(runner, tmp_path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO)

    reports = _reporter(runner, tmp_path / "devtools.log").report()

    assert [r.installed for r in reports] == [False] * 6
    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "---- Summary ----"
    assert "node: (not installed)" in messages
    assert "pwsh: (not installed)" in messages
    assert messages[-1] == f"Log file: {tmp_path / 'devtools.log'}"


@pytest.mark.unit
def test_installed_tool_reports_first_version_line(runner) -> None:
    runner.installed["code"] = "1.95.3\nf1a4fb1\nx64"

    reports = {r.tool_name: r for r in _reporter(runner).collect()}

    assert reports["code"].installed
    assert reports["code"].version == "1.95.3"
    assert reports["code"].line == "code: 1.95.3"


@pytest.mark.unit
def test_broken_version_query_does_not_fail_the_summary(runner) -> None:
    runner.installed["pwsh"] = None

    reports = {r.tool_name: r for r in _reporter(runner).report()}

    assert reports["pwsh"].installed
    assert reports["pwsh"].version == ""


def _write_tool(directory: Path, name: str, content: bytes) -> None:
    tool = directory / name
    tool.write_bytes(content)
    tool.chmod(0o755)


@pytest.mark.unit
def test_unrunnable_and_garbled_tools_do_not_fail_the_summary(tmp_path: Path) -> None:
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    _write_tool(bin_dir, "uv", b"\x7fELFgarbage")
    _write_tool(bin_dir, "pwsh", b"#!/bin/sh\nprintf '\\377\\376 7.5\\n'\n")
    runner = CommandRunner(search_path=str(bin_dir))

    reports = {r.tool_name: r for r in _reporter(runner).report()}

    assert reports["uv"].installed
    assert reports["uv"].version == ""
    assert reports["pwsh"].installed
    assert reports["pwsh"].version.endswith("7.5")
    assert reports["node"].installed is False


@pytest.mark.unit
def test_unrunnable_tool_counts_as_present_for_its_installer(tmp_path: Path, settings, downloader) -> None:
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    _write_tool(bin_dir, "uv", b"\x7fELFgarbage")
    runner = CommandRunner(search_path=str(bin_dir))

    result = UvInstaller(settings, runner, AptClient(runner), downloader).install()

    assert result.status is ToolStatus.PRESENT
    assert result.version == ""
    assert downloader.fetched == []
