"""Shared pytest fixtures: a scripted command runner, a fake downloader and sandboxed settings."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

import pytest

from config.settings import BunConfig, LoggingConfig, Settings, UvConfig
from devtools.core.apt import AptClient
from devtools.core.downloader import Downloader
from devtools.core.runner import COMMAND_NOT_FOUND, CommandRunner
from devtools.errors import CommandError, DownloadError

Matcher = Union[Sequence[str], Callable[[list], bool]]


def _matches(matcher: Matcher, args: list) -> bool:
    if callable(matcher):
        return matcher(args)
    prefix = list(matcher)
    return args[: len(prefix)] == prefix


@dataclass
class Call:
    args: list
    env: Optional[dict] = None
    input_text: Optional[str] = None
    capture: bool = False
    check: bool = True


class FakeRunner(CommandRunner):
    """Records commands instead of running them.

    ``installed`` maps executable names to the version text they print; a value
    of ``None`` means the executable exists but its version query fails.
    """

    def __init__(self, installed: Optional[dict] = None) -> None:
        super().__init__()
        self.installed: dict = dict(installed or {})
        self.calls: list = []
        self.effects: list = []
        self.failures: list = []

    def on(self, matcher: Matcher, **installs: Optional[str]) -> None:
        """Mark tools as installed once a matching command runs."""
        self.effects.append((matcher, installs))

    def fail(self, matcher: Matcher, returncode: int = 100) -> None:
        self.failures.append((matcher, returncode))

    def which(self, name: str) -> Optional[str]:
        return f"/usr/bin/{name}" if name in self.installed else None

    def run(self, args, env=None, input_text=None, capture=False, check=True):  # type: ignore[override]
        cmd = [str(a) for a in args]
        self.calls.append(Call(cmd, env, input_text, capture, check))

        for matcher, returncode in self.failures:
            if _matches(matcher, cmd):
                if check:
                    raise CommandError(cmd, returncode, "scripted failure")
                return subprocess.CompletedProcess(cmd, returncode, "", "scripted failure")

        for matcher, installs in self.effects:
            if _matches(matcher, cmd):
                self.installed.update(installs)

        if capture:
            name = Path(cmd[0]).name
            if name not in self.installed:
                return subprocess.CompletedProcess(cmd, COMMAND_NOT_FOUND, "", f"{name}: not found")
            version = self.installed[name]
            if version is None:
                return subprocess.CompletedProcess(cmd, 1, "", f"{name}: crashed")
            return subprocess.CompletedProcess(cmd, 0, f"{version}\n", "")
        return subprocess.CompletedProcess(cmd, 0, "", "")

    @property
    def commands(self) -> list:
        return [c.args for c in self.calls]

    @property
    def acquisition_calls(self) -> list:
        """Everything except version queries."""
        return [c for c in self.calls if not c.capture]


class FakeDownloader(Downloader):
    def __init__(self) -> None:
        super().__init__(timeout=1)
        self.fetched: list = []
        self.failing: set = set()

    def fetch_text(self, url: str) -> str:
        self.fetched.append(url)
        if url in self.failing:
            raise DownloadError(url, "HTTP 503 Service Unavailable")
        return f"#!/bin/sh\n# installer from {url}\n"

    def fetch_file(self, url: str, destination: Path) -> Path:
        self.fetched.append(url)
        if url in self.failing:
            raise DownloadError(url, "HTTP 404 Not Found")
        destination.write_bytes(b"!<arch>\n")
        return destination


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def downloader() -> FakeDownloader:
    return FakeDownloader()


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    path = tmp_path / "scratch"
    path.mkdir()
    return path


@pytest.fixture
def settings(tmp_path: Path, scratch_dir: Path) -> Settings:
    return Settings(
        logging=LoggingConfig(file_path=tmp_path / "log" / "devtools-installer.log"),
        bun=BunConfig(
            install_dir=tmp_path / "opt" / "bun",
            bin_dir=tmp_path / "usr-local-bin",
            profile_path=tmp_path / "profile.d" / "bun.sh",
        ),
        uv=UvConfig(install_dir=tmp_path / "usr-local-bin"),
        temp_dir=scratch_dir,
    )


@pytest.fixture
def apt(runner: FakeRunner) -> AptClient:
    return AptClient(runner)


@pytest.fixture
def make_installer(settings, runner, apt, downloader):
    def _make(cls):
        return cls(settings, runner, apt, downloader)

    return _make


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
