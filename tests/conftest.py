"""Shared test fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from xfb.platforms import PLATFORMS, HostPlatform


@dataclass(slots=True)
class FakeRun:
    returncode: int = 0
    calls: list[list[str]] = field(default_factory=list)

    def __call__(self, cmd: list[str], **kwargs: Any) -> Any:
        self.calls.append(list(cmd))
        return type("R", (), {"returncode": self.returncode, "stdout": "", "stderr": ""})()


@pytest.fixture
def linux() -> HostPlatform:
    return PLATFORMS["linux"]


@pytest.fixture
def windows() -> HostPlatform:
    return PLATFORMS["win32"]


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> FakeRun:
    """Replace the child process with a recorder; xfbuild is always 'installed'."""
    recorder = FakeRun()
    monkeypatch.setattr("xfb.invoke.subprocess.run", recorder)
    monkeypatch.setattr("xfb.invoke.shutil.which", lambda _: "/usr/bin/xfbuild")
    monkeypatch.setattr("xfb.platforms.sys.platform", "linux")
    return recorder
