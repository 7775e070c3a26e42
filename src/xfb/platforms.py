"""Host platform capabilities that affect the assembled command line.

Only two things about the host matter to the invoker: which path separator
the build tool expects and whether produced executables carry a suffix.
Both are answered by :class:`HostPlatform` so that command assembly never
inspects ``sys.platform`` itself.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from xfb.errors import ConfigurationError


class PathStyle(StrEnum):
    POSIX = "posix"
    WINDOWS = "windows"


@dataclass(frozen=True, slots=True)
class HostPlatform:
    name: str
    separator_style: PathStyle = PathStyle.POSIX
    exe_suffix: str = ""

    def path_separator_style(self) -> PathStyle:
        return self.separator_style

    def executable_suffix(self) -> str:
        return self.exe_suffix

    def native_path(self, path: str) -> str:
        """Rewrite forward slashes for hosts whose tools expect backslashes."""
        if self.separator_style is PathStyle.WINDOWS:
            return path.replace("/", "\\")
        return path


PLATFORMS: Mapping[str, HostPlatform] = MappingProxyType(
    {
        "linux": HostPlatform(name="linux"),
        "darwin": HostPlatform(name="osx"),
        "win32": HostPlatform(name="windows", separator_style=PathStyle.WINDOWS, exe_suffix=".exe"),
        "cygwin": HostPlatform(name="cygwin", exe_suffix=".exe"),
    }
)


def detect_host_platform() -> HostPlatform:
    for prefix, platform in PLATFORMS.items():
        if sys.platform.startswith(prefix):
            return platform
    raise ConfigurationError(
        "Operating system not supported.",
        hint=f"Supported hosts: {', '.join(sorted({p.name for p in PLATFORMS.values()}))}.",
        context={"platform": sys.platform},
    )
