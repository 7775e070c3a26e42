"""Immutable per-invocation build configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from xfb.targets import default_target
from xfb.toolchains import Compiler, Mode

BUILD_TOOL = "xfbuild"
DEFAULT_COMPILER = Compiler.LDC.value
DEFAULT_BIN_DIR = "../bin"
DEFAULT_INCLUDE_DIRS = (
    "../libs/dAssimp",
    "../libs/derelict",
    "../src",
)


@dataclass(frozen=True, slots=True)
class BuildConfig:
    target: str = field(default_factory=default_target)
    compiler: str = DEFAULT_COMPILER
    debug: bool = False
    verbose: bool = False
    include_dirs: tuple[str, ...] = DEFAULT_INCLUDE_DIRS
    passthrough: tuple[str, ...] = ()
    tool: str = BUILD_TOOL
    bin_dir: str = DEFAULT_BIN_DIR

    @property
    def mode(self) -> Mode:
        return Mode.DEBUG if self.debug else Mode.RELEASE
