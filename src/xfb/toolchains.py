"""Closed set of supported D compilers and their literal xfBuild flags."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from xfb.errors import UnsupportedCompilerError


class Compiler(StrEnum):
    LDC = "ldc"
    DMD = "dmd"


class Mode(StrEnum):
    DEBUG = "debug"
    RELEASE = "release"


@dataclass(frozen=True, slots=True)
class ToolchainFlags:
    base: tuple[str, ...]
    release: tuple[str, ...]
    debug: tuple[str, ...]

    def for_mode(self, mode: Mode) -> tuple[str, ...]:
        return self.debug if mode is Mode.DEBUG else self.release


TOOLCHAINS: Mapping[Compiler, ToolchainFlags] = MappingProxyType(
    {
        # +modLimit1: LDC optimizes poorly when xfBuild batches several modules.
        Compiler.LDC: ToolchainFlags(
            base=("+cldc", "+q", "+modLimit1"),
            release=("-O5", "-release"),
            debug=("-gc", "-d-debug"),
        ),
        Compiler.DMD: ToolchainFlags(
            base=("+cdmd",),
            release=("-O", "-release"),
            debug=("-gc", "-debug"),
        ),
    }
)


def resolve_compiler(name: str) -> Compiler:
    try:
        return Compiler(name)
    except ValueError:
        raise UnsupportedCompilerError(
            f"Compiler `{name}` not supported.",
            hint=f"Supported compilers: {', '.join(c.value for c in Compiler)}.",
            context={"compiler": name},
        ) from None


def resolve_toolchain(name: str) -> ToolchainFlags:
    """Return the (base, release, debug) flag sets for compiler *name*."""
    return TOOLCHAINS[resolve_compiler(name)]
