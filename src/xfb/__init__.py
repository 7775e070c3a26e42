"""Public package entrypoint for the xfBuild invoker."""

from .command import CommandLine, assemble_command, build_identifier
from .config import BuildConfig
from .errors import (
    BuildFailedError,
    ConfigurationError,
    ErrorCode,
    UnknownTargetError,
    UnsupportedCompilerError,
    XfbError,
)
from .invoke import BuildInvoker
from .platforms import HostPlatform, PathStyle, detect_host_platform
from .targets import TARGETS, resolve_target
from .toolchains import Compiler, Mode, ToolchainFlags, resolve_toolchain

__all__ = [
    "TARGETS",
    "BuildConfig",
    "BuildFailedError",
    "BuildInvoker",
    "CommandLine",
    "Compiler",
    "ConfigurationError",
    "ErrorCode",
    "HostPlatform",
    "Mode",
    "PathStyle",
    "ToolchainFlags",
    "UnknownTargetError",
    "UnsupportedCompilerError",
    "XfbError",
    "assemble_command",
    "build_identifier",
    "detect_host_platform",
    "resolve_target",
    "resolve_toolchain",
]
