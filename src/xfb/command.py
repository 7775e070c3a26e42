"""Translate a :class:`BuildConfig` into one xfBuild command line."""

from __future__ import annotations

from dataclasses import dataclass

from xfb.config import BuildConfig
from xfb.platforms import HostPlatform, detect_host_platform
from xfb.targets import resolve_target
from xfb.toolchains import Mode, resolve_compiler, resolve_toolchain


@dataclass(frozen=True, slots=True)
class CommandLine:
    target: str
    build_id: str
    argv: tuple[str, ...]

    @property
    def executable(self) -> str:
        return self.argv[0]

    def __str__(self) -> str:
        return " ".join(self.argv)


def build_identifier(target: str, platform: HostPlatform, compiler: str, mode: Mode) -> str:
    return f"{target}-{platform.name}-{compiler}-{mode.value}"


def artifact_flags(build_id: str) -> tuple[str, str]:
    """Dependency and object directories, namespaced by *build_id*."""
    return (f"+D.deps-{build_id}", f"+O.objs-{build_id}")


def output_binary(config: BuildConfig, platform: HostPlatform) -> str:
    return f"{config.bin_dir}/{config.target}{platform.executable_suffix()}"


def assemble_command(
    config: BuildConfig,
    platform: HostPlatform | None = None,
) -> CommandLine:
    host = platform or detect_host_platform()
    compiler = resolve_compiler(config.compiler)
    flags = resolve_toolchain(compiler.value)
    entry_file = resolve_target(config.target)

    build_id = build_identifier(config.target, host, compiler.value, config.mode)
    argv: list[str] = [config.tool, "-w"]
    argv.extend(f"-I{host.native_path(path)}" for path in config.include_dirs)
    argv.extend(artifact_flags(build_id))
    argv.extend(flags.base)
    argv.extend(flags.for_mode(config.mode))
    argv.append(f"+o{host.native_path(output_binary(config, host))}")
    argv.append(host.native_path(entry_file))
    # Pass-through arguments belong to xfbuild and are never rewritten.
    argv.extend(config.passthrough)

    return CommandLine(target=config.target, build_id=build_id, argv=tuple(argv))
