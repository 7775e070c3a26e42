import itertools

import pytest

from xfb.command import assemble_command, build_identifier, output_binary
from xfb.config import BuildConfig
from xfb.errors import UnknownTargetError, UnsupportedCompilerError
from xfb.platforms import HostPlatform
from xfb.targets import TARGETS
from xfb.toolchains import Compiler, Mode


def test_release_command_for_viewer_is_fully_ordered(linux: HostPlatform) -> None:
    command = assemble_command(BuildConfig(target="viewer", compiler="ldc"), linux)

    assert command.argv == (
        "xfbuild",
        "-w",
        "-I../libs/dAssimp",
        "-I../libs/derelict",
        "-I../src",
        "+D.deps-viewer-linux-ldc-release",
        "+O.objs-viewer-linux-ldc-release",
        "+cldc",
        "+q",
        "+modLimit1",
        "-O5",
        "-release",
        "+o../bin/viewer",
        "../src/Viewer.d",
    )
    assert command.build_id == "viewer-linux-ldc-release"
    assert command.executable == "xfbuild"
    assert str(command).startswith("xfbuild -w -I../libs/dAssimp")


def test_debug_mode_uses_only_debug_flags(linux: HostPlatform) -> None:
    command = assemble_command(BuildConfig(target="viewer", compiler="dmd", debug=True), linux)

    assert "-debug" in command.build_id
    assert command.build_id.endswith("-debug")
    assert "+D.deps-viewer-linux-dmd-debug" in command.argv
    assert ("-gc", "-debug") == command.argv[command.argv.index("+cdmd") + 1 :][:2]
    assert "-O" not in command.argv
    assert "-release" not in command.argv


def test_release_mode_never_uses_debug_flags(linux: HostPlatform) -> None:
    command = assemble_command(BuildConfig(target="spinninglights", compiler="ldc"), linux)

    assert command.build_id.endswith("-release")
    assert "-gc" not in command.argv
    assert "-d-debug" not in command.argv


def test_passthrough_arguments_are_appended_verbatim(linux: HostPlatform) -> None:
    extra = ("+full", "-L-lGL", "+v", "some/path")
    command = assemble_command(BuildConfig(target="viewer", passthrough=extra), linux)

    assert command.argv[-len(extra) :] == extra
    assert command.argv[-len(extra) - 1] == "../src/Viewer.d"


def test_custom_include_dirs_emit_one_flag_each(linux: HostPlatform) -> None:
    config = BuildConfig(target="viewer", include_dirs=("../a", "../b"))
    command = assemble_command(config, linux)

    assert [arg for arg in command.argv if arg.startswith("-I")] == ["-I../a", "-I../b"]


def test_windows_rewrites_paths_and_suffixes_binary(windows: HostPlatform) -> None:
    config = BuildConfig(target="viewer", passthrough=("-L/SUBSYSTEM:WINDOWS",))
    command = assemble_command(config, windows)

    assert "-I..\\libs\\dAssimp" in command.argv
    assert "+o..\\bin\\viewer.exe" in command.argv
    assert "..\\src\\Viewer.d" in command.argv
    assert command.build_id == "viewer-windows-ldc-release"
    assert command.argv[-1] == "-L/SUBSYSTEM:WINDOWS"


def test_output_binary_suffix_follows_platform(
    linux: HostPlatform,
    windows: HostPlatform,
) -> None:
    config = BuildConfig(target="spinninglights")

    assert output_binary(config, windows).endswith(".exe")
    assert not output_binary(config, linux).endswith(".exe")
    assert output_binary(config, linux) == "../bin/spinninglights"


def test_build_identifiers_never_collide(linux: HostPlatform) -> None:
    combos = list(itertools.product(TARGETS, Compiler, Mode))
    identifiers = {
        build_identifier(target, linux, compiler.value, mode) for target, compiler, mode in combos
    }

    assert len(identifiers) == len(combos)


def test_consecutive_builds_use_separate_artifact_dirs(linux: HostPlatform) -> None:
    first = assemble_command(BuildConfig(target="viewer"), linux)
    second = assemble_command(BuildConfig(target="viewer", debug=True), linux)

    assert first.argv[5:7] != second.argv[5:7]


def test_unknown_target_fails_during_assembly(linux: HostPlatform) -> None:
    with pytest.raises(UnknownTargetError):
        assemble_command(BuildConfig(target="editor"), linux)


def test_unsupported_compiler_fails_during_assembly(linux: HostPlatform) -> None:
    with pytest.raises(UnsupportedCompilerError) as excinfo:
        assemble_command(BuildConfig(target="viewer", compiler="gdc"), linux)

    assert excinfo.value.context["compiler"] == "gdc"


def test_default_config_builds_first_target() -> None:
    config = BuildConfig()

    assert config.target == "spinninglights"
    assert config.compiler == "ldc"
    assert config.mode is Mode.RELEASE
