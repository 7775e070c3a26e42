"""Run an assembled xfBuild command line and check the result."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass, field
from typing import NoReturn

from xfb.command import CommandLine, assemble_command
from xfb.config import BuildConfig
from xfb.errors import BuildFailedError
from xfb.observability import StructuredLogger
from xfb.platforms import HostPlatform


@dataclass(slots=True)
class BuildInvoker:
    logger: StructuredLogger = field(default_factory=StructuredLogger)

    def assemble(self, config: BuildConfig, platform: HostPlatform | None = None) -> CommandLine:
        command = assemble_command(config, platform)
        self.logger.log(
            operation="assemble",
            target=config.target,
            compiler=config.compiler,
            mode=config.mode.value,
            message="Assembled xfbuild command.",
            extra={"build_id": command.build_id, "argv": list(command.argv)},
        )
        return command

    def run(self, config: BuildConfig, platform: HostPlatform | None = None) -> CommandLine:
        """Assemble, announce and execute one build. Raises on failure."""
        command = self.assemble(config, platform)
        print(f"Building {config.target}...")
        if config.verbose:
            print(command)
        self.execute(config, command)
        return command

    def execute(self, config: BuildConfig, command: CommandLine) -> None:
        self.logger.log(
            operation="execute",
            target=config.target,
            compiler=config.compiler,
            mode=config.mode.value,
            message=f"Running {command.executable}.",
        )
        if shutil.which(command.executable) is None:
            self._fail(
                config,
                command,
                f"Build tool `{command.executable}` not found.",
                hint="Install xfBuild and ensure it is available in PATH.",
            )

        result = subprocess.run(list(command.argv), check=False)
        if result.returncode != 0:
            self._fail(
                config,
                command,
                "Build failed.",
                hint="Check the xfbuild output above for details.",
                returncode=result.returncode,
            )

    def _fail(
        self,
        config: BuildConfig,
        command: CommandLine,
        message: str,
        *,
        hint: str,
        returncode: int | None = None,
    ) -> NoReturn:
        context = {
            "target": config.target,
            "build_id": command.build_id,
            "command": str(command),
        }
        if returncode is not None:
            context["returncode"] = str(returncode)
        self.logger.log(
            operation="failed",
            target=config.target,
            compiler=config.compiler,
            mode=config.mode.value,
            message=message,
            level="error",
            extra=dict(context),
        )
        raise BuildFailedError(message, hint=hint, context=context)
