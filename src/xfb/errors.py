"""Typed error model with stable, machine-readable error codes."""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable error identifiers reported by the invoker."""

    CONFIGURATION = "E_CONFIGURATION"
    UNKNOWN_TARGET = "E_UNKNOWN_TARGET"
    UNSUPPORTED_COMPILER = "E_UNSUPPORTED_COMPILER"
    BUILD_FAILED = "E_BUILD_FAILED"


class XfbError(Exception):
    """Base error class that carries code, optional hint, and context."""

    code: str
    hint: str | None
    context: Mapping[str, str]

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code.value
        self.hint = hint
        self.context = dict(context or {})

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        if self.context:
            for k, v in self.context.items():
                if v:
                    parts.append(f"  {k}: {v}")
        return "\n".join(parts)

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "code": self.code,
            "message": str(self),
            "context": dict(self.context),
        }
        if self.hint is not None:
            payload["hint"] = self.hint
        return payload


class ConfigurationError(XfbError):
    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode = ErrorCode.CONFIGURATION,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=code, hint=hint, context=context)


class UnknownTargetError(ConfigurationError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.UNKNOWN_TARGET, hint=hint, context=context)


class UnsupportedCompilerError(ConfigurationError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.UNSUPPORTED_COMPILER, hint=hint, context=context)


class BuildFailedError(XfbError):
    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        context: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, code=ErrorCode.BUILD_FAILED, hint=hint, context=context)


__all__ = [
    "BuildFailedError",
    "ConfigurationError",
    "ErrorCode",
    "UnknownTargetError",
    "UnsupportedCompilerError",
    "XfbError",
]
