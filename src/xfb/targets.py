"""Fixed registry of buildable targets and their D entry files."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from xfb.errors import UnknownTargetError

# Declaration order matters: the first entry is the default target.
TARGETS: Mapping[str, str] = MappingProxyType(
    {
        "spinninglights": "../src/SpinningLights.d",
        "viewer": "../src/Viewer.d",
    }
)


def default_target() -> str:
    return next(iter(TARGETS))


def resolve_target(name: str) -> str:
    """Return the entry file registered for *name*."""
    try:
        return TARGETS[name]
    except KeyError:
        raise UnknownTargetError(
            f"Unknown target `{name}`.",
            hint=f"Known targets: {', '.join(TARGETS)}.",
            context={"target": name},
        ) from None
