"""Environment snapshots consumed by resolvers.

Resolvers never touch `os.environ` directly, they receive an snapshot mapping
so resolution stays an pure function of its inputs.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import TypeAlias

EnvironmentSnapshot: TypeAlias = Mapping[str, str]

# Standard variable used by Apple toolchains to signal targeting older macOS versions
DEPLOYMENT_TARGET_ENVIRONMENT_VARIABLE = "MACOSX_DEPLOYMENT_TARGET"

# Like Clang, allow the `SDKROOT` variable used by Xcode to define the sysroot
SDK_ROOT_ENVIRONMENT_VARIABLE = "SDKROOT"


def read_process_environment() -> EnvironmentSnapshot:
    """Take snapshot of current process environment (copy, not an live view)."""
    return dict(os.environ)


def read_environment_variable(
    environment: EnvironmentSnapshot,
    name: str,
) -> str | None:
    """Get variable from snapshot, treating empty value same as unset one."""
    value = environment.get(name)
    if not value:
        return None
    return value
