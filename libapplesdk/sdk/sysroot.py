from __future__ import annotations

from typing import TYPE_CHECKING

from libapplesdk.environment import read_process_environment
from libapplesdk.sdk.resolvers import get_sdk_root_resolver

if TYPE_CHECKING:
    from pathlib import Path

    from libapplesdk.environment import EnvironmentSnapshot
    from libapplesdk.sdk.kinds import SdkKind
    from libapplesdk.sdk.resolvers import SdkRootResolverProtocol


def resolve_sdk_root(
    kind: SdkKind,
    environment: EnvironmentSnapshot | None = None,
    *,
    resolver: SdkRootResolverProtocol | None = None,
) -> Path | None:
    """Get SDK root (sysroot) to pass into linker/compiler for given SDK kind.

    Environment is read once per call when snapshot is not given, nothing is cached between calls.
    None means no override is available and compiler default must be used

    :raises SdkLookupError: `SDKROOT` is set on Darwin host but `xcrun` failed
    """
    if environment is None:
        environment = read_process_environment()
    if resolver is None:
        resolver = get_sdk_root_resolver()
    return resolver.resolve(kind, environment)
