from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from libapplesdk.environment import SDK_ROOT_ENVIRONMENT_VARIABLE, read_environment_variable
from libapplesdk.sdk.resolvers._resolver_protocol import SdkRootResolverProtocol

if TYPE_CHECKING:
    from libapplesdk.environment import EnvironmentSnapshot
    from libapplesdk.sdk.kinds import SdkKind


class StandaloneSdkRootResolver(SdkRootResolverProtocol):
    """Resolver for non-Darwin hosts, where `xcrun` is not available.

    Only user provided `SDKROOT` is used, and only if it is an valid path.
    """

    @property
    def name(self) -> str:
        return "standalone"

    def resolve(
        self,
        requested_kind: SdkKind,  # noqa: ARG002
        environment: EnvironmentSnapshot,
    ) -> Path | None:
        sdk_root = read_environment_variable(environment, SDK_ROOT_ENVIRONMENT_VARIABLE)
        if sdk_root is None:
            return None

        path = Path(sdk_root)
        if not is_valid_sdk_root_path(path):
            # Invalid override is same as no override at all
            return None
        return path


def is_valid_sdk_root_path(path: Path) -> bool:
    """Is an path suitable as SDK root (absolute, not an filesystem root and exists)."""
    return path.is_absolute() and path != Path(path.anchor) and path.exists()
