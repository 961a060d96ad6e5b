from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from libapplesdk.environment import SDK_ROOT_ENVIRONMENT_VARIABLE, read_environment_variable
from libapplesdk.sdk.kinds import is_sdk_root_foreign
from libapplesdk.sdk.lookup import XCRUN_DEFAULT_PATH, lookup_sdk_path
from libapplesdk.sdk.resolvers._resolver_protocol import SdkRootResolverProtocol

if TYPE_CHECKING:
    from collections.abc import Callable

    from libapplesdk.environment import EnvironmentSnapshot
    from libapplesdk.sdk.kinds import SdkKind


class XcrunSdkRootResolver(SdkRootResolverProtocol):
    """Resolver for Darwin hosts, backed by `xcrun` SDK lookup tool.

    `SDKROOT` is usually provided by Xcode and assumed well-formed,
    but it is replaced with actual SDK path when it clearly belongs to another platform
    (e.g leftover from an previous build for iOS simulator while building for iOS device).
    """

    def __init__(
        self,
        *,
        executable: Path = XCRUN_DEFAULT_PATH,
        timeout: float | None = None,
        on_shell_call: Callable[[list[str]], None] | None = None,
    ) -> None:
        self.executable = executable
        self.timeout = timeout
        self.on_shell_call = on_shell_call

    @property
    def name(self) -> str:
        return "xcrun"

    def resolve(
        self,
        requested_kind: SdkKind,
        environment: EnvironmentSnapshot,
    ) -> Path | None:
        """Resolve SDK root for requested kind.

        :raises SdkLookupError: `SDKROOT` is set but lookup tool failed
        """
        sdk_root = read_environment_variable(environment, SDK_ROOT_ENVIRONMENT_VARIABLE)
        if sdk_root is None:
            # Compiler will fallback to its own default SDK resolution
            return None

        actual_sdk_path = lookup_sdk_path(
            requested_kind,
            executable=self.executable,
            timeout=self.timeout,
            on_shell_call=self.on_shell_call,
        )

        if is_sdk_root_foreign(sdk_root, requested_kind):
            return actual_sdk_path
        return Path(sdk_root)
