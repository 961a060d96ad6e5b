from __future__ import annotations

from platform import system
from typing import TYPE_CHECKING

from libapplesdk.sdk.lookup import XCRUN_DEFAULT_PATH

from ._resolver_protocol import SdkRootResolverProtocol
from .standalone import StandaloneSdkRootResolver
from .xcrun import XcrunSdkRootResolver

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def get_sdk_root_resolver(
    host_system: str | None = None,
    *,
    executable: Path | None = None,
    timeout: float | None = None,
    on_shell_call: Callable[[list[str]], None] | None = None,
) -> SdkRootResolverProtocol:
    """Get SDK root resolver suitable for host system.

    `xcrun` is only available on Darwin (MacOS), other hosts only use `SDKROOT` as-is if it is valid

    :param host_system: Host system name as in `platform.system()`, inferred when omitted
    :param executable: Path to `xcrun` executable, only used on Darwin
    :param timeout: Timeout for `xcrun` process, only used on Darwin
    :param on_shell_call: Called with `xcrun` command before execution, only used on Darwin
    """
    if host_system is None:
        host_system = system()

    if host_system != "Darwin":
        return StandaloneSdkRootResolver()

    return XcrunSdkRootResolver(
        executable=executable or XCRUN_DEFAULT_PATH,
        timeout=timeout,
        on_shell_call=on_shell_call,
    )
