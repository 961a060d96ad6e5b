"""Apple SDK root (sysroot) resolution.

SDK root is taken from `SDKROOT` environment variable (like Clang does),
validated against host capabilities and platform SDK layout queried with `xcrun`.
"""

from .errors import SdkLookupError
from .kinds import FOREIGN_SDK_ROOT_MARKERS, SdkKind, is_sdk_root_foreign
from .lookup import XCRUN_DEFAULT_PATH, compose_sdk_lookup_command, lookup_sdk_path
from .resolvers import (
    SdkRootResolverProtocol,
    StandaloneSdkRootResolver,
    XcrunSdkRootResolver,
    get_sdk_root_resolver,
)
from .sysroot import resolve_sdk_root

__all__ = [
    "FOREIGN_SDK_ROOT_MARKERS",
    "XCRUN_DEFAULT_PATH",
    "SdkKind",
    "SdkLookupError",
    "SdkRootResolverProtocol",
    "StandaloneSdkRootResolver",
    "XcrunSdkRootResolver",
    "compose_sdk_lookup_command",
    "get_sdk_root_resolver",
    "is_sdk_root_foreign",
    "lookup_sdk_path",
    "resolve_sdk_root",
]
