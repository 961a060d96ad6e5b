"""SDK root resolvers (strategies selected by host system)."""

from ._get_sdk_root_resolver import get_sdk_root_resolver
from ._resolver_protocol import SdkRootResolverProtocol
from .standalone import StandaloneSdkRootResolver, is_valid_sdk_root_path
from .xcrun import XcrunSdkRootResolver

__all__ = [
    "SdkRootResolverProtocol",
    "StandaloneSdkRootResolver",
    "XcrunSdkRootResolver",
    "get_sdk_root_resolver",
    "is_valid_sdk_root_path",
]
