"""Apple SDK toolchain resolution.

Resolves deployment target, target triple and SDK root for compiling and linking Apple targets.
"""

from .deployment import (
    DeploymentVersion,
    build_llvm_target_triple,
    resolve_deployment_version,
    supports_elf_tls,
)
from .exceptions import AppleSdkError
from .sdk import SdkKind, SdkLookupError, get_sdk_root_resolver, resolve_sdk_root
from .targets import AppleBaseTargetOptions, apple_base_target_options

__all__ = [
    "AppleBaseTargetOptions",
    "AppleSdkError",
    "DeploymentVersion",
    "SdkKind",
    "SdkLookupError",
    "apple_base_target_options",
    "build_llvm_target_triple",
    "get_sdk_root_resolver",
    "resolve_deployment_version",
    "resolve_sdk_root",
    "supports_elf_tls",
]
