"""Deployment target (minimum macOS version) resolution.

ELF TLS is only available in macOS 10.7+. If you try to compile for 10.6
either the linker will complain if it is used or the binary will end up segfaulting at runtime when run on 10.6.
By default 10.7+ is targeted, but `MACOSX_DEPLOYMENT_TARGET` environment variable may be used to signal targeting older versions.
"""

from __future__ import annotations

from libapplesdk.deployment.version import (
    DEFAULT_DEPLOYMENT_VERSION,
    DeploymentVersion,
    parse_deployment_version,
)
from libapplesdk.environment import (
    DEPLOYMENT_TARGET_ENVIRONMENT_VARIABLE,
    EnvironmentSnapshot,
    read_environment_variable,
    read_process_environment,
)

# Lowest version where thread-local storage is usable
ELF_TLS_MINIMAL_DEPLOYMENT_VERSION = DeploymentVersion(major=10, minor=7)


def resolve_deployment_version(
    environment: EnvironmentSnapshot | None = None,
) -> DeploymentVersion:
    """Get deployment version requested via environment, falling back to default one.

    Malformed or missing value is not an error and silently yields default version.
    """
    if environment is None:
        environment = read_process_environment()

    requested = read_environment_variable(
        environment,
        DEPLOYMENT_TARGET_ENVIRONMENT_VARIABLE,
    )
    if requested is None:
        return DEFAULT_DEPLOYMENT_VERSION

    return parse_deployment_version(requested) or DEFAULT_DEPLOYMENT_VERSION


def build_llvm_target_triple(architecture: str, version: DeploymentVersion) -> str:
    """Format target triple for code generator (architecture is not validated)."""
    return f"{architecture}-apple-macosx{version.major}.{version.minor}.0"


def macos_llvm_target(
    architecture: str,
    environment: EnvironmentSnapshot | None = None,
) -> str:
    """Build target triple for requested deployment version of current environment."""
    version = resolve_deployment_version(environment)
    return build_llvm_target_triple(architecture, version)


def supports_elf_tls(version: DeploymentVersion) -> bool:
    return version >= ELF_TLS_MINIMAL_DEPLOYMENT_VERSION
