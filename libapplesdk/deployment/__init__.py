"""Deployment target version for macOS (e.g `MACOSX_DEPLOYMENT_TARGET`)."""

from .resolver import (
    ELF_TLS_MINIMAL_DEPLOYMENT_VERSION,
    build_llvm_target_triple,
    macos_llvm_target,
    resolve_deployment_version,
    supports_elf_tls,
)
from .version import DEFAULT_DEPLOYMENT_VERSION, DeploymentVersion, parse_deployment_version

__all__ = [
    "DEFAULT_DEPLOYMENT_VERSION",
    "ELF_TLS_MINIMAL_DEPLOYMENT_VERSION",
    "DeploymentVersion",
    "build_llvm_target_triple",
    "macos_llvm_target",
    "parse_deployment_version",
    "resolve_deployment_version",
    "supports_elf_tls",
]
