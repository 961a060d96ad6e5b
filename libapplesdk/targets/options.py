from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from libapplesdk.deployment import (
    DeploymentVersion,
    build_llvm_target_triple,
    supports_elf_tls,
)


@dataclass(frozen=True)
class AppleBaseTargetOptions:
    """Base options shared by all Apple targets."""

    # Deployment version options was derived from
    deployment_version: DeploymentVersion

    # Triple for code generator, only when architecture is known
    llvm_target: str | None

    # macOS has -dead_strip, which doesn't rely on function sections
    function_sections: Literal[False]

    dynamic_linking: bool
    executables: bool
    target_family: Literal["unix"]
    is_like_osx: bool
    has_rpath: bool

    dll_prefix: Literal["lib"]
    dll_suffix: Literal[".dylib"]
    archive_format: Literal["bsd"]

    # Thread-local storage is only available since 10.7
    has_elf_tls: bool

    abi_return_struct_as_int: bool
    emit_debug_gdb_scripts: bool


def apple_base_target_options(
    version: DeploymentVersion,
    architecture: str | None = None,
) -> AppleBaseTargetOptions:
    """Get base target options for given deployment version (and architecture if known)."""
    llvm_target = None
    if architecture is not None:
        llvm_target = build_llvm_target_triple(architecture, version)

    return AppleBaseTargetOptions(
        deployment_version=version,
        llvm_target=llvm_target,
        function_sections=False,
        dynamic_linking=True,
        executables=True,
        target_family="unix",
        is_like_osx=True,
        has_rpath=True,
        dll_prefix="lib",
        dll_suffix=".dylib",
        archive_format="bsd",
        has_elf_tls=supports_elf_tls(version),
        abi_return_struct_as_int=True,
        emit_debug_gdb_scripts=False,
    )
