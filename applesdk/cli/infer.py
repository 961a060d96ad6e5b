from collections.abc import Mapping
from platform import machine, system

# Host machine names (as in `platform.machine()`) into architectures known to Apple toolchains
APPLE_ARCHITECTURE_HOST_MACHINE_MAPPING: Mapping[str, str] = {
    "arm64": "arm64",
    "aarch64": "arm64",
    "x86_64": "x86_64",
    "amd64": "x86_64",
}

# Fallback for unknown host machines (e.g cross-compiling from something weird)
APPLE_ARCHITECTURE_FALLBACK = "arm64"


def infer_architecture() -> str:
    """Try to infer target architecture from current host machine."""
    return APPLE_ARCHITECTURE_HOST_MACHINE_MAPPING.get(
        machine().lower(),
        APPLE_ARCHITECTURE_FALLBACK,
    )


def infer_host_system(host: str | None) -> str:
    """Translate CLI host choice into `platform.system()` name, inferring it when omitted."""
    match host:
        case "darwin":
            return "Darwin"
        case "other":
            return "Other"
        case None:
            return system()
        case _:
            msg = f"Unknown host choice {host!r}"
            raise ValueError(msg)
