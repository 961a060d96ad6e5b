from __future__ import annotations

from dataclasses import dataclass

# Components are treated as an unsigned 32-bit integers
DEPLOYMENT_VERSION_COMPONENT_MAX = 2**32 - 1


@dataclass(frozen=True, order=True)
class DeploymentVersion:
    """Minimum OS version that produced binary declares compatibility with.

    Ordering is lexicographic on (major, minor) as dataclass fields are compared in order.
    """

    major: int
    minor: int

    def __post_init__(self) -> None:
        assert 0 <= self.major <= DEPLOYMENT_VERSION_COMPONENT_MAX
        assert 0 <= self.minor <= DEPLOYMENT_VERSION_COMPONENT_MAX

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


# Default when nothing (or garbage) is requested, first version with ELF TLS
DEFAULT_DEPLOYMENT_VERSION = DeploymentVersion(major=10, minor=7)


def parse_deployment_version(text: str) -> DeploymentVersion | None:
    """Parse dotted `MAJOR.MINOR` version string.

    Returns None if there is not exactly two components or any of them is not an non-negative integer
    """
    components = text.split(".")
    if len(components) != 2:  # noqa: PLR2004
        return None

    major, minor = components
    if not _is_version_component(major) or not _is_version_component(minor):
        return None
    return DeploymentVersion(major=int(major), minor=int(minor))


def _is_version_component(component: str) -> bool:
    # `int()` accepts signs, whitespace and underscores, which are not valid here
    return (
        component.isascii()
        and component.isdecimal()
        and int(component) <= DEPLOYMENT_VERSION_COMPONENT_MAX
    )
