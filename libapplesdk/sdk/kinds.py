from collections.abc import Mapping
from enum import Enum


class SdkKind(Enum):
    """SDK names as understood by `xcrun -sdk`."""

    MACOSX = "macosx"

    # Versioned macOS SDK, treated same as `MACOSX` for contamination checks
    MACOSX_10_15 = "macosx10.15"

    IPHONEOS = "iphoneos"
    IPHONESIMULATOR = "iphonesimulator"

    # Kinds below have no foreign-root markers, so `SDKROOT` is always passed through
    APPLETVOS = "appletvos"
    APPLETVSIMULATOR = "appletvsimulator"
    WATCHOS = "watchos"
    WATCHSIMULATOR = "watchsimulator"

    @property
    def sdk_name(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return SDK_KIND_DISPLAY_NAMES[self]

    @property
    def foreign_root_markers(self) -> tuple[str, ...]:
        """Substrings of `SDKROOT` indicating that it was set for another SDK kind."""
        return FOREIGN_SDK_ROOT_MARKERS.get(self, ())


SDK_KIND_DISPLAY_NAMES: Mapping[SdkKind, str] = {
    SdkKind.MACOSX: "macOS",
    SdkKind.MACOSX_10_15: "macOS 10.15",
    SdkKind.IPHONEOS: "iOS device",
    SdkKind.IPHONESIMULATOR: "iOS simulator",
    SdkKind.APPLETVOS: "tvOS device",
    SdkKind.APPLETVSIMULATOR: "tvOS simulator",
    SdkKind.WATCHOS: "watchOS device",
    SdkKind.WATCHSIMULATOR: "watchOS simulator",
}

# Platform directories inside Xcode (e.g `.../Platforms/iPhoneOS.platform/Developer/SDKs/...`)
PLATFORM_MARKER_MACOSX = "MacOSX.platform"
PLATFORM_MARKER_IPHONEOS = "iPhoneOS.platform"
PLATFORM_MARKER_IPHONESIMULATOR = "iPhoneSimulator.platform"

# `SDKROOT` may be clearly set for the wrong platform,
# which may occur when compiling an custom build script while targeting iOS for example.
# Only kinds listed here are checked, anything else passes override unchanged
FOREIGN_SDK_ROOT_MARKERS: Mapping[SdkKind, tuple[str, ...]] = {
    SdkKind.IPHONEOS: (PLATFORM_MARKER_IPHONESIMULATOR, PLATFORM_MARKER_MACOSX),
    SdkKind.IPHONESIMULATOR: (PLATFORM_MARKER_IPHONEOS, PLATFORM_MARKER_MACOSX),
    SdkKind.MACOSX: (PLATFORM_MARKER_IPHONEOS, PLATFORM_MARKER_IPHONESIMULATOR),
    SdkKind.MACOSX_10_15: (PLATFORM_MARKER_IPHONEOS, PLATFORM_MARKER_IPHONESIMULATOR),
}


def is_sdk_root_foreign(sdk_root: str, kind: SdkKind) -> bool:
    """Is given `SDKROOT` value was set for SDK kind different from given one."""
    return any(marker in sdk_root for marker in kind.foreign_root_markers)
