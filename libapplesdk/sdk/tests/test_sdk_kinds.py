import pytest

from libapplesdk.sdk.kinds import FOREIGN_SDK_ROOT_MARKERS, SdkKind, is_sdk_root_foreign

XCODE_PLATFORMS = "/Applications/Xcode.app/Contents/Developer/Platforms"
MACOSX_SDK_ROOT = f"{XCODE_PLATFORMS}/MacOSX.platform/Developer/SDKs/MacOSX.sdk"
IPHONEOS_SDK_ROOT = f"{XCODE_PLATFORMS}/iPhoneOS.platform/Developer/SDKs/iPhoneOS.sdk"
IPHONESIMULATOR_SDK_ROOT = (
    f"{XCODE_PLATFORMS}/iPhoneSimulator.platform/Developer/SDKs/iPhoneSimulator.sdk"
)


@pytest.mark.parametrize(
    ("kind", "sdk_root", "is_foreign"),
    [
        (SdkKind.IPHONEOS, IPHONESIMULATOR_SDK_ROOT, True),
        (SdkKind.IPHONEOS, MACOSX_SDK_ROOT, True),
        (SdkKind.IPHONEOS, IPHONEOS_SDK_ROOT, False),
        (SdkKind.IPHONESIMULATOR, IPHONEOS_SDK_ROOT, True),
        (SdkKind.IPHONESIMULATOR, MACOSX_SDK_ROOT, True),
        (SdkKind.IPHONESIMULATOR, IPHONESIMULATOR_SDK_ROOT, False),
        (SdkKind.MACOSX, IPHONEOS_SDK_ROOT, True),
        (SdkKind.MACOSX, IPHONESIMULATOR_SDK_ROOT, True),
        (SdkKind.MACOSX, MACOSX_SDK_ROOT, False),
        (SdkKind.MACOSX_10_15, IPHONEOS_SDK_ROOT, True),
        (SdkKind.MACOSX_10_15, IPHONESIMULATOR_SDK_ROOT, True),
        (SdkKind.MACOSX_10_15, MACOSX_SDK_ROOT, False),
    ],
)
def test_is_sdk_root_foreign(kind: SdkKind, sdk_root: str, is_foreign: bool) -> None:  # noqa: FBT001
    assert is_sdk_root_foreign(sdk_root, kind) is is_foreign


@pytest.mark.parametrize(
    "kind",
    [
        SdkKind.APPLETVOS,
        SdkKind.APPLETVSIMULATOR,
        SdkKind.WATCHOS,
        SdkKind.WATCHSIMULATOR,
    ],
)
def test_is_sdk_root_foreign_unmatched_kind(kind: SdkKind) -> None:
    assert kind not in FOREIGN_SDK_ROOT_MARKERS
    assert kind.foreign_root_markers == ()
    for sdk_root in (MACOSX_SDK_ROOT, IPHONEOS_SDK_ROOT, IPHONESIMULATOR_SDK_ROOT):
        assert not is_sdk_root_foreign(sdk_root, kind)


def test_sdk_kind_markers_never_match_own_platform() -> None:
    own_markers = {
        SdkKind.MACOSX: "MacOSX.platform",
        SdkKind.MACOSX_10_15: "MacOSX.platform",
        SdkKind.IPHONEOS: "iPhoneOS.platform",
        SdkKind.IPHONESIMULATOR: "iPhoneSimulator.platform",
    }
    for kind, markers in FOREIGN_SDK_ROOT_MARKERS.items():
        assert own_markers[kind] not in markers


def test_sdk_kind_names() -> None:
    assert SdkKind("iphonesimulator") is SdkKind.IPHONESIMULATOR
    assert SdkKind.MACOSX_10_15.sdk_name == "macosx10.15"
    assert SdkKind.IPHONEOS.display_name == "iOS device"
    assert all(kind.display_name for kind in SdkKind)
