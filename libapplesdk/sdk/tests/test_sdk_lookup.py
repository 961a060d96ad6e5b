import sys
from pathlib import Path

import pytest

from libapplesdk.sdk.errors import SdkLookupError
from libapplesdk.sdk.kinds import SdkKind
from libapplesdk.sdk.lookup import compose_sdk_lookup_command, lookup_sdk_path

posix_only = pytest.mark.skipif(
    sys.platform == "win32",
    reason="Fake SDK lookup tool is an shell script",
)


def _write_fake_xcrun(directory: Path, body: str) -> Path:
    executable = directory / "xcrun"
    executable.write_text(f"#!/bin/sh\n{body}\n")
    executable.chmod(0o755)
    return executable


def test_compose_sdk_lookup_command() -> None:
    assert compose_sdk_lookup_command(SdkKind.IPHONEOS) == [
        "xcrun",
        "--show-sdk-path",
        "-sdk",
        "iphoneos",
    ]
    assert compose_sdk_lookup_command(
        SdkKind.MACOSX_10_15,
        executable=Path("/usr/bin/xcrun"),
    ) == ["/usr/bin/xcrun", "--show-sdk-path", "-sdk", "macosx10.15"]


@posix_only
def test_lookup_sdk_path(tmp_path: Path) -> None:
    # `$3` is the SDK name, trailing whitespace must be trimmed
    executable = _write_fake_xcrun(tmp_path, 'printf "/sdks/%s.sdk  \\n\\n" "$3"')

    path = lookup_sdk_path(SdkKind.IPHONESIMULATOR, executable=executable)
    assert path == Path("/sdks/iphonesimulator.sdk")


@posix_only
def test_lookup_sdk_path_shell_call_hook(tmp_path: Path) -> None:
    executable = _write_fake_xcrun(tmp_path, "echo /sdks/macosx.sdk")
    calls: list[list[str]] = []

    lookup_sdk_path(SdkKind.MACOSX, executable=executable, on_shell_call=calls.append)
    assert calls == [[str(executable), "--show-sdk-path", "-sdk", "macosx"]]


@posix_only
def test_lookup_sdk_path_nonzero_exit(tmp_path: Path) -> None:
    executable = _write_fake_xcrun(
        tmp_path,
        'echo "xcrun: error: SDK \\"$3\\" cannot be located" >&2\nexit 1',
    )

    with pytest.raises(SdkLookupError) as e:
        lookup_sdk_path(SdkKind.IPHONEOS, executable=executable)

    assert e.value.kind is SdkKind.IPHONEOS
    assert "iphoneos" in str(e.value)
    assert "cannot be located" in str(e.value)
    assert "cannot be located" in e.value.cause
    assert 'SDK "iphoneos"' in e.value.cause
    assert "[sdk-lookup-error]" in repr(e.value)


def test_lookup_sdk_path_missing_executable(tmp_path: Path) -> None:
    with pytest.raises(SdkLookupError) as e:
        lookup_sdk_path(SdkKind.MACOSX, executable=tmp_path / "missing-xcrun")

    assert e.value.kind is SdkKind.MACOSX
    assert "macosx" in str(e.value)
    assert isinstance(e.value.__cause__, OSError)


@posix_only
def test_lookup_sdk_path_timeout(tmp_path: Path) -> None:
    executable = _write_fake_xcrun(tmp_path, "exec sleep 5")

    with pytest.raises(SdkLookupError) as e:
        lookup_sdk_path(SdkKind.MACOSX, executable=executable, timeout=0.1)

    assert "timed out" in str(e.value)


@posix_only
def test_lookup_sdk_path_undecodable_output(tmp_path: Path) -> None:
    executable = _write_fake_xcrun(tmp_path, "printf '/sdks/\\377.sdk\\n'")

    with pytest.raises(SdkLookupError) as e:
        lookup_sdk_path(SdkKind.IPHONEOS, executable=executable)

    assert "iphoneos" in str(e.value)
    assert isinstance(e.value.__cause__, UnicodeDecodeError)


@posix_only
@pytest.mark.parametrize("body", ["exit 0", "printf '  \\n\\n'"])
def test_lookup_sdk_path_empty_output(tmp_path: Path, body: str) -> None:
    executable = _write_fake_xcrun(tmp_path, body)

    with pytest.raises(SdkLookupError, match="empty SDK path"):
        lookup_sdk_path(SdkKind.MACOSX, executable=executable)
