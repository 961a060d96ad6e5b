"""SDK path lookup via `xcrun` tool that is only available on Darwin (MacOS) hosts."""

from __future__ import annotations

from pathlib import Path
from subprocess import PIPE, TimeoutExpired, run
from typing import TYPE_CHECKING, Final

from libapplesdk.sdk.errors import SdkLookupError

if TYPE_CHECKING:
    from collections.abc import Callable

    from libapplesdk.sdk.kinds import SdkKind

# Resolved via PATH, same as toolchains do
XCRUN_DEFAULT_PATH: Final[Path] = Path("xcrun")


def compose_sdk_lookup_command(
    kind: SdkKind,
    *,
    executable: Path = XCRUN_DEFAULT_PATH,
) -> list[str]:
    """Construct `xcrun --show-sdk-path -sdk <kind>` command."""
    return [str(executable), "--show-sdk-path", "-sdk", kind.sdk_name]


def lookup_sdk_path(
    kind: SdkKind,
    *,
    executable: Path = XCRUN_DEFAULT_PATH,
    timeout: float | None = None,
    on_shell_call: Callable[[list[str]], None] | None = None,
) -> Path:
    """Query actual SDK path for that kind using SDK lookup tool.

    Not cached, each call spawns an new process

    :param kind: SDK kind to query path for
    :param executable: Path to `xcrun` executable
    :param timeout: Timeout in seconds for lookup process, None means wait forever
    :param on_shell_call: Called with command before execution e.g for logging
    :raises SdkLookupError: Tool cannot be spawned, timed out, exited with non-zero code or printed no usable path
    """
    command = compose_sdk_lookup_command(kind, executable=executable)
    if on_shell_call:
        on_shell_call(command)

    try:
        process = run(
            command,
            shell=False,
            check=False,
            stdout=PIPE,
            stderr=PIPE,
            timeout=timeout,
        )
    except TimeoutExpired as e:
        cause = f"process timed out after {e.timeout} seconds"
        raise SdkLookupError(kind=kind, cause=cause) from e
    except OSError as e:
        # Executable is missing or not permitted to run
        raise SdkLookupError(kind=kind, cause=str(e)) from e

    if process.returncode != 0:
        error = process.stderr.decode(errors="replace").strip()
        cause = f"process exit with error: {error}"
        raise SdkLookupError(kind=kind, cause=cause)

    try:
        sdk_path = process.stdout.decode().rstrip()
    except UnicodeDecodeError as e:
        cause = f"process returned undecodable SDK path: {e}"
        raise SdkLookupError(kind=kind, cause=cause) from e

    if not sdk_path:
        # `Path("")` is current directory, which is never an SDK
        raise SdkLookupError(kind=kind, cause="process returned empty SDK path")
    return Path(sdk_path)
