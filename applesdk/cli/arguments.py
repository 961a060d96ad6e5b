from __future__ import annotations

from argparse import ArgumentParser, Namespace
from dataclasses import dataclass
from pathlib import Path

from libapplesdk.sdk.kinds import SdkKind
from libapplesdk.sdk.lookup import XCRUN_DEFAULT_PATH

from .infer import infer_architecture, infer_host_system


@dataclass(frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole resolution process."""

    sdk_kind: SdkKind
    architecture: str
    host_system: str

    xcrun_executable: Path
    xcrun_timeout: float | None

    verbose: bool
    cli_debug_user_friendly_errors: bool


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    assert args.host in ("darwin", "other", None)

    return CLIArguments(
        sdk_kind=SdkKind(args.sdk),
        architecture=args.architecture or infer_architecture(),
        host_system=infer_host_system(args.host),
        xcrun_executable=Path(args.xcrun_executable),
        xcrun_timeout=args.xcrun_timeout,
        verbose=bool(args.verbose),
        cli_debug_user_friendly_errors=not args.debug_errors,
    )


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="Apple SDK - resolves deployment target, target triple and SDK root (sysroot) for Apple targets from environment (`MACOSX_DEPLOYMENT_TARGET`, `SDKROOT`) and `xcrun`",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "-sdk",
        "--sdk",
        dest="sdk",
        default=SdkKind.MACOSX.value,
        choices=[kind.value for kind in SdkKind],
        help=f"SDK kind to resolve SDK root for. Defaults to '{SdkKind.MACOSX.value}'",
    )
    parser.add_argument(
        "--arch",
        dest="architecture",
        required=False,
        default=None,
        help="Architecture for target triple (e.g arm64, x86_64). Inferred from host machine by default",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        dest="verbose",
        action="store_true",
        default=False,
        help="If passed, will emit additional messages (e.g called commands)",
    )

    host_group = parser.add_argument_group("Host")
    host_group.add_argument(
        "--host",
        dest="host",
        required=False,
        default=None,
        choices=["darwin", "other"],
        help="Treat host as Darwin (query `xcrun`) or as other system (only validate `SDKROOT`). Inferred by default",
    )
    host_group.add_argument(
        "--xcrun-executable",
        dest="xcrun_executable",
        type=str,
        default=str(XCRUN_DEFAULT_PATH),
        help="SDK lookup tool executable path to use on Darwin hosts",
    )
    host_group.add_argument(
        "--xcrun-timeout",
        "--timeout",
        dest="xcrun_timeout",
        type=float,
        default=None,
        help="Timeout in seconds for SDK lookup tool process. Waits forever by default",
    )

    debug_group = parser.add_argument_group("Debug")
    debug_group.add_argument(
        "--debug-errors",
        dest="debug_errors",
        action="store_true",
        default=False,
        help="If passed, errors are re-raised with traceback instead of user-friendly messages",
    )

    return parser
