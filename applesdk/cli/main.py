from __future__ import annotations

import sys
from typing import NoReturn

from libapplesdk.deployment import resolve_deployment_version
from libapplesdk.environment import (
    DEPLOYMENT_TARGET_ENVIRONMENT_VARIABLE,
    SDK_ROOT_ENVIRONMENT_VARIABLE,
    read_process_environment,
)
from libapplesdk.sdk import get_sdk_root_resolver, resolve_sdk_root
from libapplesdk.targets import apple_base_target_options

from .arguments import CLIArguments, build_cli_parser, parse_cli_arguments
from .errors import cli_apple_sdk_error_handler
from .executable import cli_get_executable_program
from .output import cli_message


def cli_entry_point(prog: str | None = None, argv: list[str] | None = None) -> None:
    """CLI main entry."""
    prog = cli_get_executable_program(
        override=prog,
        warn_proper_installation=True,
    )

    parser = build_cli_parser(prog)
    args = parse_cli_arguments(parser.parse_args(argv))
    wrapper = cli_apple_sdk_error_handler(
        debug_user_friendly_errors=args.cli_debug_user_friendly_errors,
        verbose=args.verbose,
    )

    with wrapper:
        cli_perform_resolve_goal(args)

    # This is unreachable but error wrapper must fail
    cli_message("ERROR", "Bug in an CLI: resolve goal must exit!")
    sys.exit(1)


def cli_perform_resolve_goal(args: CLIArguments) -> NoReturn:
    """Resolve and display deployment target, triple and SDK root."""
    environment = read_process_environment()

    resolver = get_sdk_root_resolver(
        args.host_system,
        executable=args.xcrun_executable,
        timeout=args.xcrun_timeout,
        on_shell_call=lambda command: cli_message(
            "INFO",
            f"Running SDK lookup: {' '.join(command)}",
            verbose=args.verbose,
        ),
    )
    cli_message(
        "INFO",
        f"Using '{resolver.name}' SDK root resolver for host '{args.host_system}'",
        verbose=args.verbose,
    )

    version = resolve_deployment_version(environment)
    options = apple_base_target_options(version, args.architecture)
    sdk_root = resolve_sdk_root(args.sdk_kind, environment, resolver=resolver)

    print("[Apple SDK toolchain]")
    print("Deployment:")
    print(f"\t{DEPLOYMENT_TARGET_ENVIRONMENT_VARIABLE}: {environment.get(DEPLOYMENT_TARGET_ENVIRONMENT_VARIABLE, '<unset>')}")
    print(f"\tVersion: {version}")
    print(f"\tTriple: {options.llvm_target}")
    print(f"\tELF TLS: {options.has_elf_tls}")
    print("SDK:")
    print(f"\tKind: {args.sdk_kind.sdk_name} ({args.sdk_kind.display_name})")
    print(f"\t{SDK_ROOT_ENVIRONMENT_VARIABLE}: {environment.get(SDK_ROOT_ENVIRONMENT_VARIABLE, '<unset>')}")
    print(f"\tRoot: {sdk_root if sdk_root is not None else '<compiler default>'}")
    print("Base target options:")
    print(f"\tFamily: {options.target_family}")
    print(f"\tLibraries: {options.dll_prefix}*{options.dll_suffix} ({options.archive_format} archives)")
    print(f"\tRPATH: {options.has_rpath}")
    return sys.exit(0)


if __name__ == "__main__":
    cli_entry_point(prog=None)
