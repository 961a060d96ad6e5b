import sys
from collections.abc import Generator
from contextlib import contextmanager
from typing import NoReturn

from applesdk.cli.output import cli_fatal_abort, cli_message
from libapplesdk.exceptions import AppleSdkError


@contextmanager
def cli_apple_sdk_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
    verbose: bool = False,
) -> Generator[None, None, NoReturn]:
    """Turn resolution errors into user-friendly messages and exit codes.

    :param debug_user_friendly_errors: If false, errors are re-raised with traceback
    :param verbose: If true, underlying cause (e.g OS error of spawned tool) is also shown
    """
    try:
        yield
    except AppleSdkError as e:
        if not debug_user_friendly_errors:
            raise
        if e.__cause__ is not None:
            cli_message(
                "INFO",
                f"Caused by {type(e.__cause__).__name__}: {e.__cause__}",
                verbose=verbose,
            )
        return cli_fatal_abort(repr(e))
    except KeyboardInterrupt:
        print(file=sys.stderr)
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        return sys.exit(0)
    # Wrapped goal always exits, reaching here means it returned
    cli_fatal_abort("Bug in an CLI: resolve goal returned instead of exiting")
