"""Leveled messages for CLI, emitted into stderr so stdout is only an result."""

from __future__ import annotations

import sys
from typing import Literal, NoReturn, TextIO, TypeAlias

MessageLevel: TypeAlias = Literal["INFO", "WARNING", "ERROR"]

CLI_MESSAGE_PREFIX = "[applesdk]"


def cli_message(
    level: MessageLevel,
    text: str,
    *,
    verbose: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Emit message for user, INFO ones are only shown when verbose."""
    if level == "INFO" and not verbose:
        return
    print(f"{CLI_MESSAGE_PREFIX} {level}: {text}", file=stream or sys.stderr)


def cli_fatal_abort(text: str) -> NoReturn:
    cli_message("ERROR", text)
    sys.exit(1)
