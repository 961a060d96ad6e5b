from __future__ import annotations

import sys
from pathlib import Path

from .output import cli_message


def cli_get_executable_program(
    *,
    override: str | None = None,
    warn_proper_installation: bool,
) -> str:
    """Get name of executable which is first argument (e.g `applesdk ...`)."""
    executable = override if override else Path(sys.argv[0]).name

    if warn_proper_installation and executable.endswith(".py"):
        cli_message(
            "WARNING",
            f"Running with prog == '{executable}', consider proper installation!",
            verbose=True,  # Treat as always verbose - as this cannot be inferred from configuration sources.
        )

    return executable
