"""Apple SDK toolchain command line interface.

Reports deployment target, target triple and SDK root resolved for current host and environment.
"""

from .cli.main import cli_entry_point

__all__ = ["cli_entry_point"]
