"""
optkit Main Module.

This module serves as the main entry point for optkit, a small command-line
option parser and its companion helpers.

Features:
- Compiles option spec strings such as "-e,--example:0:1 -t -x:1"
- Classifies process arguments and piped stdin into options and parameters
- Date, currency and destination-path helpers
- Handles graceful termination on user interruption

Examples:
    Classify tokens:
        $ optkit parse --spec "-e,--example:0:1 -t -x:1" -- -t -e hello foo

    Append piped tokens:
        $ echo "hello foo" | optkit parse --spec "-t -e:0:1" -- -t -e

    Show a compiled spec:
        $ optkit spec --spec "-e,--example:0:1 -t -x:1"

    Helpers:
        $ optkit date ymd.HMS
        $ optkit currency 1234
        $ optkit path report.txt
"""

import signal
import sys
from types import FrameType
from typing import Final, Optional
import click
from rich.console import Console
from optkit.commands.app import cli

__version__: Final[str] = "0.1.0"

console: Final[Console] = Console()

cli = click.version_option(__version__, "-V", "--version", prog_name="optkit")(cli)


def signal_handle(sig: int, frame: Optional[FrameType]) -> None:
    """Signal handler for graceful interruption.

    Args:
        sig: Signal number
        frame: Current stack frame
    """
    console.print("\n[bold red]Interrupt received. Exiting.[/bold red]")
    sys.exit(130)


def main() -> None:
    """Main entry point for the optkit console script."""
    signal.signal(signal.SIGINT, signal_handle)
    cli(prog_name="optkit")


if __name__ == "__main__":
    main()
