"""
Defines the main Click command group for optkit.

This module provides:
- The root `cli` command group for the application.
- Integration with Rich-enhanced Click classes (`RichGroup`).
- Registration of subcommands from other modules.

Usage:
Import `cli` to initialize and run the command-line interface.
"""

import click
from optkit.commands.base import RichGroup
from optkit.commands.parse import parse, spec
from optkit.commands.util import currency, date, path


@click.group(
    cls=RichGroup,
    help="""
    optkit Command Palette

    Parse command-line tokens against an option spec, and a few helpers.
    """,
)
def cli() -> None:
    """
    The root Click command group for optkit.
    """
    pass


# Explicitly annotate `cli` as `click.Group` for static type checking
cli: click.Group = cli

# Register subcommands
cli.add_command(parse)
cli.add_command(spec)
cli.add_command(date)
cli.add_command(currency)
cli.add_command(path)
