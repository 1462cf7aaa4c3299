"""
Utility Commands

Thin CLI wrappers over the formatting and path helpers.

Commands:
- optkit date [FORMAT]: Print the current date in FORMAT ([dmyYHMS], others literal).
- optkit currency CENTS: Print integer cents as dollars.
- optkit path [PREF] [POST]: Negotiate a destination path.
"""

import sys
from rich.console import Console
from rich.markup import escape
import click
from optkit.commands.base import RichCommand, rich_help
from optkit.lib.formatting import currency_format, date_get
from optkit.lib.paths import path_get

console: Console = Console()


@click.command(
    cls=RichCommand,
    short_help="Print the current date",
    help=rich_help(
        command="date",
        description="Print the current date in the given format",
        usage="optkit date d/m/y-H:M:S",
        args={"FORMAT": "any of d m y Y H M S; other characters are literal"},
    ),
)
@click.argument("format", required=False, default="d/m/y-H:M:S")
def date(format: str) -> None:
    console.print(escape(date_get(format)), highlight=False)


@click.command(
    cls=RichCommand,
    short_help="Format cents as dollars",
    context_settings={"ignore_unknown_options": True},
    help=rich_help(
        command="currency",
        description="Format integer cents as dollars",
        usage="optkit currency 1234",
        args={"CENTS": "integer number of cents"},
    ),
)
@click.argument("cents", type=int)
def currency(cents: int) -> None:
    console.print(currency_format(cents), highlight=False)


@click.command(
    cls=RichCommand,
    short_help="Negotiate a destination path",
    help=rich_help(
        command="path",
        description="Provide a filename to write to, asking before overwriting",
        usage="optkit path report.txt .bak",
        args={
            "PREF": "preferred filename; a timestamp is used when omitted",
            "POST": "suffix appended to the path",
        },
    ),
)
@click.argument("pref", required=False, default="")
@click.argument("post", required=False, default="")
def path(pref: str, post: str) -> None:
    """
    Print the negotiated path, or fail when overwriting was declined.
    """
    resolved: str = path_get(pref, post)
    if not resolved:
        console.print(
            f"[bold red]Error: not overwriting {escape(pref + post)}[/bold red]",
            soft_wrap=True,
        )
        sys.exit(1)
    console.print(escape(resolved), highlight=False, soft_wrap=True)
