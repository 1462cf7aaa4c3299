"""
Option Parsing Commands

This module provides CLI commands that run the option parser over a token
stream and show how a specification string compiles.

Commands:
- optkit parse --spec SPEC -- TOKENS...: Classify tokens (plus piped stdin).
- optkit spec --spec SPEC: Show the compiled option table.

Tokens are best given after `--` so that dash-prefixed tokens reach the
parser untouched.
"""

import sys
from typing import Final
from rich.console import Console
from rich.markup import escape
from rich.table import Table
import click
from optkit.commands.base import RichCommand, rich_help
from optkit.config.settings import appsettings
from optkit.lib.getopts import SpecCompiler, TokenClassifier
from optkit.lib.input import tokens_collect
from optkit.lib.log import LOG
from optkit.models.dataModel import ParseResult, SpecTable

console: Console = Console()

SPEC_HELP: Final[str] = "Option format string, KEY[,ALTKEY...][:REQUIRED[:OPTIONAL]] ..."


def table_render(table: SpecTable) -> Table:
    """Build a Rich table describing every live option in a SpecTable."""
    rendered: Table = Table(title="Compiled options", title_justify="left")
    rendered.add_column("Canonical", style="cyan")
    rendered.add_column("Aliases", style="green")
    rendered.add_column("Required", justify="right")
    rendered.add_column("Optional", justify="right")
    for spec in table.bound():
        rendered.add_row(
            escape(spec.canonicalKey),
            escape(", ".join(table.aliases_of(spec))),
            str(spec.requiredCount),
            str(spec.optionalCount),
        )
    return rendered


def result_render(result: ParseResult) -> None:
    """Print the options mapping and positional parameters."""
    options: Table = Table(title="Options", title_justify="left")
    options.add_column("Option", style="cyan")
    options.add_column("Value", style="green")
    for key, value in result.options.items():
        options.add_row(escape(key), escape(repr(value)))
    console.print(options)

    console.print("[bold yellow]Parameters:[/bold yellow]")
    for param in result.params:
        console.print(f"- {escape(param)}", highlight=False)


@click.command(
    cls=RichCommand,
    short_help="Classify tokens against an option spec",
    context_settings={"ignore_unknown_options": True},
    help=rich_help(
        command="parse",
        description="Classify tokens into options and positional parameters",
        usage='optkit parse --spec "-e,--example:0:1 -t -x:1" -- -t -e hello foo',
        args={
            "TOKENS": "tokens to classify; piped stdin tokens are appended",
        },
    ),
)
@click.option("-s", "--spec", "spec_string", required=True, help=SPEC_HELP)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option(
    "--stdin/--no-stdin",
    "read_stdin",
    default=True,
    help="Append whitespace-split piped stdin to the tokens",
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def parse(spec_string: str, as_json: bool, read_stdin: bool, tokens: tuple[str, ...]) -> None:
    """
    Compile the spec, classify the tokens and print the outcome.
    """
    stream = click.get_text_stream("stdin")
    try:
        collected: list[str] = (
            tokens_collect(tokens, stream) if read_stdin else list(tokens)
        )
    except IOError as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/bold red]")
        sys.exit(1)

    table: SpecTable = SpecCompiler().compile(spec_string)
    result: ParseResult = TokenClassifier(table).classify(collected)

    if as_json:
        click.echo(result.model_dump_json(indent=appsettings.jsonIndent))
    elif result.success:
        if appsettings.detailedOutput:
            console.print(table_render(table))
        result_render(result)

    if not result.success:
        LOG(f"parse failed for tokens {collected}")
        if not as_json:
            console.print(f"[bold red]Error: {escape(result.error or '')}[/bold red]")
        sys.exit(1)


@click.command(
    cls=RichCommand,
    short_help="Show how an option spec compiles",
    help=rich_help(
        command="spec",
        description="Show the compiled option table for a spec string",
        usage='optkit spec --spec "-e,--example:0:1 -t -x:1"',
        args={"<None>": "no arguments"},
    ),
)
@click.option("-s", "--spec", "spec_string", required=True, help=SPEC_HELP)
def spec(spec_string: str) -> None:
    """
    Print the compiled option table.
    """
    table: SpecTable = SpecCompiler().compile(spec_string)
    if not len(table):
        console.print("[bold yellow]No options defined.[/bold yellow]")
        return
    console.print(table_render(table))
