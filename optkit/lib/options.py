"""
One-call option parsing.

`opts_get` compiles a specification string and classifies a token stream in
a single step, populating caller-supplied containers in place.

Example:
    opts: dict[str, str] = {}
    params: list[str] = []
    result = opts_get("-e,--example:0:1 -t -x:1", tokens, opts, params)
    if not result.success:
        console.print(f"[bold red]Error: {result.error}[/bold red]")
"""

from typing import Sequence
from optkit.lib.getopts import SpecCompiler, TokenClassifier
from optkit.models.dataModel import ParseResult, SpecTable


def opts_get(
    valids: str,
    tokens: Sequence[str],
    opts: dict[str, str] | None = None,
    params: list[str] | None = None,
) -> ParseResult:
    """Parse tokens against the option format string valids.

    Args:
        valids: Format string, KEY[,ALTKEY...][:REQUIRED[:OPTIONAL]] ...
        tokens: The tokenized program input
        opts: Mapping to populate with canonical option keys => arguments
        params: List to populate with non-option arguments

    Returns:
        ParseResult; on failure success is False and error names the
        offending token. Options not expecting arguments are set to "true".
    """
    table: SpecTable = SpecCompiler().compile(valids)
    return TokenClassifier(table).classify(tokens, opts, params)


def error_get(
    valids: str,
    tokens: Sequence[str],
    opts: dict[str, str],
    params: list[str],
) -> str:
    """Like opts_get, but return "" on success and the error message otherwise."""
    result: ParseResult = opts_get(valids, tokens, opts, params)
    return "" if result.success else result.error or ""
