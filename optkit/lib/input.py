"""
Input collection for optkit.

Builds the flat token stream the classifier consumes: process arguments
first, then, when standard input is piped or redirected rather than an
interactive terminal, its whitespace-split content.

The module handles:
- Input mode detection
- Reading and tokenizing stdin
- Assembling the final token stream
"""

import sys
from typing import Sequence, TextIO
from optkit.models.dataModel import InputMode
from optkit.lib.log import LOG


def mode_detect(stream: TextIO | None = None) -> InputMode:
    """Detect whether stream (default: sys.stdin) carries piped input.

    Args:
        stream: Stream to inspect

    Returns:
        InputMode with has_stdin set when the stream is not a terminal

    Note:
        A stream that cannot answer isatty() is treated as interactive.
    """
    stream = sys.stdin if stream is None else stream
    try:
        return InputMode(has_stdin=not stream.isatty())
    except Exception as e:
        LOG(f"Error detecting input mode: {e}")
        return InputMode(has_stdin=False)


def stdin_tokenize(stream: TextIO | None = None) -> list[str]:
    """Read the whole stream and split it on whitespace.

    Raises:
        IOError: If the stream cannot be read
    """
    stream = sys.stdin if stream is None else stream
    try:
        return stream.read().split()
    except Exception as e:
        LOG(f"Error reading from stdin: {e}")
        raise IOError(f"Failed to read from stdin: {e}")


def tokens_collect(args: Sequence[str], stream: TextIO | None = None) -> list[str]:
    """Assemble the token stream from arguments and piped input.

    Args:
        args: Process arguments, without the program name
        stream: Input stream (default: sys.stdin)

    Returns:
        args followed by stdin tokens when stdin is not a terminal

    Eg:
        tokens_collect(["argc1", "10"]) => ["argc1", "10"]
        echo "a b" | prog -t => ["-t", "a", "b"]
    """
    tokens: list[str] = list(args)
    mode: InputMode = mode_detect(stream)
    if mode.has_stdin:
        piped: list[str] = stdin_tokenize(stream)
        LOG(f"Appending {len(piped)} token(s) from stdin")
        tokens.extend(piped)
    return tokens
