"""
Token classifier.

Walks a token stream against a compiled SpecTable in a single forward pass,
sorting each token into an option, an option argument, or a positional
parameter. The first error aborts the scan and is returned as data in the
ParseResult; nothing here raises for malformed input.

Rules:
- A token bound in the table is always that option, with or without a
  leading dash, and even after the end-of-options marker.
- `--` switches on end-of-options and is not stored.
- An unbound token starting with `-` before `--` is an invalid option.
- Anything else is a positional parameter.

Argument consumption for an option:
- `requiredCount` following tokens are taken unconditionally.
- Up to `optionalCount` more are taken while the candidate is neither a
  bound key nor `--`, and the token after the candidate is not `--`.
"""

from typing import Self, Sequence
from optkit.models.dataModel import (
    END_OF_OPTIONS,
    TRUE_MARKER,
    OptionSpec,
    ParseErrorKind,
    ParseResult,
    SpecTable,
)
from optkit.lib.log import LOG


class TokenClassifier:
    """Classifies token streams against one SpecTable.

    Attributes:
        table: The compiled option table
    """

    def __init__(self: Self, table: SpecTable) -> None:
        self.table: SpecTable = table

    def classify(
        self: Self,
        tokens: Sequence[str],
        options: dict[str, str] | None = None,
        params: list[str] | None = None,
    ) -> ParseResult:
        """Classify tokens, writing into the given containers when supplied.

        Args:
            tokens: The token stream, read-only
            options: Optional caller-owned mapping to populate in place
            params: Optional caller-owned list to populate in place

        Returns:
            ParseResult with the populated outputs, or success=False and an
            error message naming the offending token
        """
        options = {} if options is None else options
        params = [] if params is None else params
        end_of_options: bool = False
        cursor: int = 0

        while cursor < len(tokens):
            token: str = tokens[cursor]
            spec: OptionSpec | None = self.table.lookup(token)

            if spec is None:
                if token == END_OF_OPTIONS:
                    end_of_options = True
                elif token.startswith("-") and not end_of_options:
                    return self._fail(ParseErrorKind.INVALID_OPTION, token, options, params)
                else:
                    params.append(token)
                cursor += 1
                continue

            options[spec.canonicalKey] = TRUE_MARKER if spec.is_flag else ""

            for _ in range(spec.requiredCount):
                if cursor + 1 >= len(tokens):
                    return self._fail(
                        ParseErrorKind.MISSING_ARGUMENT, token, options, params
                    )
                cursor += 1
                options[spec.canonicalKey] += tokens[cursor] + " "

            for _ in range(spec.optionalCount):
                if not self._optional_accepts(tokens, cursor + 1):
                    break
                cursor += 1
                options[spec.canonicalKey] += tokens[cursor] + " "

            cursor += 1

        return ParseResult(options=options, params=params, error=None, success=True)

    def _optional_accepts(self: Self, tokens: Sequence[str], candidate: int) -> bool:
        """Whether tokens[candidate] may be taken as an optional argument."""
        if candidate >= len(tokens):
            return False
        if tokens[candidate] in self.table or tokens[candidate] == END_OF_OPTIONS:
            return False
        following: int = candidate + 1
        if following < len(tokens) and tokens[following] == END_OF_OPTIONS:
            return False
        return True

    @staticmethod
    def _fail(
        kind: ParseErrorKind,
        token: str,
        options: dict[str, str],
        params: list[str],
    ) -> ParseResult:
        message: str = kind.message(token)
        LOG(f"Classification aborted: {message}")
        return ParseResult(options=options, params=params, error=message, success=False)


def tokens_classify(table: SpecTable, tokens: Sequence[str]) -> ParseResult:
    """Classify tokens against table with a fresh TokenClassifier."""
    return TokenClassifier(table).classify(tokens)
