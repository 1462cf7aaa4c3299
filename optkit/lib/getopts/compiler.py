r"""
Option-specification compiler.

Turns a specification string into a SpecTable. The string is a whitespace
separated list of option definitions, each of the form:

    KEY[,ALTKEY...][:REQUIRED[:OPTIONAL]]

Each definition is scanned left to right by a small state machine:

    READING_KEY --':'--> READING_REQUIRED --':'--> READING_OPTIONAL

Aliases and counts are bound into the table as soon as their terminating
delimiter (comma, colon or end of definition) is reached, so a later
definition that reuses an alias takes it over from the earlier one.

A comma ends an alias in every state, so in "-x:1,2" the text "1" becomes an
alias of -x and "2" is its required count.

Compilation never fails; malformed input degrades to zero counts or to
aliases that bind nothing.

Example:
    table = SpecCompiler().compile("-e,--example:0:1 -t -x:1")
    table.lookup("--example").canonicalKey   # "-e"
"""

import re
from enum import Enum, auto
from typing import Self
from optkit.models.dataModel import OptionSpec, SpecTable
from optkit.lib.log import LOG

ALIAS_SEPARATOR: str = ","
FIELD_SEPARATOR: str = ":"

_count_re = re.compile(r"^[+-]?\d+")


class ScanState(Enum):
    READING_KEY = auto()
    READING_REQUIRED = auto()
    READING_OPTIONAL = auto()


def count_parse(text: str) -> int:
    """Parse a count the way atoi does; no digits means 0, negatives clamp to 0."""
    match = _count_re.match(text.strip())
    if not match:
        return 0
    return max(int(match.group(0)), 0)


class SpecCompiler:
    """Compiles specification strings into SpecTables.

    A compiler holds no state between calls; each `compile` builds a fresh
    table.
    """

    def compile(self: Self, spec_string: str) -> SpecTable:
        """Compile a full specification string.

        Args:
            spec_string: Whitespace separated option definitions

        Returns:
            A sealed SpecTable
        """
        table: SpecTable = SpecTable()
        definitions: list[str] = spec_string.split() if spec_string else []
        for definition in definitions:
            self._definition_scan(definition, table)
        table.seal()
        LOG(
            f"Compiled {len(definitions)} definition(s) into "
            f"{len(table.bound())} option(s), {len(table)} alias(es)"
        )
        return table

    def _definition_scan(self: Self, definition: str, table: SpecTable) -> None:
        """Scan one definition, binding aliases and counts as they complete."""
        spec: OptionSpec = OptionSpec()
        index: int | None = None
        state: ScanState = ScanState.READING_KEY
        field: str = ""

        for char in definition:
            if char == ALIAS_SEPARATOR:
                # A comma always closes an alias, even inside a count field.
                index = self._field_emit(
                    ScanState.READING_KEY, field, spec, index, table
                )
                field = ""
            elif char == FIELD_SEPARATOR:
                index = self._field_emit(state, field, spec, index, table)
                field = ""
                state = self._state_advance(state)
            else:
                field += char

        if field:
            self._field_emit(state, field, spec, index, table)

    def _field_emit(
        self: Self,
        state: ScanState,
        field: str,
        spec: OptionSpec,
        index: int | None,
        table: SpecTable,
    ) -> int | None:
        """Bind a completed field and return the spec's arena index, if any."""
        match state:
            case ScanState.READING_KEY:
                if not field:
                    return index
                if index is None:
                    index = table.spec_add(spec)
                if not spec.canonicalKey:
                    spec.canonicalKey = field
                table.alias_bind(field, index)
            case ScanState.READING_REQUIRED:
                spec.requiredCount = count_parse(field)
            case ScanState.READING_OPTIONAL:
                spec.optionalCount = count_parse(field)
        return index

    @staticmethod
    def _state_advance(state: ScanState) -> ScanState:
        if state is ScanState.READING_KEY:
            return ScanState.READING_REQUIRED
        return ScanState.READING_OPTIONAL


def spec_compile(spec_string: str) -> SpecTable:
    """Compile spec_string with a fresh SpecCompiler."""
    return SpecCompiler().compile(spec_string)
