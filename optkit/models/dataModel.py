"""
dataModel.py

This module defines the data models used throughout optkit.
The models leverage Pydantic for validation and type safety.

Features:
- Option specifications and the arena-backed table that aliases them
- Parse results carrying either populated outputs or an error message
- Error kinds with their message templates
- Input mode detection results

Usage:
Import these models to validate and structure data used in the application.
"""

from pydantic import BaseModel, Field, PrivateAttr
from enum import Enum
from typing import Final


TRUE_MARKER: Final[str] = "true"
END_OF_OPTIONS: Final[str] = "--"


class ParseErrorKind(Enum):
    """
    Enum for the two terminal parse failures.

    Each member's value is the message template; `{token}` is replaced by
    the offending token verbatim.
    """

    INVALID_OPTION = 'invalid option -- "{token}"'
    MISSING_ARGUMENT = "{token} requires an argument"

    def message(self, token: str) -> str:
        return self.value.format(token=token)


class OptionSpec(BaseModel):
    """
    One logical option.

    Attributes:
        canonicalKey (str): The first alias parsed for this option; used as
            the key in ParseResult.options.
        requiredCount (int): Arguments consumed unconditionally.
        optionalCount (int): Additional arguments consumed opportunistically.
    """

    canonicalKey: str = Field(default="", description="First alias seen.")
    requiredCount: int = Field(default=0, ge=0)
    optionalCount: int = Field(default=0, ge=0)

    @property
    def is_flag(self) -> bool:
        return self.requiredCount == 0 and self.optionalCount == 0


class SpecTable(BaseModel):
    """
    Mapping from alias to OptionSpec, many-to-one.

    OptionSpec records live in the `specs` arena; `aliases` maps each alias to
    an arena index, so every alias of one option resolves to the very same
    record. The table is sealed once compilation finishes.

    Attributes:
        specs (list[OptionSpec]): Arena of option records.
        aliases (dict[str, int]): Alias -> index into `specs`.
    """

    specs: list[OptionSpec] = Field(default_factory=list)
    aliases: dict[str, int] = Field(default_factory=dict)

    _sealed: bool = PrivateAttr(default=False)

    def spec_add(self, spec: OptionSpec) -> int:
        """Append a record to the arena and return its index."""
        self._check_open()
        self.specs.append(spec)
        return len(self.specs) - 1

    def alias_bind(self, alias: str, index: int) -> None:
        """Bind alias to the record at index, replacing any earlier binding."""
        self._check_open()
        if not 0 <= index < len(self.specs):
            raise IndexError(f"No option record at index {index}")
        self.aliases[alias] = index

    def lookup(self, alias: str) -> OptionSpec | None:
        index: int | None = self.aliases.get(alias)
        if index is None:
            return None
        return self.specs[index]

    def aliases_of(self, spec: OptionSpec) -> list[str]:
        """All aliases currently bound to spec, in binding order."""
        return [
            alias for alias, index in self.aliases.items() if self.specs[index] is spec
        ]

    def bound(self) -> list[OptionSpec]:
        """Records that still have at least one alias, in arena order."""
        live: set[int] = set(self.aliases.values())
        return [spec for i, spec in enumerate(self.specs) if i in live]

    def seal(self) -> None:
        self._sealed = True

    @property
    def sealed(self) -> bool:
        return self._sealed

    def _check_open(self) -> None:
        if self._sealed:
            raise RuntimeError("SpecTable is sealed; compile a new table instead")

    def __contains__(self, alias: object) -> bool:
        return alias in self.aliases

    def __len__(self) -> int:
        return len(self.aliases)


class ParseResult(BaseModel):
    """Result of classifying a token stream.

    Attributes:
        options: Canonical key -> space-joined arguments (flags map to "true")
        params: Positional parameters in order of appearance
        error: Error message if parsing failed
        success: Whether parsing succeeded
    """

    options: dict[str, str] = Field(default_factory=dict)
    params: list[str] = Field(default_factory=list)
    error: str | None = None
    success: bool = True


class InputMode(BaseModel):
    """Input mode determination.

    Attributes:
        has_stdin: Whether stdin is piped or redirected (not a terminal)
    """

    has_stdin: bool = False
