"""ICU message-format AST node definitions.

Mirrors the element model of the ICU MessageFormat syntax as accepted by
``intl-messageformat-parser``: literal text interleaved with ``{argument}``
elements, some of which carry plural/select sub-patterns.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

from intlextract.enums import ArgumentType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern structure
    "MessagePattern",
    "TextElement",
    "ArgumentElement",
    # Argument formats
    "SimpleFormat",
    "PluralFormat",
    "SelectFormat",
    "OptionalFormatPattern",
    # Type aliases
    "PatternElement",
    "ArgumentFormat",
    "ICUNode",
]


@dataclass(frozen=True, slots=True)
class MessagePattern:
    """Root node: a sequence of text and argument elements.

    Example:
        "Hello, {name}!" ->
        MessagePattern((TextElement("Hello, "), ArgumentElement("name"), TextElement("!")))
    """

    elements: tuple["PatternElement", ...]


@dataclass(frozen=True, slots=True)
class TextElement:
    """Literal text with escapes already decoded.

    ``\\#`` is kept verbatim (two characters) so the serializer can
    reproduce it; every other escape is decoded to its character.
    """

    value: str

    @staticmethod
    def guard(element: object) -> TypeIs["TextElement"]:
        """Type guard for TextElement."""
        return isinstance(element, TextElement)


@dataclass(frozen=True, slots=True)
class ArgumentElement:
    """Placeholder argument: {name} or {name, type, ...}."""

    id: str
    format: "ArgumentFormat | None" = None

    @staticmethod
    def guard(element: object) -> TypeIs["ArgumentElement"]:
        """Type guard for ArgumentElement."""
        return isinstance(element, ArgumentElement)


@dataclass(frozen=True, slots=True)
class SimpleFormat:
    """number/date/time argument with optional style.

    Examples:
        {count, number}
        {start, date, short}
    """

    type: ArgumentType
    style: str | None = None


@dataclass(frozen=True, slots=True)
class OptionalFormatPattern:
    """One option of a plural/select argument: ``selector {pattern}``."""

    selector: str
    value: MessagePattern


@dataclass(frozen=True, slots=True)
class PluralFormat:
    """Cardinal or ordinal plural argument.

    Examples:
        {n, plural, offset:1 =0 {nobody} one {# person} other {# people}}
        {place, selectordinal, one {#st} two {#nd} other {#th}}
    """

    options: tuple[OptionalFormatPattern, ...]
    ordinal: bool = False
    offset: int = 0

    @property
    def type(self) -> ArgumentType:
        """Argument type keyword this format serializes as."""
        return ArgumentType.SELECTORDINAL if self.ordinal else ArgumentType.PLURAL


@dataclass(frozen=True, slots=True)
class SelectFormat:
    """Select argument: {gender, select, male {he} female {she} other {they}}."""

    options: tuple[OptionalFormatPattern, ...]

    @property
    def type(self) -> ArgumentType:
        """Argument type keyword this format serializes as."""
        return ArgumentType.SELECT


type PatternElement = TextElement | ArgumentElement
type ArgumentFormat = SimpleFormat | PluralFormat | SelectFormat
type ICUNode = (
    MessagePattern
    | TextElement
    | ArgumentElement
    | SimpleFormat
    | PluralFormat
    | SelectFormat
    | OptionalFormatPattern
)
