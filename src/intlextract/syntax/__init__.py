"""ICU message-format syntax package.

Provides the cursor-based parser, AST definitions and the canonical
serializer used to validate and normalize ``defaultMessage`` text.
Separate from extraction so it can be used on its own (linters, catalog
tooling).

Python 3.13+.
"""

from .ast import (
    ArgumentElement,
    ArgumentFormat,
    MessagePattern,
    OptionalFormatPattern,
    PatternElement,
    PluralFormat,
    SelectFormat,
    SimpleFormat,
    TextElement,
)
from .cursor import Cursor, ParseError, ParseResult
from .parser import MessageFormatError, MessageFormatParser, parse_message
from .serializer import MessageSerializer, print_icu_message, serialize

__all__ = [
    "ArgumentElement",
    "ArgumentFormat",
    "Cursor",
    "MessageFormatError",
    "MessageFormatParser",
    "MessagePattern",
    "MessageSerializer",
    "OptionalFormatPattern",
    "ParseError",
    "ParseResult",
    "PatternElement",
    "PluralFormat",
    "SelectFormat",
    "SimpleFormat",
    "TextElement",
    "parse_message",
    "print_icu_message",
    "serialize",
]
