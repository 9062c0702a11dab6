"""Serialize ICU message AST back to canonical message text.

The canonical form is what catalogs store as ``defaultMessage``:
- literal ``\\``, ``{`` and ``}`` in text are escaped, ``\\#`` is kept
- control characters are written as ``\\uXXXX`` escapes
- arguments print as ``{id}``, ``{id, type}`` or ``{id, type, style}``
- plural/select arguments print every option as `` selector {pattern}``
- leading whitespace inside options and around tokens is dropped

Serializing a parsed message and parsing the result again yields an equal
AST, so canonicalization is idempotent.

Python 3.13+.
"""

import re

from intlextract.constants import MAX_DEPTH
from intlextract.core.depth_guard import DepthGuard

from .ast import (
    ArgumentElement,
    MessagePattern,
    OptionalFormatPattern,
    PluralFormat,
    SelectFormat,
    SimpleFormat,
    TextElement,
)
from .parser import MessageFormatParser

__all__ = ["MessageSerializer", "print_icu_message", "serialize"]

_ESCAPED_CHARS: dict[str, str] = {
    "\\": "\\\\",
    "\\#": "\\#",
    "{": "\\{",
    "}": "\\}",
}

# Text keeps whitespace; control characters only survive as \uXXXX escapes.
_TEXT_ESCAPE_RE = re.compile(r"\\#|[{}\\\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
# Styles and selectors end at whitespace, so it is escaped there too.
_CHARS_ESCAPE_RE = re.compile(r"\\#|[{}\\\x00-\x20\x7f]")


def _escape_match(match: re.Match[str]) -> str:
    token = match.group(0)
    escaped = _ESCAPED_CHARS.get(token)
    return escaped if escaped is not None else f"\\u{ord(token):04X}"


def _escape_text(text: str) -> str:
    return _TEXT_ESCAPE_RE.sub(_escape_match, text)


def _escape_chars(chars: str) -> str:
    return _CHARS_ESCAPE_RE.sub(_escape_match, chars)


class MessageSerializer:
    """Converts a MessagePattern back to canonical ICU message text.

    All serialization state is local to the serialize() call.

    Usage:
        >>> from intlextract.syntax import parse_message
        >>> MessageSerializer().serialize(parse_message("{n,plural,one{# item}other{# items}}"))
        '{n, plural, one {# item} other {# items}}'
    """

    __slots__ = ("_max_depth",)

    def __init__(self, *, max_depth: int = MAX_DEPTH) -> None:
        """Initialize serializer.

        Args:
            max_depth: Maximum nesting depth of plural/select arguments
        """
        self._max_depth = max_depth

    def serialize(self, pattern: MessagePattern) -> str:
        """Serialize a MessagePattern to canonical text.

        Raises:
            DepthLimitExceededError: If the AST nests deeper than max_depth
        """
        output: list[str] = []
        self._serialize_pattern(pattern, output, DepthGuard(max_depth=self._max_depth))
        return "".join(output)

    def _serialize_pattern(
        self, pattern: MessagePattern, output: list[str], guard: DepthGuard
    ) -> None:
        for element in pattern.elements:
            if TextElement.guard(element):
                output.append(_escape_text(element.value))
            else:
                with guard:
                    self._serialize_argument(element, output, guard)

    def _serialize_argument(
        self, node: ArgumentElement, output: list[str], guard: DepthGuard
    ) -> None:
        argument_format = node.format
        match argument_format:
            case None:
                output.append(f"{{{node.id}}}")
            case SimpleFormat(type=argument_type, style=style):
                suffix = f", {_escape_chars(style)}" if style else ""
                output.append(f"{{{node.id}, {argument_type}{suffix}}}")
            case PluralFormat(offset=offset):
                output.append(f"{{{node.id}, {argument_format.type},")
                if offset:
                    output.append(f" offset:{offset}")
                self._serialize_options(argument_format.options, output, guard)
                output.append("}")
            case SelectFormat():
                output.append(f"{{{node.id}, {argument_format.type},")
                self._serialize_options(argument_format.options, output, guard)
                output.append("}")

    def _serialize_options(
        self,
        options: tuple[OptionalFormatPattern, ...],
        output: list[str],
        guard: DepthGuard,
    ) -> None:
        for option in options:
            output.append(f" {_escape_chars(option.selector)} {{")
            self._serialize_pattern(option.value, output, guard)
            output.append("}")


def serialize(pattern: MessagePattern) -> str:
    """Serialize a MessagePattern to canonical ICU message text."""
    return MessageSerializer().serialize(pattern)


def print_icu_message(message: str) -> str:
    """Validate message text and return its canonical form.

    Args:
        message: ICU message text

    Returns:
        Canonical message text

    Raises:
        MessageFormatError: If the text is not valid message syntax

    Example:
        >>> print_icu_message("You have {count,number} new  {count, plural, one{message} other{messages}}")
        'You have {count, number} new  {count, plural, one {message} other {messages}}'
    """
    return serialize(MessageFormatParser().parse(message))
