"""ICU message-format parser.

Recursive-descent parser for the ICU MessageFormat dialect accepted by
``intl-messageformat-parser``:

    pattern        = element*
    element        = text | argument
    argument       = "{" _ id _ ("," _ format)? _ "}"
    format         = simple | plural | selectordinal | select
    simple         = ("number" | "date" | "time") _ ("," _ chars)?
    plural         = ("plural" | "selectordinal") _ "," _ ("offset:" _ number)? option+
    select         = "select" _ "," _ option+
    option         = _ chars _ "{" _ pattern "}"

Architecture:
    Uses the immutable :class:`~intlextract.syntax.cursor.Cursor`. Each
    sub-parser returns either a :class:`~intlextract.syntax.cursor.ParseResult`
    with the parsed node and updated cursor, or a
    :class:`~intlextract.syntax.cursor.ParseError` describing the first
    failure. Only :meth:`MessageFormatParser.parse` raises.

Security:
    Input size and argument nesting depth are bounded.
"""

from dataclasses import dataclass

from intlextract.constants import MAX_DEPTH, MAX_MESSAGE_SIZE
from intlextract.enums import ArgumentType
from intlextract.syntax.ast import (
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
from intlextract.syntax.cursor import WHITESPACE, Cursor, ParseError, ParseResult

__all__ = ["MessageFormatError", "MessageFormatParser", "ParseContext", "parse_message"]

# Characters that end an argument name.
_ARGUMENT_TERMINATORS: frozenset[str] = frozenset(" \t\n\r,.+={}#")

_ASCII_DIGITS: str = "0123456789"
_HEX_DIGITS: str = "0123456789abcdefABCDEF"

# \uXXXX = 4 hex digits
_UNICODE_ESCAPE_LEN: int = 4

_OFFSET_PREFIX: str = "offset:"

_KEYWORDS: frozenset[str] = frozenset(t.value for t in ArgumentType)

_SIMPLE_TYPES: frozenset[ArgumentType] = frozenset(
    {ArgumentType.NUMBER, ArgumentType.DATE, ArgumentType.TIME}
)

# Escapes decoded inside text. "\#" stays escaped so the serializer keeps it.
_ESCAPES: dict[str, str] = {"\\": "\\", "#": "\\#", "{": "{", "}": "}"}

_EXPECTED_ESCAPES: tuple[str, ...] = ("\\\\", "\\#", "\\{", "\\}", "\\uXXXX")


class MessageFormatError(ValueError):
    """Raised when message text is not valid ICU message syntax.

    Attributes:
        parse_error: Structured parse error with position information
    """

    def __init__(self, parse_error: ParseError) -> None:
        """Initialize MessageFormatError.

        Args:
            parse_error: Structured parse error with position information
        """
        super().__init__(parse_error.format_error())
        self.parse_error = parse_error


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Explicit context for parsing operations.

    Attributes:
        max_nesting_depth: Maximum allowed nesting depth for arguments
        current_depth: Current nesting depth (0 = top level)
    """

    max_nesting_depth: int = MAX_DEPTH
    current_depth: int = 0

    def is_depth_exceeded(self) -> bool:
        """Check if maximum nesting depth has been exceeded."""
        return self.current_depth >= self.max_nesting_depth

    def enter_argument(self) -> "ParseContext":
        """Create new context with incremented depth for entering an argument."""
        return ParseContext(
            max_nesting_depth=self.max_nesting_depth,
            current_depth=self.current_depth + 1,
        )


def _is_control(ch: str) -> bool:
    code = ord(ch)
    return (code <= 0x1F or code == 0x7F) and ch not in WHITESPACE


def parse_escape(cursor: Cursor) -> ParseResult[str] | ParseError:
    """Parse an escape sequence starting at a backslash.

    Args:
        cursor: Position of the backslash

    Returns:
        ParseResult with the decoded text ("\\#" is kept escaped)
    """
    after = cursor.advance()
    nxt = after.peek()
    if nxt is not None and nxt in _ESCAPES:
        return ParseResult(_ESCAPES[nxt], after.advance())

    if nxt == "u":
        digits = after.advance().slice_ahead(_UNICODE_ESCAPE_LEN)
        if len(digits) == _UNICODE_ESCAPE_LEN and all(d in _HEX_DIGITS for d in digits):
            return ParseResult(chr(int(digits, 16)), after.advance(1 + _UNICODE_ESCAPE_LEN))

    return ParseError("Invalid escape sequence", cursor, expected=_EXPECTED_ESCAPES)


def parse_chars(cursor: Cursor) -> ParseResult[str] | ParseError:
    """Parse a run of non-whitespace text characters (styles and selectors).

    Stops at whitespace, braces, or EOF. May return an empty string; callers
    decide whether that is an error.
    """
    parts: list[str] = []
    while not cursor.is_eof:
        ch = cursor.current
        if ch in WHITESPACE or ch in "{}":
            break
        if ch == "\\":
            escape = parse_escape(cursor)
            if isinstance(escape, ParseError):
                return escape
            parts.append(escape.value)
            cursor = escape.cursor
            continue
        if _is_control(ch):
            break
        parts.append(ch)
        cursor = cursor.advance()
    return ParseResult("".join(parts), cursor)


def parse_text(cursor: Cursor) -> ParseResult[TextElement] | ParseError:
    """Parse literal text up to the next brace or EOF.

    Returns:
        ParseResult with the decoded TextElement, or ParseError on an invalid
        escape sequence or control character
    """
    parts: list[str] = []
    while not cursor.is_eof:
        ch = cursor.current
        if ch in "{}":
            break
        if ch == "\\":
            escape = parse_escape(cursor)
            if isinstance(escape, ParseError):
                return escape
            parts.append(escape.value)
            cursor = escape.cursor
            continue
        if _is_control(ch):
            msg = f"Unexpected control character U+{ord(ch):04X}"
            return ParseError(msg, cursor)
        parts.append(ch)
        cursor = cursor.advance()
    return ParseResult(TextElement("".join(parts)), cursor)


def parse_argument_name(cursor: Cursor) -> ParseResult[str] | ParseError:
    """Parse argument name: a number, or a run of non-terminator characters.

    Numeric names must be canonical (``0`` or no leading zero) and may not be
    followed by further name characters.
    """
    start = cursor
    while not cursor.is_eof and cursor.current not in _ARGUMENT_TERMINATORS:
        cursor = cursor.advance()
    name = start.slice_to(cursor.pos)
    if not name:
        return ParseError("Expected argument name", cursor, expected=("argument name",))

    if name[0] in _ASCII_DIGITS:
        number_len = 1
        if name[0] != "0":
            while number_len < len(name) and name[number_len] in _ASCII_DIGITS:
                number_len += 1
        if number_len < len(name):
            return ParseError(
                "Expected ',' or '}' after numeric argument name",
                start.advance(number_len),
                expected=(",", "}"),
            )
    return ParseResult(name, cursor)


def parse_number(cursor: Cursor) -> ParseResult[int] | ParseError:
    """Parse a non-negative integer: 0 | [1-9][0-9]*"""
    start = cursor
    if cursor.is_eof or cursor.current not in _ASCII_DIGITS:
        return ParseError("Expected number", cursor, expected=("0-9",))
    if cursor.current == "0":
        cursor = cursor.advance()
    else:
        while not cursor.is_eof and cursor.current in _ASCII_DIGITS:
            cursor = cursor.advance()
    return ParseResult(int(start.slice_to(cursor.pos)), cursor)


def _parse_keyword(cursor: Cursor) -> ParseResult[str]:
    start = cursor
    while not cursor.is_eof and cursor.current.isascii() and cursor.current.isalpha():
        cursor = cursor.advance()
    return ParseResult(start.slice_to(cursor.pos), cursor)


def parse_options(
    cursor: Cursor, context: ParseContext
) -> ParseResult[tuple[OptionalFormatPattern, ...]] | ParseError:
    """Parse one or more ``selector {pattern}`` options.

    Args:
        cursor: Position after the format keyword's comma (and offset)
        context: Parse context of the enclosing argument

    Returns:
        ParseResult with the options; cursor stops before the closing '}'
    """
    options: list[OptionalFormatPattern] = []
    while True:
        cursor = cursor.skip_whitespace()
        if cursor.is_eof or cursor.current == "}":
            break

        selector_result = parse_chars(cursor)
        if isinstance(selector_result, ParseError):
            return selector_result
        if not selector_result.value:
            return ParseError("Expected option selector", cursor, expected=("selector",))

        cursor = selector_result.cursor.skip_whitespace()
        opened = cursor.expect("{")
        if opened is None:
            return ParseError("Expected '{' after option selector", cursor, expected=("{",))

        value_result = parse_pattern(opened.skip_whitespace(), context)
        if isinstance(value_result, ParseError):
            return value_result

        closed = value_result.cursor.expect("}")
        if closed is None:
            return ParseError(
                "Expected '}' to close option", value_result.cursor, expected=("}",)
            )

        options.append(OptionalFormatPattern(selector_result.value, value_result.value))
        cursor = closed

    if not options:
        return ParseError("Expected at least one option", cursor, expected=("selector",))
    return ParseResult(tuple(options), cursor)


def parse_format(cursor: Cursor, context: ParseContext) -> ParseResult[ArgumentFormat] | ParseError:
    """Parse the format part of an argument (after ``{name,``).

    Returns:
        ParseResult with SimpleFormat, PluralFormat or SelectFormat
    """
    keyword_result = _parse_keyword(cursor)
    keyword = keyword_result.value
    if keyword not in _KEYWORDS:
        return ParseError(
            "Expected argument type",
            cursor,
            expected=tuple(str(t) for t in ArgumentType),
        )
    argument_type = ArgumentType(keyword)
    cursor = keyword_result.cursor.skip_whitespace()

    if argument_type in _SIMPLE_TYPES:
        style: str | None = None
        comma = cursor.expect(",")
        if comma is not None:
            style_cursor = comma.skip_whitespace()
            style_result = parse_chars(style_cursor)
            if isinstance(style_result, ParseError):
                return style_result
            if not style_result.value:
                return ParseError("Expected argument style", style_cursor, expected=("style",))
            style = style_result.value
            cursor = style_result.cursor
        return ParseResult(SimpleFormat(argument_type, style), cursor)

    comma = cursor.expect(",")
    if comma is None:
        msg = f"Expected ',' after '{argument_type}'"
        return ParseError(msg, cursor, expected=(",",))
    cursor = comma.skip_whitespace()

    if argument_type == ArgumentType.SELECT:
        options_result = parse_options(cursor, context)
        if isinstance(options_result, ParseError):
            return options_result
        return ParseResult(SelectFormat(options_result.value), options_result.cursor)

    offset = 0
    if cursor.slice_ahead(len(_OFFSET_PREFIX)) == _OFFSET_PREFIX:
        number_result = parse_number(cursor.advance(len(_OFFSET_PREFIX)).skip_whitespace())
        if isinstance(number_result, ParseError):
            return number_result
        offset = number_result.value
        cursor = number_result.cursor

    options_result = parse_options(cursor, context)
    if isinstance(options_result, ParseError):
        return options_result
    plural = PluralFormat(
        options_result.value,
        ordinal=argument_type == ArgumentType.SELECTORDINAL,
        offset=offset,
    )
    return ParseResult(plural, options_result.cursor)


def parse_argument(cursor: Cursor, context: ParseContext) -> ParseResult[ArgumentElement] | ParseError:
    """Parse an argument element.

    Args:
        cursor: Position of the opening '{'
        context: Parse context for depth tracking

    Returns:
        ParseResult with the ArgumentElement and cursor after the closing '}'
    """
    if context.is_depth_exceeded():
        msg = f"Maximum nesting depth ({context.max_nesting_depth}) exceeded"
        return ParseError(msg, cursor)
    nested_context = context.enter_argument()

    cursor = cursor.advance().skip_whitespace()
    name_result = parse_argument_name(cursor)
    if isinstance(name_result, ParseError):
        return name_result
    cursor = name_result.cursor.skip_whitespace()

    argument_format: ArgumentFormat | None = None
    comma = cursor.expect(",")
    if comma is not None:
        format_result = parse_format(comma.skip_whitespace(), nested_context)
        if isinstance(format_result, ParseError):
            return format_result
        argument_format = format_result.value
        cursor = format_result.cursor.skip_whitespace()

    closed = cursor.expect("}")
    if closed is None:
        expected = ("}",) if argument_format is not None else (",", "}")
        return ParseError("Expected '}' to close argument", cursor, expected=expected)
    return ParseResult(ArgumentElement(name_result.value, argument_format), closed)


def parse_pattern(cursor: Cursor, context: ParseContext) -> ParseResult[MessagePattern] | ParseError:
    """Parse elements until EOF or an unmatched '}' (left for the caller)."""
    elements: list[PatternElement] = []
    while not cursor.is_eof:
        ch = cursor.current
        if ch == "}":
            break
        if ch == "{":
            argument_result = parse_argument(cursor, context)
            if isinstance(argument_result, ParseError):
                return argument_result
            elements.append(argument_result.value)
            cursor = argument_result.cursor
            continue

        text_result = parse_text(cursor)
        if isinstance(text_result, ParseError):
            return text_result
        elements.append(text_result.value)
        cursor = text_result.cursor
    return ParseResult(MessagePattern(tuple(elements)), cursor)


class MessageFormatParser:
    """ICU message-format parser.

    Security:
    - max_source_size bounds the accepted message length
    - max_nesting_depth bounds nested plural/select arguments

    Example:
        >>> parser = MessageFormatParser()
        >>> parser.parse("Hello, {name}!").elements[1]
        ArgumentElement(id='name', format=None)
    """

    __slots__ = ("_max_nesting_depth", "_max_source_size")

    def __init__(
        self,
        *,
        max_source_size: int = MAX_MESSAGE_SIZE,
        max_nesting_depth: int = MAX_DEPTH,
    ) -> None:
        """Initialize parser with input limits.

        Args:
            max_source_size: Maximum message length in characters
            max_nesting_depth: Maximum argument nesting depth
        """
        self._max_source_size = max_source_size
        self._max_nesting_depth = max_nesting_depth

    @property
    def max_source_size(self) -> int:
        """Maximum accepted message length in characters."""
        return self._max_source_size

    def parse(self, source: str) -> MessagePattern:
        """Parse message text to an AST.

        Args:
            source: ICU message text

        Returns:
            Parsed MessagePattern

        Raises:
            MessageFormatError: If the text is not valid message syntax
            ValueError: If the text exceeds max_source_size
        """
        if len(source) > self._max_source_size:
            msg = (
                f"Message text exceeds maximum size ({len(source)} > "
                f"{self._max_source_size} characters)"
            )
            raise ValueError(msg)

        context = ParseContext(max_nesting_depth=self._max_nesting_depth)
        result = parse_pattern(Cursor(source, 0), context)
        if isinstance(result, ParseError):
            raise MessageFormatError(result)
        if not result.cursor.is_eof:
            raise MessageFormatError(
                ParseError("Unexpected '}' without matching '{'", result.cursor)
            )
        return result.value


def parse_message(source: str) -> MessagePattern:
    """Parse ICU message text with default limits.

    Raises:
        MessageFormatError: If the text is not valid message syntax
    """
    return MessageFormatParser().parse(source)
