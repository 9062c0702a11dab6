"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern for zero-`None` parsing of ICU
message text.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (O(n) only for errors)

Line Ending Support:
    \\n is the line delimiter; CRLF text works because the \\n is present.
"""

from dataclasses import dataclass, field

from intlextract.diagnostics import ErrorTemplate

__all__ = ["WHITESPACE", "Cursor", "ParseError", "ParseResult"]

# Whitespace recognized between ICU tokens.
WHITESPACE: frozenset[str] = frozenset({" ", "\t", "\n", "\r"})


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance().current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).current
        Traceback (most recent call last):
        ...
        EOFError: Unexpected EOF at position 2
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor."""
        return self.source[self.pos : self.pos + n]

    def skip_whitespace(self) -> "Cursor":
        """Skip whitespace characters (space, tab, newline, carriage return).

        Example:
            >>> Cursor("  \\t\\n hello", 0).skip_whitespace().current
            'h'
        """
        c = self
        while not c.is_eof and c.current in WHITESPACE:
            c = c.advance()
        return c

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor("{a}", 0).expect("{").pos
            1
            >>> Cursor("{a}", 0).expect("}") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Example:
            >>> Cursor("line1\\nline2", 8).compute_line_col()
            (2, 3)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Every sub-parser has the signature:
        def parse_foo(cursor: Cursor) -> ParseResult[Foo] | ParseError

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Parse error with location and context.

    Example:
        >>> error = ParseError("Expected '}'", Cursor("{name", 5), expected=("}",))
        >>> error.format_error()
        "1:6: Expected '}' (expected: '}')"
    """

    message: str
    cursor: Cursor
    expected: tuple[str, ...] = field(default_factory=tuple)

    @property
    def position(self) -> int:
        """Character offset of the error in the message text."""
        return self.cursor.pos

    def format_error(self) -> str:
        """Format error with line:column."""
        line, col = self.cursor.compute_line_col()
        error_msg = f"{line}:{col}: {self.message}"

        if self.expected:
            expected_str = ", ".join(f"'{e}'" for e in self.expected)
            error_msg += f" (expected: {expected_str})"

        return error_msg

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format error with message context and a caret pointer.

        Example:
            >>> print(ParseError("Expected '}'", Cursor("Hi {name", 8)).format_with_context())
            1:9: Expected '}'
            <BLANKLINE>
               1 | Hi {name
                           ^
        """
        line, col = self.cursor.compute_line_col()
        lines = self.cursor.source.split("\n")

        result_lines = [self.format_error(), ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1])
            if i == line:
                pointer = " " * (len(line_num_str) + col - 1) + "^"
                result_lines.append(pointer)

        return "\n".join(result_lines)
