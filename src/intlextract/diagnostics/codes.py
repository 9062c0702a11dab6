"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Static evaluation errors
        2000-2999: Message syntax errors (ICU message format)
        3000-3999: Descriptor and store errors
        4000-4999: Warnings (extraction skipped or suspicious content)
        5000-5999: Host tree errors (loading, traversal limits)
    """

    # Static evaluation errors (1000-1999)
    STATIC_EVALUATION_FAILED = 1001

    # Message syntax errors (2000-2999)
    MESSAGE_SYNTAX_INVALID = 2001
    MESSAGE_ESCAPING_INVALID = 2002
    MESSAGE_TOO_LARGE = 2003
    MESSAGE_NESTING_DEPTH_EXCEEDED = 2004

    # Descriptor and store errors (3000-3999)
    DESCRIPTOR_FIELDS_MISSING = 3001
    DESCRIPTION_MISSING = 3002
    DUPLICATE_ID_CONFLICT = 3003
    DESCRIPTOR_SHAPE_INVALID = 3004

    # Warnings (4000-4999)
    UNSUPPORTED_COMPONENT = 4001
    PLURAL_CATEGORY_UNKNOWN = 4002

    # Host tree errors (5000-5999)
    TREE_NODE_INVALID = 5001
    MAX_DEPTH_EXCEEDED = 5002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1, or column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (build orchestrators, editors).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location of the offending node (None until located)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        filename: Compilation unit the node belongs to
        detail: Underlying sub-parser diagnostic (message syntax errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    filename: str | None = None
    detail: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def located(self, span: SourceSpan | None, filename: str | None = None) -> "Diagnostic":
        """Return a copy of this diagnostic pointing at a source location."""
        return replace(self, span=span, filename=filename if filename is not None else self.filename)

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[DUPLICATE_ID_CONFLICT]: Duplicate message id: "greeting", ...
              --> src/App.js:12:4
              = help: Give each distinct message its own id

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
