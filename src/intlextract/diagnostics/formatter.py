"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)
        context_lines: Source lines shown around the error in code frames

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.description_missing()
        >>> print(formatter.format(diagnostic))
        error[DESCRIPTION_MISSING]: Message must have a `description`.
          = help: Describe the context of the message for translators

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        DESCRIPTION_MISSING: Message must have a `description`.
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False
    context_lines: int = 2

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_with_context(self, diagnostic: Diagnostic, source: str) -> str:
        """Format diagnostic followed by a code frame of the offending line.

        Args:
            diagnostic: Located diagnostic to format
            source: Full source text of the compilation unit

        Returns:
            Formatted diagnostic; without a span the code frame is omitted

        Example:
            error[STATIC_EVALUATION_FAILED]: Messages must be statically ...
              --> App.js:2:21
            <BLANKLINE>
               1 | import {t} from "i18n";
               2 | const title = t(name);
                 |                 ^
        """
        header = self.format(diagnostic)
        if diagnostic.span is None:
            return header

        line = diagnostic.span.line
        col = diagnostic.span.column
        lines = source.split("\n")
        result_lines = [header, ""]

        start_line = max(1, line - self.context_lines)
        end_line = min(len(lines), line + self.context_lines)
        for i in range(start_line, end_line + 1):
            prefix = f"{i:4} | "
            result_lines.append(prefix + lines[i - 1])
            if i == line:
                result_lines.append(" " * (len(prefix) + col - 1) + "^")

        return "\n".join(result_lines)

    def _location(self, diagnostic: Diagnostic) -> str | None:
        span = diagnostic.span
        if span is not None and diagnostic.filename:
            return f"{diagnostic.filename}:{span.line}:{span.column}"
        if span is not None:
            return f"line {span.line}, column {span.column}"
        return diagnostic.filename

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[DUPLICATE_ID_CONFLICT]: Duplicate message id: "greeting", ...
              --> src/App.js:12:5
              = help: Give each distinct message its own id
        """
        severity = diagnostic.severity
        if self.color:
            colour = "1;31" if severity == "error" else "1;33"
            severity_str = f"\033[{colour}m{severity}\033[0m"
        else:
            severity_str = severity

        parts = [f"{severity_str}[{diagnostic.code.name}]: {diagnostic.message}"]

        location = self._location(diagnostic)
        if location:
            parts.append(f"  --> {location}")
        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")
        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format."""
        location = self._location(diagnostic)
        first_line = diagnostic.message.split("\n", 1)[0]
        if location:
            return f"{location}: {diagnostic.code.name}: {first_line}"
        return f"{diagnostic.code.name}: {first_line}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON."""
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["line"] = diagnostic.span.line
            data["column"] = diagnostic.span.column
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end
        if diagnostic.filename:
            data["filename"] = diagnostic.filename
        if diagnostic.detail:
            data["detail"] = diagnostic.detail
        if diagnostic.hint:
            data["hint"] = diagnostic.hint
        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=False)
