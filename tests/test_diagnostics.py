"""Tests for the diagnostics package: codes, templates, errors and formatting.

Python 3.13+.
"""

from __future__ import annotations

import json

import pytest

from intlextract.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    DuplicateIdConflictError,
    ErrorTemplate,
    ExtractionError,
    MessageSyntaxError,
    OutputFormat,
    SourceSpan,
    StaticEvaluationError,
    TreeLoadError,
)

# ============================================================================
# SourceSpan and Diagnostic
# ============================================================================


class TestSourceSpan:
    """SourceSpan validation."""

    def test_valid_span(self) -> None:
        """A span with 1-indexed line and column is accepted."""
        span = SourceSpan(start=0, end=5, line=1, column=1)
        assert (span.line, span.column) == (1, 1)

    @pytest.mark.parametrize(
        ("start", "end", "line", "column"),
        [(-1, 0, 1, 1), (5, 4, 1, 1), (0, 0, 0, 1), (0, 0, 1, 0)],
    )
    def test_invalid_span(self, start: int, end: int, line: int, column: int) -> None:
        """Negative offsets, inverted ranges and 0-indexed positions are rejected."""
        with pytest.raises(ValueError, match="SourceSpan"):
            SourceSpan(start=start, end=end, line=line, column=column)


class TestDiagnostic:
    """Diagnostic value object."""

    def test_str_is_message(self) -> None:
        """str() gives the bare message."""
        assert str(ErrorTemplate.description_missing()) == "Message must have a `description`."

    def test_located_sets_span_and_filename(self) -> None:
        """located() returns a positioned copy."""
        diagnostic = ErrorTemplate.descriptor_fields_missing()
        span = SourceSpan(start=10, end=20, line=3, column=5)
        located = diagnostic.located(span, "src/App.js")
        assert located.span == span
        assert located.filename == "src/App.js"
        assert diagnostic.span is None

    def test_located_keeps_filename_when_omitted(self) -> None:
        """A later located() without filename keeps the existing one."""
        diagnostic = ErrorTemplate.description_missing().located(None, "a.js")
        assert diagnostic.located(None).filename == "a.js"


# ============================================================================
# Templates
# ============================================================================


class TestErrorTemplates:
    """Message text and codes of the templates."""

    def test_static_evaluation(self) -> None:
        """Static evaluation failure text."""
        diagnostic = ErrorTemplate.not_statically_evaluable()
        assert diagnostic.code is DiagnosticCode.STATIC_EVALUATION_FAILED
        assert diagnostic.message == "Messages must be statically evaluate-able for extraction."

    def test_message_parse_failed_carries_detail(self) -> None:
        """The parser diagnostic is appended and kept as detail."""
        diagnostic = ErrorTemplate.message_parse_failed("1:6: Expected '}'")
        assert diagnostic.code is DiagnosticCode.MESSAGE_SYNTAX_INVALID
        assert diagnostic.message == "Message failed to parse.\n1:6: Expected '}'"
        assert diagnostic.detail == "1:6: Expected '}'"

    def test_escaping_variant_recommends_braces(self) -> None:
        """The escaping diagnostic suggests wrapping with {}."""
        diagnostic = ErrorTemplate.message_escaping_invalid("1:1: x")
        assert diagnostic.code is DiagnosticCode.MESSAGE_ESCAPING_INVALID
        assert "Wrap with `{}`." in diagnostic.message

    def test_duplicate_id(self) -> None:
        """Duplicate id text names the key."""
        diagnostic = ErrorTemplate.duplicate_message_id("greeting")
        assert diagnostic.message.startswith('Duplicate message id: "greeting"')

    def test_unsupported_component_is_warning(self) -> None:
        """FormattedPlural usage is a warning with the line number."""
        diagnostic = ErrorTemplate.unsupported_component("FormattedPlural", 7)
        assert diagnostic.severity == "warning"
        assert diagnostic.message == (
            "Line 7: Default messages are not extracted from "
            "<FormattedPlural>, use <FormattedMessage> instead."
        )

    def test_plural_category_hint_lists_categories(self) -> None:
        """The hint lists valid categories."""
        diagnostic = ErrorTemplate.plural_category_unknown("few", "en", ("one", "other"))
        assert diagnostic.hint is not None
        assert "one, other" in diagnostic.hint

    def test_codes_are_unique(self) -> None:
        """Every code has its own number."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))


# ============================================================================
# Errors
# ============================================================================


class TestErrors:
    """Exception hierarchy."""

    def test_error_from_diagnostic(self) -> None:
        """A Diagnostic argument is stored and formatted."""
        diagnostic = ErrorTemplate.not_statically_evaluable()
        error = StaticEvaluationError(diagnostic, node="node")
        assert error.diagnostic is diagnostic
        assert error.node == "node"
        assert str(error).startswith("error[STATIC_EVALUATION_FAILED]")

    def test_error_from_string(self) -> None:
        """A plain message has no diagnostic."""
        error = ExtractionError("plain")
        assert error.diagnostic is None
        assert str(error) == "plain"

    def test_message_syntax_error_attributes(self) -> None:
        """MessageSyntaxError keeps the parser output."""
        error = MessageSyntaxError("bad", parse_error="1:1: x", escaping_misuse=True)
        assert error.parse_error == "1:1: x"
        assert error.escaping_misuse is True

    def test_duplicate_error_message_id(self) -> None:
        """DuplicateIdConflictError records the storage key."""
        error = DuplicateIdConflictError("dup", message_id="x##c")
        assert error.message_id == "x##c"
        assert isinstance(error, ExtractionError)

    def test_tree_load_error_is_value_error(self) -> None:
        """Tree loading failures are ValueErrors, not extraction errors."""
        assert issubclass(TreeLoadError, ValueError)
        assert not issubclass(TreeLoadError, ExtractionError)


# ============================================================================
# Formatter
# ============================================================================


def _located() -> Diagnostic:
    return ErrorTemplate.description_missing().located(
        SourceSpan(start=30, end=40, line=2, column=5), "src/App.js"
    )


class TestDiagnosticFormatter:
    """RUST, SIMPLE and JSON output."""

    def test_rust_format(self) -> None:
        """Rust style has header, location and help lines."""
        assert DiagnosticFormatter().format(_located()) == (
            "error[DESCRIPTION_MISSING]: Message must have a `description`.\n"
            "  --> src/App.js:2:5\n"
            "  = help: Describe the context of the message for translators"
        )

    def test_rust_format_with_url(self) -> None:
        """help_url is rendered as a note."""
        output = DiagnosticFormatter().format(ErrorTemplate.message_parse_failed("1:1: x"))
        assert output.endswith("  = note: see https://formatjs.io/docs/core-concepts/icu-syntax/")

    def test_rust_format_warning_colour(self) -> None:
        """Warnings are coloured yellow."""
        diagnostic = ErrorTemplate.unsupported_component("FormattedPlural", 1)
        output = DiagnosticFormatter(color=True).format(diagnostic)
        assert output.startswith("\033[1;33mwarning\033[0m[UNSUPPORTED_COMPONENT]")

    def test_span_without_filename(self) -> None:
        """Without a filename the location names line and column."""
        diagnostic = ErrorTemplate.description_missing().located(
            SourceSpan(start=0, end=1, line=4, column=2)
        )
        assert "  --> line 4, column 2" in DiagnosticFormatter().format(diagnostic)

    def test_simple_format(self) -> None:
        """Simple format is one line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(_located()) == (
            "src/App.js:2:5: DESCRIPTION_MISSING: Message must have a `description`."
        )

    def test_simple_format_first_line_only(self) -> None:
        """Multi-line messages are cut to their first line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format(ErrorTemplate.message_parse_failed("1:1: x"))
        assert output == "MESSAGE_SYNTAX_INVALID: Message failed to parse."

    def test_json_format(self) -> None:
        """JSON carries code, position and hint."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(_located()))
        assert data["code"] == "DESCRIPTION_MISSING"
        assert data["code_value"] == 3002
        assert (data["line"], data["column"], data["start"], data["end"]) == (2, 5, 30, 40)
        assert data["filename"] == "src/App.js"
        assert data["severity"] == "error"

    def test_format_all(self) -> None:
        """format_all separates diagnostics with blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        output = formatter.format_all([_located(), _located()])
        assert output.count("\n\n") == 1

    def test_format_with_context(self) -> None:
        """A code frame points at the offending column."""
        source = 'import {t} from "i18n";\nconst a = <T s={x} />;\n'
        diagnostic = ErrorTemplate.not_statically_evaluable().located(
            SourceSpan(start=40, end=43, line=2, column=17), "App.js"
        )
        output = DiagnosticFormatter().format_with_context(diagnostic, source)
        lines = output.split("\n")
        assert "   2 | const a = <T s={x} />;" in lines
        caret = lines[lines.index("   2 | const a = <T s={x} />;") + 1]
        assert caret == " " * (len("   2 | ") + 16) + "^"

    def test_format_with_context_without_span(self) -> None:
        """Without a span no code frame is added."""
        diagnostic = ErrorTemplate.description_missing()
        formatter = DiagnosticFormatter()
        assert formatter.format_with_context(diagnostic, "x") == formatter.format(diagnostic)
