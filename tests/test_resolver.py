"""Tests for extraction/resolver.py: static evaluation and message validation.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from intlextract.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    MessageSyntaxError,
    StaticEvaluationError,
)
from intlextract.extraction import DescriptorResolver, UnitFile
from intlextract.syntax import MessageFormatParser
from intlextract.tree import (
    BinaryExpression,
    BooleanLiteral,
    Identifier,
    JSXIdentifier,
    LiteralEvaluator,
    NullLiteral,
    NumericLiteral,
    StringLiteral,
)
from tests.helpers.tree import container, ident, lit, loc


def _resolver(**kwargs: object) -> DescriptorResolver:
    return DescriptorResolver(LiteralEvaluator(), unit=UnitFile("src/App.js"), **kwargs)  # type: ignore[arg-type]


class TestResolveValue:
    """Plain descriptor values."""

    def test_string_is_trimmed(self) -> None:
        """Values are stripped."""
        assert _resolver().resolve_value(lit("  greets user \n")) == "greets user"

    def test_expression_container_unwrapped(self) -> None:
        """attr={"..."} is evaluated like attr="..."."""
        assert _resolver().resolve_value(container(lit(" x "))) == "x"

    def test_non_string_constant(self) -> None:
        """Numbers and booleans are converted like JavaScript strings."""
        assert _resolver().resolve_value(NumericLiteral(5)) == "5"
        assert _resolver().resolve_value(NumericLiteral(2.0)) == "2"
        assert _resolver().resolve_value(BooleanLiteral(True)) == "true"
        assert _resolver().resolve_value(container(BooleanLiteral(False))) == "false"

    def test_null_is_not_a_value(self) -> None:
        """null raises StaticEvaluationError instead of becoming text."""
        with pytest.raises(StaticEvaluationError) as exc_info:
            _resolver().resolve_value(container(NullLiteral(loc=loc(6))))
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.span is not None
        assert exc_info.value.diagnostic.span.line == 6

    def test_null_message_rejected(self) -> None:
        """defaultMessage={null} is not extracted as "null"."""
        with pytest.raises(StaticEvaluationError):
            _resolver().resolve_message(container(NullLiteral()))

    def test_not_constant(self) -> None:
        """Identifiers raise StaticEvaluationError located at the node."""
        with pytest.raises(StaticEvaluationError) as exc_info:
            _resolver().resolve_value(ident("message", line=4))
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.STATIC_EVALUATION_FAILED
        assert diagnostic.filename == "src/App.js"
        assert diagnostic.span is not None
        assert diagnostic.span.line == 4
        assert diagnostic.span.column == 1


class TestResolveKey:
    """Property and attribute keys."""

    def test_identifier_keys(self) -> None:
        """Identifier and JSX identifier keys give their name."""
        resolver = _resolver()
        assert resolver.resolve_key(Identifier("id")) == "id"
        assert resolver.resolve_key(JSXIdentifier("defaultMessage")) == "defaultMessage"

    def test_string_key_evaluated(self) -> None:
        """Quoted keys are evaluated."""
        assert _resolver().resolve_key(StringLiteral("description")) == "description"


class TestResolveMessage:
    """defaultMessage validation and canonicalization."""

    def test_canonicalized(self) -> None:
        """Messages are trimmed and re-serialized canonically."""
        message = lit("  {count,plural,one{# item}other{# items}} ")
        assert _resolver().resolve_message(message) == "{count, plural, one {# item} other {# items}}"

    def test_concatenation(self) -> None:
        """Constant concatenations are messages too."""
        node = BinaryExpression(operator="+", left=lit("Hello, "), right=lit("{name}!"))
        assert _resolver().resolve_message(node) == "Hello, {name}!"

    def test_unbalanced_braces(self) -> None:
        """Invalid syntax raises MessageSyntaxError with the parser diagnostic."""
        with pytest.raises(MessageSyntaxError) as exc_info:
            _resolver().resolve_message(lit("Hello {name"))
        error = exc_info.value
        assert error.escaping_misuse is False
        assert error.parse_error == "1:12: Expected '}' to close argument (expected: ',', '}')"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.MESSAGE_SYNTAX_INVALID

    def test_escaping_in_jsx_attribute(self) -> None:
        """Backslash escapes in raw JSX strings get the escaping diagnostic."""
        with pytest.raises(MessageSyntaxError) as exc_info:
            _resolver().resolve_message(lit("a \\\\{ b"), jsx_source=True)
        assert exc_info.value.escaping_misuse is True
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.MESSAGE_ESCAPING_INVALID

    def test_escaping_variant_only_for_jsx(self) -> None:
        """Outside JSX the generic diagnostic is used."""
        with pytest.raises(MessageSyntaxError) as exc_info:
            _resolver().resolve_message(lit("a \\\\{ b"))
        assert exc_info.value.escaping_misuse is False

    def test_escaping_variant_not_for_containers(self) -> None:
        """attr={"..."} strings are JavaScript strings, so no escaping hint."""
        with pytest.raises(MessageSyntaxError) as exc_info:
            _resolver().resolve_message(container(lit("a \\\\{ b")), jsx_source=True)
        assert exc_info.value.escaping_misuse is False

    def test_message_too_large(self) -> None:
        """Messages beyond the parser limit are rejected before parsing."""
        resolver = _resolver(parser=MessageFormatParser(max_source_size=4))
        with pytest.raises(MessageSyntaxError) as exc_info:
            resolver.resolve_message(lit("12345"))
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.MESSAGE_TOO_LARGE


class TestPluralLocale:
    """Optional CLDR category check."""

    def test_unknown_category_warns(self) -> None:
        """Unknown categories produce a warning, not an error."""
        pytest.importorskip("babel")
        warnings: list[Diagnostic] = []
        resolver = _resolver(plural_locale="en", warn=warnings.append)
        result = resolver.resolve_message(lit("{n, plural, few {a} other {b}}"))
        assert result == "{n, plural, few {a} other {b}}"
        assert [w.code for w in warnings] == [DiagnosticCode.PLURAL_CATEGORY_UNKNOWN]
        assert warnings[0].severity == "warning"


class TestResolve:
    """Whole raw descriptors."""

    def test_resolve_descriptor(self) -> None:
        """Only defaultMessage goes through the message pipeline."""
        resolved = _resolver().resolve(
            {"id": lit(" a.b "), "description": lit("{not a message"), "defaultMessage": lit("Hi {x}")}
        )
        assert resolved == {"id": "a.b", "description": "{not a message", "defaultMessage": "Hi {x}"}
