"""Descriptor resolution: static evaluation and message validation.

Turns a RawDescriptor of value nodes into plain strings:

- ``defaultMessage`` is evaluated, trimmed, parsed as ICU message syntax and
  re-serialized canonically
- every other value is evaluated and trimmed

Values wrapped in a JSX expression container (``attr={...}``) are unwrapped
one level first.

Python 3.13+.
"""

import logging
from collections.abc import Callable

from intlextract.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    MessageSyntaxError,
    StaticEvaluationError,
)
from intlextract.syntax.parser import MessageFormatError, MessageFormatParser
from intlextract.syntax.plural_rules import find_unknown_plural_categories
from intlextract.syntax.serializer import serialize
from intlextract.tree.evaluator import to_js_string
from intlextract.tree.nodes import (
    BooleanLiteral,
    Identifier,
    JSXExpressionContainer,
    JSXIdentifier,
    Node,
    NullLiteral,
    NumericLiteral,
    StringLiteral,
    TemplateLiteral,
)

from .descriptor import DEFAULT_MESSAGE_KEY, RawDescriptor
from .host import StaticEvaluator, UnitFile, locate

__all__ = ["DescriptorResolver", "ResolvedDescriptor"]

logger = logging.getLogger(__name__)

type ResolvedDescriptor = dict[str, str]
"""Recognized property name -> resolved string value."""

_LITERAL_TYPES = (StringLiteral, NumericLiteral, BooleanLiteral, NullLiteral, TemplateLiteral)


class DescriptorResolver:
    """Resolves descriptor values of one compilation unit.

    Args:
        evaluator: Host static evaluator
        unit: Unit being processed (locates diagnostics)
        parser: ICU parser (default limits when omitted)
        plural_locale: Check plural selectors against this locale's CLDR
            categories (requires Babel)
        warn: Receives non-fatal diagnostics
    """

    __slots__ = ("_evaluator", "_parser", "_plural_locale", "_unit", "_warn")

    def __init__(
        self,
        evaluator: StaticEvaluator,
        *,
        unit: UnitFile | None = None,
        parser: MessageFormatParser | None = None,
        plural_locale: str | None = None,
        warn: Callable[[Diagnostic], None] | None = None,
    ) -> None:
        self._evaluator = evaluator
        self._unit = unit
        self._parser = parser if parser is not None else MessageFormatParser()
        self._plural_locale = plural_locale
        self._warn = warn

    def evaluate(self, node: Node) -> object:
        """Statically evaluate a node.

        Raises:
            StaticEvaluationError: If the node is not a constant
        """
        result = self._evaluator.evaluate(node)
        if not result.confident:
            diagnostic = locate(ErrorTemplate.not_statically_evaluable(), node, self._unit)
            raise StaticEvaluationError(diagnostic, node=node)
        return result.value

    def resolve_key(self, node: Node) -> object:
        """Name of a property key: identifiers give their name, others are evaluated."""
        if isinstance(node, Identifier | JSXIdentifier):
            return node.name
        return self.evaluate(node)

    def resolve_value(self, node: Node) -> str:
        """Evaluate a descriptor value to trimmed text.

        Numbers and booleans are converted the way JavaScript converts them
        to strings. ``null`` is not a value.

        Raises:
            StaticEvaluationError: If the node is not a constant or is null
        """
        if JSXExpressionContainer.guard(node):
            node = node.expression
        value = self.evaluate(node)
        if value is None:
            diagnostic = locate(ErrorTemplate.not_statically_evaluable(), node, self._unit)
            raise StaticEvaluationError(diagnostic, node=node)
        return to_js_string(value).strip()

    def resolve_message(self, node: Node, *, jsx_source: bool = False) -> str:
        """Evaluate, validate and canonicalize a message.

        Args:
            node: Value node of the message
            jsx_source: True for raw JSX attribute values, where backslash
                escapes are not processed by the JavaScript parser

        Returns:
            Canonical ICU message text

        Raises:
            StaticEvaluationError: If the message is not a constant
            MessageSyntaxError: If the message is not valid ICU syntax
        """
        message = self.resolve_value(node)

        if len(message) > self._parser.max_source_size:
            diagnostic = locate(
                ErrorTemplate.message_too_large(len(message), self._parser.max_source_size),
                node,
                self._unit,
            )
            raise MessageSyntaxError(diagnostic, node=node)

        try:
            pattern = self._parser.parse(message)
        except MessageFormatError as e:
            parse_error = e.parse_error.format_error()
            if jsx_source and isinstance(node, _LITERAL_TYPES) and "\\\\" in message:
                diagnostic = locate(
                    ErrorTemplate.message_escaping_invalid(parse_error), node, self._unit
                )
                raise MessageSyntaxError(
                    diagnostic, node=node, parse_error=parse_error, escaping_misuse=True
                ) from e
            diagnostic = locate(ErrorTemplate.message_parse_failed(parse_error), node, self._unit)
            raise MessageSyntaxError(diagnostic, node=node, parse_error=parse_error) from e

        if self._plural_locale is not None:
            for argument, selector, categories in find_unknown_plural_categories(
                pattern, self._plural_locale
            ):
                warning = locate(
                    ErrorTemplate.plural_category_unknown(selector, self._plural_locale, categories),
                    node,
                    self._unit,
                )
                logger.warning(
                    "Plural option '%s' of argument '%s' is not a %s category",
                    selector,
                    argument,
                    self._plural_locale,
                )
                if self._warn is not None:
                    self._warn(warning)

        return serialize(pattern)

    def resolve(self, raw: RawDescriptor, *, jsx_source: bool = False) -> ResolvedDescriptor:
        """Resolve every value of a RawDescriptor, in property order.

        Args:
            raw: Unresolved descriptor
            jsx_source: Whether values come from JSX attributes

        Returns:
            Property name -> resolved string
        """
        resolved: ResolvedDescriptor = {}
        for key, value_node in raw.items():
            if key == DEFAULT_MESSAGE_KEY:
                resolved[key] = self.resolve_message(value_node, jsx_source=jsx_source)
            else:
                resolved[key] = self.resolve_value(value_node)
        return resolved
