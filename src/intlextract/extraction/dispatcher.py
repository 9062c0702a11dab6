"""Traversal dispatcher: recognizes message declarations while the host walks.

Recognized shapes:

- ``<FormattedMessage .../>`` (any of ``component_names`` imported from the
  module source), and the shorthand ``<T s="..." c="..."/>``
- ``t(text, values, comment)``
- ``defineMessages({key: {id, description, defaultMessage}, ...})`` (any of
  ``function_names`` imported from the module source)

Each declaration is extracted at most once: extracted nodes are recorded in
the unit's processed set, so repeated or nested traversal passes skip them.
``description`` attributes and properties are removed from the tree after
extraction since they are not used at runtime.

Python 3.13+.
"""

import logging

from intlextract.constants import (
    PLURAL_COMPONENT_NAME,
    SHORTHAND_COMPONENT_NAME,
    TRANSLATE_FUNCTION_NAME,
)
from intlextract.diagnostics import DescriptorShapeError, ErrorTemplate
from intlextract.enums import MessageShape
from intlextract.tree.nodes import (
    CallExpression,
    Identifier,
    JSXAttribute,
    JSXIdentifier,
    JSXOpeningElement,
    Node,
    ObjectExpression,
    ObjectProperty,
)
from intlextract.tree.visitor import NodeVisitor

from .descriptor import (
    COMMENT_KEY,
    DEFAULT_MESSAGE_KEY,
    DESCRIPTION_KEY,
    ID_KEY,
    build_raw_descriptor,
)
from .host import ReferenceResolver, StaticEvaluator, locate
from .resolver import DescriptorResolver, ResolvedDescriptor
from .state import ExtractionState

__all__ = ["ExtractionDispatcher"]

logger = logging.getLogger(__name__)


class ExtractionDispatcher(NodeVisitor):
    """Extracts messages from JSX opening elements and call expressions.

    Every visit method extracts first, then descends into the node's
    children, so nested declarations are found in document order.

    Args:
        state: State of the unit being walked
        evaluator: Host static evaluator
        references: Host import resolver
        max_depth: Maximum traversal depth
    """

    __slots__ = ("_references", "_resolver", "state")

    def __init__(
        self,
        state: ExtractionState,
        *,
        evaluator: StaticEvaluator,
        references: ReferenceResolver,
        max_depth: int | None = None,
    ) -> None:
        super().__init__(max_depth=max_depth)
        self.state = state
        self._references = references
        self._resolver = DescriptorResolver(
            evaluator,
            unit=state.unit,
            plural_locale=state.options.plural_locale,
            warn=state.warn,
        )

    # ------------------------------------------------------------------
    # Visitor callbacks
    # ------------------------------------------------------------------

    def visit_JSXOpeningElement(self, node: JSXOpeningElement) -> None:
        self.extract_element(node)
        self.generic_visit(node)

    def visit_CallExpression(self, node: CallExpression) -> None:
        self.extract_call(node)
        self.generic_visit(node)

    # ------------------------------------------------------------------
    # Elements
    # ------------------------------------------------------------------

    def _references_any(self, node: Node, names: tuple[str, ...]) -> bool:
        module = self.state.options.module_source_name
        return any(self._references.references_import(node, module, name) for name in names)

    def extract_element(self, node: JSXOpeningElement) -> None:
        """Extract the message declared by a JSX opening element, if any."""
        state = self.state
        if state.is_processed(node):
            logger.debug("Skipping already extracted element")
            return

        name = node.name
        if self._references.references_import(
            name, state.options.module_source_name, PLURAL_COMPONENT_NAME
        ):
            line = node.loc.start.line if node.loc is not None else 0
            warning = locate(
                ErrorTemplate.unsupported_component(PLURAL_COMPONENT_NAME, line),
                node,
                state.unit,
            )
            logger.warning("%s: %s", state.unit.filename, warning.message)
            state.warn(warning)
            return

        shorthand = isinstance(name, JSXIdentifier) and name.name == SHORTHAND_COMPONENT_NAME
        if not shorthand and not self._references_any(name, state.options.component_names):
            return

        # Spread attributes ({...descriptor}) are extracted where the
        # descriptor is declared, not here.
        attributes = [attr for attr in node.attributes if isinstance(attr, JSXAttribute)]
        raw = build_raw_descriptor(
            ((attr.name, attr.value if attr.value is not None else attr) for attr in attributes),
            self._resolver.resolve_key,
            shape=MessageShape.SHORTHAND_ELEMENT if shorthand else MessageShape.ELEMENT,
        )

        # <FormattedMessage id={dynamicId} /> declares nothing to extract.
        if DEFAULT_MESSAGE_KEY not in raw:
            return

        descriptor = self._resolver.resolve(raw, jsx_source=True)
        state.store.store(descriptor, node)

        for attr in attributes:
            if self._resolver.resolve_key(attr.name) == DESCRIPTION_KEY:
                node.attributes.remove(attr)
                break

        state.mark_processed(node)

    # ------------------------------------------------------------------
    # Calls
    # ------------------------------------------------------------------

    def extract_call(self, node: CallExpression) -> None:
        """Extract messages declared by a call expression, if any."""
        if self.state.is_processed(node):
            logger.debug("Skipping already extracted call")
            return

        callee = node.callee
        if isinstance(callee, Identifier) and callee.name == TRANSLATE_FUNCTION_NAME:
            self._extract_translate_call(node)
        elif self._references_any(callee, self.state.options.function_names):
            self._extract_descriptor_objects(node)

    def _extract_translate_call(self, node: CallExpression) -> None:
        # t(text, values, comment): text is both id and defaultMessage.
        descriptor: ResolvedDescriptor = {}
        arguments = node.arguments
        if arguments:
            text = self._resolver.resolve_message(arguments[0])
            descriptor[ID_KEY] = text
            descriptor[DEFAULT_MESSAGE_KEY] = text
        if len(arguments) > 2:
            descriptor[COMMENT_KEY] = self._resolver.resolve_value(arguments[2])

        self.state.store.store(descriptor, node)
        self.state.mark_processed(node)

    def _extract_descriptor_objects(self, node: CallExpression) -> None:
        callee = node.callee
        function_name = callee.name if isinstance(callee, Identifier) else "defineMessages"

        messages = node.arguments[0] if node.arguments else None
        if not ObjectExpression.guard(messages):
            diagnostic = locate(
                ErrorTemplate.descriptor_shape_invalid(function_name),
                messages if messages is not None else node,
                self.state.unit,
            )
            raise DescriptorShapeError(diagnostic, node=messages if messages is not None else node)

        for prop in messages.properties:
            value = prop.value if isinstance(prop, ObjectProperty) else None
            if not ObjectExpression.guard(value):
                diagnostic = locate(
                    ErrorTemplate.descriptor_shape_invalid(function_name), prop, self.state.unit
                )
                raise DescriptorShapeError(diagnostic, node=prop)
            self.extract_descriptor_object(value)

        self.state.mark_processed(node)

    def extract_descriptor_object(self, node: ObjectExpression) -> None:
        """Extract one ``{id, description, defaultMessage}`` object literal."""
        state = self.state
        if state.is_processed(node):
            logger.debug("Skipping already extracted descriptor object")
            return

        properties = [prop for prop in node.properties if isinstance(prop, ObjectProperty)]
        raw = build_raw_descriptor(
            ((prop.key, prop.value) for prop in properties),
            self._resolver.resolve_key,
            shape=MessageShape.DESCRIPTOR_OBJECT,
        )
        descriptor = self._resolver.resolve(raw)
        state.store.store(descriptor, node)

        for prop in properties:
            if self._resolver.resolve_key(prop.key) == DESCRIPTION_KEY:
                node.properties.remove(prop)
                break

        state.mark_processed(node)
