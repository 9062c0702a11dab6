"""Source tree node definitions.

A small node model mirroring the Babel JavaScript AST node kinds the
extraction engine inspects. Node kinds the engine does not care about are
kept as :class:`Unknown` containers so traversal still reaches any message
declarations nested inside them.

Nodes compare by identity and are mutable: the extraction engine removes
``description`` attributes and properties from the tree in place.

Positions follow the Babel convention: lines are 1-indexed, columns are
0-indexed.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field
from typing import TypeIs

from intlextract.diagnostics import SourceSpan

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locations
    "Position",
    "Location",
    # Base
    "Node",
    "Unknown",
    # Program and imports
    "Program",
    "ImportDeclaration",
    "ImportSpecifier",
    "ImportDefaultSpecifier",
    "ImportNamespaceSpecifier",
    # JSX
    "JSXElement",
    "JSXOpeningElement",
    "JSXAttribute",
    "JSXSpreadAttribute",
    "JSXExpressionContainer",
    "JSXIdentifier",
    "JSXMemberExpression",
    "JSXText",
    # Expressions
    "Identifier",
    "StringLiteral",
    "NumericLiteral",
    "BooleanLiteral",
    "NullLiteral",
    "TemplateLiteral",
    "TemplateElement",
    "BinaryExpression",
    "CallExpression",
    "MemberExpression",
    "ObjectExpression",
    "ObjectProperty",
    "SpreadElement",
    # Statements
    "ExpressionStatement",
    "VariableDeclaration",
    "VariableDeclarator",
    # Type aliases
    "Literal",
]


@dataclass(frozen=True, slots=True)
class Position:
    """Line (1-indexed) and column (0-indexed) of a source position."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Location:
    """Source range of a node.

    Attributes:
        start: Position of the first character
        end: Position after the last character
        start_offset: Character offset of the first character
        end_offset: Character offset after the last character
    """

    start: Position
    end: Position
    start_offset: int = 0
    end_offset: int = 0

    def to_span(self) -> SourceSpan:
        """Convert to a diagnostic span (1-indexed column)."""
        return SourceSpan(
            start=self.start_offset,
            end=max(self.end_offset, self.start_offset),
            line=self.start.line,
            column=self.start.column + 1,
        )


@dataclass(eq=False, slots=True)
class Node:
    """Base class of all tree nodes."""

    loc: Location | None = field(default=None, kw_only=True)

    @property
    def kind(self) -> str:
        """Node kind name (Babel ``type``)."""
        return type(self).__name__


@dataclass(eq=False, slots=True)
class Unknown(Node):
    """Node kind the engine does not inspect; keeps its child nodes.

    Attributes:
        type: Original node type (e.g., "ArrowFunctionExpression")
        children: Child nodes in document order
    """

    type: str
    children: list[Node] = field(default_factory=list)

    @property
    def kind(self) -> str:
        """Original node type."""
        return self.type


# ============================================================================
# PROGRAM AND IMPORTS
# ============================================================================


@dataclass(eq=False, slots=True)
class Program(Node):
    """Root node of a compilation unit."""

    body: list[Node] = field(default_factory=list)


@dataclass(eq=False, slots=True)
class Identifier(Node):
    """Identifier: name"""

    name: str

    @staticmethod
    def guard(node: object) -> TypeIs["Identifier"]:
        """Type guard for Identifier."""
        return isinstance(node, Identifier)


@dataclass(eq=False, slots=True)
class StringLiteral(Node):
    """String literal: "text" (JSX attribute strings are unescaped raw text)."""

    value: str


@dataclass(eq=False, slots=True)
class ImportSpecifier(Node):
    """Named import: import {imported as local} from "module"."""

    local: Identifier
    imported: Identifier | StringLiteral


@dataclass(eq=False, slots=True)
class ImportDefaultSpecifier(Node):
    """Default import: import local from "module"."""

    local: Identifier


@dataclass(eq=False, slots=True)
class ImportNamespaceSpecifier(Node):
    """Namespace import: import * as local from "module"."""

    local: Identifier


@dataclass(eq=False, slots=True)
class ImportDeclaration(Node):
    """import ... from "source" """

    specifiers: list[Node]
    source: StringLiteral


# ============================================================================
# JSX
# ============================================================================


@dataclass(eq=False, slots=True)
class JSXIdentifier(Node):
    """JSX tag or attribute name."""

    name: str


@dataclass(eq=False, slots=True)
class JSXMemberExpression(Node):
    """Dotted JSX tag name: <Intl.Message>."""

    object: Node
    property: JSXIdentifier


@dataclass(eq=False, slots=True)
class JSXExpressionContainer(Node):
    """Expression wrapped in braces: defaultMessage={"..."}."""

    expression: Node

    @staticmethod
    def guard(node: object) -> TypeIs["JSXExpressionContainer"]:
        """Type guard for JSXExpressionContainer."""
        return isinstance(node, JSXExpressionContainer)


@dataclass(eq=False, slots=True)
class JSXAttribute(Node):
    """key=value attribute; value is None for bare boolean attributes."""

    name: Node
    value: Node | None = None


@dataclass(eq=False, slots=True)
class JSXSpreadAttribute(Node):
    """Spread attribute: {...descriptor}."""

    argument: Node


@dataclass(eq=False, slots=True)
class JSXOpeningElement(Node):
    """Opening tag: <Name attr=... />."""

    name: Node
    attributes: list[Node] = field(default_factory=list)
    self_closing: bool = False


@dataclass(eq=False, slots=True)
class JSXText(Node):
    """Text between JSX tags."""

    value: str


@dataclass(eq=False, slots=True)
class JSXElement(Node):
    """Element with its opening tag and children."""

    opening_element: JSXOpeningElement
    children: list[Node] = field(default_factory=list)


# ============================================================================
# EXPRESSIONS
# ============================================================================


@dataclass(eq=False, slots=True)
class NumericLiteral(Node):
    """Number literal: 42, 3.5"""

    value: int | float


@dataclass(eq=False, slots=True)
class BooleanLiteral(Node):
    """true / false"""

    value: bool


@dataclass(eq=False, slots=True)
class NullLiteral(Node):
    """null"""


@dataclass(eq=False, slots=True)
class TemplateElement(Node):
    """Static chunk of a template literal; cooked is None for invalid escapes."""

    raw: str
    cooked: str | None = None


@dataclass(eq=False, slots=True)
class TemplateLiteral(Node):
    """Template literal: `Hello ${name}`.

    quasis always holds one more element than expressions.
    """

    quasis: list[TemplateElement] = field(default_factory=list)
    expressions: list[Node] = field(default_factory=list)


@dataclass(eq=False, slots=True)
class BinaryExpression(Node):
    """left <operator> right"""

    operator: str
    left: Node
    right: Node


@dataclass(eq=False, slots=True)
class MemberExpression(Node):
    """object.property or object[property]"""

    object: Node
    property: Node
    computed: bool = False


@dataclass(eq=False, slots=True)
class CallExpression(Node):
    """callee(arguments...)"""

    callee: Node
    arguments: list[Node] = field(default_factory=list)


@dataclass(eq=False, slots=True)
class ObjectProperty(Node):
    """key: value inside an object literal."""

    key: Node
    value: Node
    computed: bool = False


@dataclass(eq=False, slots=True)
class SpreadElement(Node):
    """...argument inside an object literal or call."""

    argument: Node


@dataclass(eq=False, slots=True)
class ObjectExpression(Node):
    """Object literal: {key: value, ...}."""

    properties: list[Node] = field(default_factory=list)

    @staticmethod
    def guard(node: object) -> TypeIs["ObjectExpression"]:
        """Type guard for ObjectExpression."""
        return isinstance(node, ObjectExpression)


# ============================================================================
# STATEMENTS
# ============================================================================


@dataclass(eq=False, slots=True)
class ExpressionStatement(Node):
    """Expression evaluated for its side effects."""

    expression: Node


@dataclass(eq=False, slots=True)
class VariableDeclarator(Node):
    """id = init"""

    id: Node
    init: Node | None = None


@dataclass(eq=False, slots=True)
class VariableDeclaration(Node):
    """const/let/var declarations.

    Attributes:
        declaration_kind: "const", "let" or "var"
        declarations: Declarators in source order
    """

    declaration_kind: str
    declarations: list[VariableDeclarator] = field(default_factory=list)


type Literal = StringLiteral | NumericLiteral | BooleanLiteral | NullLiteral | TemplateLiteral
