"""Reference host: source tree model, Babel AST loader, scope, evaluator, walker.

The extraction engine only needs the capabilities in
:mod:`intlextract.extraction.host`; this package provides a complete
implementation of them over Babel's JSON AST output.

Python 3.13+. Zero external dependencies.
"""

from .evaluator import Evaluation, LiteralEvaluator, to_js_string
from .loader import TreeLoader, load_program, load_program_file
from .nodes import (
    BinaryExpression,
    BooleanLiteral,
    CallExpression,
    ExpressionStatement,
    Identifier,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportNamespaceSpecifier,
    ImportSpecifier,
    JSXAttribute,
    JSXElement,
    JSXExpressionContainer,
    JSXIdentifier,
    JSXMemberExpression,
    JSXOpeningElement,
    JSXSpreadAttribute,
    JSXText,
    Literal,
    Location,
    MemberExpression,
    Node,
    NullLiteral,
    NumericLiteral,
    ObjectExpression,
    ObjectProperty,
    Position,
    Program,
    SpreadElement,
    StringLiteral,
    TemplateElement,
    TemplateLiteral,
    Unknown,
    VariableDeclaration,
    VariableDeclarator,
)
from .scope import ImportBinding, ImportScope
from .visitor import NodeVisitor

__all__ = [
    "BinaryExpression",
    "BooleanLiteral",
    "CallExpression",
    "Evaluation",
    "ExpressionStatement",
    "Identifier",
    "ImportBinding",
    "ImportDeclaration",
    "ImportDefaultSpecifier",
    "ImportNamespaceSpecifier",
    "ImportScope",
    "ImportSpecifier",
    "JSXAttribute",
    "JSXElement",
    "JSXExpressionContainer",
    "JSXIdentifier",
    "JSXMemberExpression",
    "JSXOpeningElement",
    "JSXSpreadAttribute",
    "JSXText",
    "Literal",
    "LiteralEvaluator",
    "Location",
    "MemberExpression",
    "Node",
    "NodeVisitor",
    "NullLiteral",
    "NumericLiteral",
    "ObjectExpression",
    "ObjectProperty",
    "Position",
    "Program",
    "SpreadElement",
    "StringLiteral",
    "TemplateElement",
    "TemplateLiteral",
    "TreeLoader",
    "Unknown",
    "VariableDeclaration",
    "VariableDeclarator",
    "load_program",
    "load_program_file",
    "to_js_string",
]
