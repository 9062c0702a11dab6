"""Builders for source trees used across the extraction tests.

Two flavours:
- node builders returning intlextract.tree nodes directly
- ``raw_*`` builders returning Babel JSON AST mappings (for loader tests)

Every built node gets a location on the requested line so diagnostics and
source locations can be asserted.
"""

from __future__ import annotations

from intlextract.tree import (
    CallExpression,
    ExpressionStatement,
    Identifier,
    ImportDeclaration,
    ImportDefaultSpecifier,
    ImportSpecifier,
    JSXAttribute,
    JSXElement,
    JSXExpressionContainer,
    JSXIdentifier,
    JSXOpeningElement,
    JSXSpreadAttribute,
    Location,
    Node,
    ObjectExpression,
    ObjectProperty,
    Position,
    Program,
    StringLiteral,
)


def loc(line: int = 1, column: int = 0, end_column: int | None = None) -> Location:
    """Single-line location."""
    return Location(
        start=Position(line, column),
        end=Position(line, end_column if end_column is not None else column + 10),
        start_offset=column,
        end_offset=end_column if end_column is not None else column + 10,
    )


def lit(value: str, line: int = 1) -> StringLiteral:
    return StringLiteral(value=value, loc=loc(line))


def ident(name: str, line: int = 1) -> Identifier:
    return Identifier(name=name, loc=loc(line))


def container(expression: Node) -> JSXExpressionContainer:
    return JSXExpressionContainer(expression=expression, loc=expression.loc)


def attr(name: str, value: str | Node | None, line: int = 1) -> JSXAttribute:
    """JSX attribute; strings become StringLiteral values."""
    value_node = lit(value, line) if isinstance(value, str) else value
    return JSXAttribute(name=JSXIdentifier(name=name, loc=loc(line)), value=value_node, loc=loc(line))


def spread(name: str, line: int = 1) -> JSXSpreadAttribute:
    return JSXSpreadAttribute(argument=ident(name, line), loc=loc(line))


def opening(tag: str, *attributes: JSXAttribute | JSXSpreadAttribute, line: int = 1) -> JSXOpeningElement:
    return JSXOpeningElement(
        name=JSXIdentifier(name=tag, loc=loc(line)),
        attributes=list(attributes),
        self_closing=True,
        loc=loc(line),
    )


def element(
    tag: str,
    *attributes: JSXAttribute | JSXSpreadAttribute,
    children: list[Node] | None = None,
    line: int = 1,
) -> JSXElement:
    return JSXElement(
        opening_element=opening(tag, *attributes, line=line),
        children=children if children is not None else [],
        loc=loc(line),
    )


def call(callee: str | Node, *arguments: Node, line: int = 1) -> CallExpression:
    callee_node = ident(callee, line) if isinstance(callee, str) else callee
    return CallExpression(callee=callee_node, arguments=list(arguments), loc=loc(line))


def obj(*properties: tuple[str, Node] | Node, line: int = 1) -> ObjectExpression:
    """Object literal; (key, value) pairs become identifier-keyed properties."""
    nodes: list[Node] = []
    for prop in properties:
        if isinstance(prop, tuple):
            key, value = prop
            nodes.append(ObjectProperty(key=ident(key, line), value=value, loc=loc(line)))
        else:
            nodes.append(prop)
    return ObjectExpression(properties=nodes, loc=loc(line))


def import_from(module: str, *names: str, default: str | None = None) -> ImportDeclaration:
    """import default, {name, other as alias} from module (``"other as alias"`` renames)."""
    specifiers: list[Node] = []
    if default is not None:
        specifiers.append(ImportDefaultSpecifier(local=ident(default)))
    for name in names:
        imported, _, local = name.partition(" as ")
        specifiers.append(
            ImportSpecifier(local=ident(local or imported), imported=ident(imported))
        )
    return ImportDeclaration(specifiers=specifiers, source=lit(module))


def program(*statements: Node) -> Program:
    """Program; expressions are wrapped in ExpressionStatements."""
    body: list[Node] = []
    for statement in statements:
        if isinstance(statement, ImportDeclaration | ExpressionStatement):
            body.append(statement)
        else:
            body.append(ExpressionStatement(expression=statement, loc=statement.loc))
    return Program(body=body)


# ============================================================================
# Babel JSON AST
# ============================================================================


def raw_loc(line: int = 1, column: int = 0, length: int = 10) -> dict[str, object]:
    return {
        "start": {"line": line, "column": column},
        "end": {"line": line, "column": column + length},
    }


def raw(type_: str, line: int = 1, column: int = 0, **fields: object) -> dict[str, object]:
    """Babel node mapping with ``start``/``end`` offsets derived from the line."""
    offset = line * 100 + column
    return {
        "type": type_,
        "start": offset,
        "end": offset + 10,
        "loc": raw_loc(line, column),
        **fields,
    }


def raw_string(value: str, line: int = 1, column: int = 0) -> dict[str, object]:
    return raw("StringLiteral", line, column, value=value, extra={"raw": repr(value)})


def raw_identifier(name: str, line: int = 1, column: int = 0) -> dict[str, object]:
    return raw("Identifier", line, column, name=name)


def raw_import(module: str, *names: str, line: int = 1) -> dict[str, object]:
    return raw(
        "ImportDeclaration",
        line,
        specifiers=[
            raw(
                "ImportSpecifier",
                line,
                local=raw_identifier(name, line),
                imported=raw_identifier(name, line),
            )
            for name in names
        ],
        source=raw_string(module, line),
    )


def raw_jsx(tag: str, attributes: dict[str, str], line: int = 1) -> dict[str, object]:
    """``<tag key="value" ... />`` as an expression statement."""
    opening_element = raw(
        "JSXOpeningElement",
        line,
        name=raw("JSXIdentifier", line, name=tag),
        attributes=[
            raw(
                "JSXAttribute",
                line,
                index * 10,
                name=raw("JSXIdentifier", line, index * 10, name=key),
                value=raw_string(value, line, index * 10 + 5),
            )
            for index, (key, value) in enumerate(attributes.items(), start=1)
        ],
        selfClosing=True,
    )
    jsx = raw("JSXElement", line, openingElement=opening_element, closingElement=None, children=[])
    return raw("ExpressionStatement", line, expression=jsx)


def raw_file(*body: dict[str, object]) -> dict[str, object]:
    """``File`` root as produced by ``@babel/parser``."""
    return {
        "type": "File",
        "start": 0,
        "end": 10_000,
        "loc": raw_loc(1, 0, 100),
        "program": {
            "type": "Program",
            "start": 0,
            "end": 10_000,
            "loc": raw_loc(1, 0, 100),
            "sourceType": "module",
            "interpreter": None,
            "body": list(body),
            "directives": [],
        },
        "comments": [],
    }
