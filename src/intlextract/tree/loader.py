"""Babel JSON AST loader.

Converts the JSON output of ``@babel/parser`` (``File`` or ``Program`` root,
``jsx`` plugin enabled) into :mod:`intlextract.tree.nodes`. The ESTree
``Literal``/``Property`` variants are accepted as well.

Node kinds the extraction engine does not inspect become
:class:`~intlextract.tree.nodes.Unknown` containers holding their child nodes
in source order, so traversal still reaches messages declared inside
functions, classes, conditionals and so on.

Python 3.13+. Zero external dependencies.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from intlextract.constants import MAX_TREE_DEPTH
from intlextract.core.depth_guard import DepthGuard, DepthLimitExceededError
from intlextract.diagnostics import ErrorTemplate, TreeLoadError

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

__all__ = ["TreeLoader", "load_program", "load_program_file"]

logger = logging.getLogger(__name__)

type RawNode = Mapping[str, object]

# Keys of a Babel node that never hold child nodes.
_NON_CHILD_KEYS: frozenset[str] = frozenset({
    "type",
    "start",
    "end",
    "loc",
    "range",
    "extra",
    "leadingComments",
    "trailingComments",
    "innerComments",
    "comments",
    "tokens",
    "errors",
})


def _invalid(reason: str) -> TreeLoadError:
    return TreeLoadError(ErrorTemplate.tree_node_invalid(reason).message)


def _is_raw_node(value: object) -> bool:
    return isinstance(value, Mapping) and isinstance(value.get("type"), str)


def _position(raw: object) -> Position | None:
    if not isinstance(raw, Mapping):
        return None
    line = raw.get("line")
    column = raw.get("column")
    if not isinstance(line, int) or not isinstance(column, int):
        return None
    return Position(line=line, column=column)


def _location(data: RawNode) -> Location | None:
    """Read ``loc`` (and ``start``/``end`` offsets) of a raw node."""
    loc = data.get("loc")
    if not isinstance(loc, Mapping):
        return None
    start = _position(loc.get("start"))
    end = _position(loc.get("end"))
    if start is None or end is None:
        return None
    start_offset = data.get("start")
    end_offset = data.get("end")
    return Location(
        start=start,
        end=end,
        start_offset=start_offset if isinstance(start_offset, int) else 0,
        end_offset=end_offset if isinstance(end_offset, int) else 0,
    )


def _source_order(node: Node) -> int:
    return node.loc.start_offset if node.loc is not None else -1


class TreeLoader:
    """Builds a node tree from a parsed Babel JSON AST.

    Recursion is depth-guarded; a tree nested deeper than ``max_depth``
    raises TreeLoadError instead of exhausting the interpreter stack.
    """

    __slots__ = ("_guard",)

    def __init__(self, *, max_depth: int = MAX_TREE_DEPTH) -> None:
        """Initialize loader.

        Args:
            max_depth: Maximum node nesting depth (default: MAX_TREE_DEPTH)
        """
        self._guard = DepthGuard(max_depth=max_depth)

    def load(self, data: object) -> Program:
        """Load a ``File`` or ``Program`` root.

        Args:
            data: Parsed JSON AST

        Returns:
            Program node

        Raises:
            TreeLoadError: If the input is not a well-formed Babel AST
        """
        if not _is_raw_node(data):
            msg = "root is not an AST node"
            raise _invalid(msg)
        assert isinstance(data, Mapping)

        match data["type"]:
            case "File":
                program = data.get("program")
            case "Program":
                program = data
            case other:
                msg = f"expected a File or Program root, got {other!r}"
                raise _invalid(msg)

        try:
            node = self.build(program)
        except DepthLimitExceededError as e:
            msg = f"source tree nested deeper than {self._guard.max_depth} levels"
            raise _invalid(msg) from e

        if not isinstance(node, Program):
            msg = "File.program is not a Program node"
            raise _invalid(msg)
        return node

    def build(self, raw: object) -> Node:
        """Build one node (and its subtree) from its raw mapping."""
        if not _is_raw_node(raw):
            msg = f"expected an AST node, got {type(raw).__name__}"
            raise _invalid(msg)
        assert isinstance(raw, Mapping)

        with self._guard:
            return self._build_kind(raw, str(raw["type"]), _location(raw))

    def _build_kind(self, data: RawNode, kind: str, loc: Location | None) -> Node:  # noqa: PLR0911, PLR0912
        match kind:
            case "Program":
                return Program(body=self._children(data, "body"), loc=loc)
            case "ImportDeclaration":
                return ImportDeclaration(
                    specifiers=self._children(data, "specifiers"),
                    source=self._typed_child(data, "source", StringLiteral),
                    loc=loc,
                )
            case "ImportSpecifier":
                imported = self._child(data, "imported")
                if not isinstance(imported, Identifier | StringLiteral):
                    msg = "ImportSpecifier.imported must be an Identifier or StringLiteral"
                    raise _invalid(msg)
                return ImportSpecifier(
                    local=self._typed_child(data, "local", Identifier),
                    imported=imported,
                    loc=loc,
                )
            case "ImportDefaultSpecifier":
                return ImportDefaultSpecifier(
                    local=self._typed_child(data, "local", Identifier), loc=loc
                )
            case "ImportNamespaceSpecifier":
                return ImportNamespaceSpecifier(
                    local=self._typed_child(data, "local", Identifier), loc=loc
                )
            case "JSXElement":
                return JSXElement(
                    opening_element=self._typed_child(data, "openingElement", JSXOpeningElement),
                    children=self._children(data, "children"),
                    loc=loc,
                )
            case "JSXOpeningElement":
                return JSXOpeningElement(
                    name=self._child(data, "name"),
                    attributes=self._children(data, "attributes"),
                    self_closing=bool(data.get("selfClosing", False)),
                    loc=loc,
                )
            case "JSXAttribute":
                return JSXAttribute(
                    name=self._child(data, "name"),
                    value=self._optional_child(data, "value"),
                    loc=loc,
                )
            case "JSXSpreadAttribute":
                return JSXSpreadAttribute(argument=self._child(data, "argument"), loc=loc)
            case "JSXExpressionContainer":
                return JSXExpressionContainer(expression=self._child(data, "expression"), loc=loc)
            case "JSXIdentifier":
                return JSXIdentifier(name=self._string(data, "name"), loc=loc)
            case "JSXMemberExpression":
                return JSXMemberExpression(
                    object=self._child(data, "object"),
                    property=self._typed_child(data, "property", JSXIdentifier),
                    loc=loc,
                )
            case "JSXText":
                return JSXText(value=self._string(data, "value"), loc=loc)
            case "Identifier":
                return Identifier(name=self._string(data, "name"), loc=loc)
            case "StringLiteral":
                return StringLiteral(value=self._string(data, "value"), loc=loc)
            case "NumericLiteral":
                value = data.get("value")
                if isinstance(value, bool) or not isinstance(value, int | float):
                    msg = "NumericLiteral.value must be a number"
                    raise _invalid(msg)
                return NumericLiteral(value=value, loc=loc)
            case "BooleanLiteral":
                return BooleanLiteral(value=bool(data.get("value")), loc=loc)
            case "NullLiteral":
                return NullLiteral(loc=loc)
            case "Literal":
                return self._build_estree_literal(data, loc)
            case "TemplateLiteral":
                return TemplateLiteral(
                    quasis=[
                        self._expect(node, TemplateElement, "TemplateLiteral.quasis")
                        for node in self._children(data, "quasis")
                    ],
                    expressions=self._children(data, "expressions"),
                    loc=loc,
                )
            case "TemplateElement":
                value = data.get("value")
                if not isinstance(value, Mapping) or not isinstance(value.get("raw"), str):
                    msg = "TemplateElement.value.raw must be a string"
                    raise _invalid(msg)
                cooked = value.get("cooked")
                return TemplateElement(
                    raw=str(value["raw"]),
                    cooked=cooked if isinstance(cooked, str) else None,
                    loc=loc,
                )
            case "BinaryExpression":
                return BinaryExpression(
                    operator=self._string(data, "operator"),
                    left=self._child(data, "left"),
                    right=self._child(data, "right"),
                    loc=loc,
                )
            case "CallExpression":
                return CallExpression(
                    callee=self._child(data, "callee"),
                    arguments=self._children(data, "arguments"),
                    loc=loc,
                )
            case "MemberExpression":
                return MemberExpression(
                    object=self._child(data, "object"),
                    property=self._child(data, "property"),
                    computed=bool(data.get("computed", False)),
                    loc=loc,
                )
            case "ObjectExpression":
                return ObjectExpression(properties=self._children(data, "properties"), loc=loc)
            case "ObjectProperty" | "Property":
                return ObjectProperty(
                    key=self._child(data, "key"),
                    value=self._child(data, "value"),
                    computed=bool(data.get("computed", False)),
                    loc=loc,
                )
            case "SpreadElement":
                return SpreadElement(argument=self._child(data, "argument"), loc=loc)
            case "ExpressionStatement":
                return ExpressionStatement(expression=self._child(data, "expression"), loc=loc)
            case "VariableDeclaration":
                return VariableDeclaration(
                    declaration_kind=self._string(data, "kind"),
                    declarations=[
                        self._expect(node, VariableDeclarator, "VariableDeclaration.declarations")
                        for node in self._children(data, "declarations")
                    ],
                    loc=loc,
                )
            case "VariableDeclarator":
                return VariableDeclarator(
                    id=self._child(data, "id"),
                    init=self._optional_child(data, "init"),
                    loc=loc,
                )
            case _:
                return self._build_unknown(data, kind, loc)

    def _build_estree_literal(self, data: RawNode, loc: Location | None) -> Node:
        if "regex" in data or "bigint" in data:
            return Unknown(type="Literal", loc=loc)
        match data.get("value"):
            case bool() as flag:
                return BooleanLiteral(value=flag, loc=loc)
            case int() | float() as number:
                return NumericLiteral(value=number, loc=loc)
            case str() as text:
                return StringLiteral(value=text, loc=loc)
            case None:
                return NullLiteral(loc=loc)
            case other:
                msg = f"unsupported Literal value of type {type(other).__name__}"
                raise _invalid(msg)

    def _build_unknown(self, data: RawNode, kind: str, loc: Location | None) -> Unknown:
        children: list[Node] = []
        for key, value in data.items():
            if key in _NON_CHILD_KEYS:
                continue
            if _is_raw_node(value):
                children.append(self.build(value))
            elif isinstance(value, list):
                children.extend(self.build(item) for item in value if _is_raw_node(item))
        children.sort(key=_source_order)
        return Unknown(type=kind, children=children, loc=loc)

    # ------------------------------------------------------------------
    # Field accessors
    # ------------------------------------------------------------------

    def _child(self, data: RawNode, key: str) -> Node:
        value = data.get(key)
        if value is None:
            msg = f"{data['type']}.{key} is missing"
            raise _invalid(msg)
        return self.build(value)

    def _optional_child(self, data: RawNode, key: str) -> Node | None:
        value = data.get(key)
        return None if value is None else self.build(value)

    def _typed_child[N: Node](self, data: RawNode, key: str, node_type: type[N]) -> N:
        return self._expect(self._child(data, key), node_type, f"{data['type']}.{key}")

    def _children(self, data: RawNode, key: str) -> list[Node]:
        value = data.get(key, [])
        if not isinstance(value, list):
            msg = f"{data['type']}.{key} must be a list"
            raise _invalid(msg)
        # Array holes (``[, a]``) are serialized as null.
        return [self.build(item) for item in value if item is not None]

    @staticmethod
    def _expect[N: Node](node: Node, node_type: type[N], where: str) -> N:
        if not isinstance(node, node_type):
            msg = f"{where} must be a {node_type.__name__}, got {node.kind}"
            raise _invalid(msg)
        return node

    @staticmethod
    def _string(data: RawNode, key: str) -> str:
        value = data.get(key)
        if not isinstance(value, str):
            msg = f"{data['type']}.{key} must be a string"
            raise _invalid(msg)
        return value


def load_program(data: object, *, max_depth: int = MAX_TREE_DEPTH) -> Program:
    """Load a parsed Babel JSON AST.

    Args:
        data: Parsed JSON (``File`` or ``Program`` root)
        max_depth: Maximum node nesting depth

    Returns:
        Program node

    Raises:
        TreeLoadError: If the input is not a well-formed Babel AST

    Example:
        >>> program = load_program({"type": "Program", "body": []})
        >>> program.body
        []
    """
    return TreeLoader(max_depth=max_depth).load(data)


def load_program_file(path: str | Path, *, max_depth: int = MAX_TREE_DEPTH) -> Program:
    """Read and load a Babel JSON AST file (UTF-8).

    Raises:
        TreeLoadError: If the file is not valid JSON or not a Babel AST
        OSError: If the file cannot be read
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"{path}: not valid JSON ({e})"
        raise _invalid(msg) from e
    logger.debug("Loading source tree from %s", path)
    return load_program(data, max_depth=max_depth)
