"""Visitor pattern for source tree traversal.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeKind (PascalCase, matching the Babel node type)
rather than visit_node_kind (snake_case).

Traversal order is document order: a node is visited before its children,
and children are visited in dataclass field declaration order, which mirrors
source order for every node kind in :mod:`intlextract.tree.nodes`.

Python 3.13+.
"""

from collections.abc import Callable
from dataclasses import Field, fields
from typing import ClassVar

from intlextract.constants import MAX_TREE_DEPTH
from intlextract.core.depth_guard import DepthGuard

from .nodes import Node

__all__ = ["NodeVisitor"]


class NodeVisitor:
    """Base visitor for traversing a source tree.

    generic_visit() traverses all child nodes. Override visit_NodeKind
    methods to act on a node kind; call ``self.generic_visit(node)`` from the
    override to keep descending.

    Dispatch uses the node's ``kind``, so visit_<Kind> methods also fire for
    :class:`Unknown` nodes of that Babel type (e.g., visit_ArrowFunctionExpression).

    Example:
        >>> class CountCalls(NodeVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_CallExpression(self, node):
        ...         self.count += 1
        ...         self.generic_visit(node)
        ...
        >>> visitor = CountCalls()
        >>> visitor.visit(program)
        >>> print(visitor.count)
    """

    __slots__ = ("_depth_guard", "_instance_dispatch_cache")

    # Class-level dispatch table (method names only, not bound methods)
    # Built once per class definition via __init_subclass__
    _class_visit_methods: ClassVar[dict[str, str]] = {}

    # Class-level cache for dataclass fields per node type
    _fields_cache: ClassVar[dict[type[Node], tuple[Field[object], ...]]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_") and name != "visit":
                cls._class_visit_methods[name[6:]] = name

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize visitor with depth guard and dispatch cache.

        Subclasses MUST call super().__init__() to ensure depth protection
        is properly initialized.

        Args:
            max_depth: Maximum traversal depth (default: MAX_TREE_DEPTH).
        """
        effective_max_depth = max_depth if max_depth is not None else MAX_TREE_DEPTH
        self._depth_guard = DepthGuard(max_depth=effective_max_depth)
        self._instance_dispatch_cache: dict[str, Callable[[Node], object]] = {}

    def visit(self, node: Node) -> None:
        """Visit a node (dispatches on node kind).

        Args:
            node: Tree node to visit
        """
        kind = node.kind

        method = self._instance_dispatch_cache.get(kind)
        if method is None:
            if kind in self._class_visit_methods:
                method = getattr(self, self._class_visit_methods[kind])
            else:
                method = self.generic_visit
            self._instance_dispatch_cache[kind] = method
        method(node)

    def _get_node_fields(self, node_type: type[Node]) -> tuple[Field[object], ...]:
        if node_type not in NodeVisitor._fields_cache:
            NodeVisitor._fields_cache[node_type] = tuple(
                f for f in fields(node_type) if f.name != "loc"
            )
        return NodeVisitor._fields_cache[node_type]

    def generic_visit(self, node: Node) -> None:
        """Visit all child nodes of a node (depth-guarded).

        Child lists are snapshotted before iteration, so a visit method may
        remove siblings (e.g., an attribute) without disturbing traversal.

        Raises:
            DepthLimitExceededError: If traversal depth exceeds max_depth
        """
        with self._depth_guard:
            for field in self._get_node_fields(type(node)):
                value = getattr(node, field.name)
                if isinstance(value, Node):
                    self.visit(value)
                elif isinstance(value, list):
                    for item in tuple(value):
                        if isinstance(item, Node):
                            self.visit(item)

