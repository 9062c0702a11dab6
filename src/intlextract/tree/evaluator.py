"""Literal-only static evaluation.

Reduces an expression to a constant when it is built solely from literals:

- string, number, boolean and null literals
- template literals whose interpolations are themselves constant
- ``+`` of two constant operands (string concatenation or numeric addition)

Anything else (identifiers, member access, calls, other operators) is
reported as non-confident. Bindings are never followed: there is no general
constant folding.

Python 3.13+. Zero external dependencies.
"""

import math
from dataclasses import dataclass

from intlextract.constants import MAX_TREE_DEPTH
from intlextract.core.depth_guard import DepthGuard

from .nodes import (
    BinaryExpression,
    BooleanLiteral,
    Node,
    NullLiteral,
    NumericLiteral,
    StringLiteral,
    TemplateLiteral,
)

__all__ = ["Evaluation", "LiteralEvaluator", "to_js_string"]


@dataclass(frozen=True, slots=True)
class Evaluation:
    """Outcome of statically evaluating an expression.

    Attributes:
        confident: True if the expression reduced to a constant
        value: The constant (meaningful only when confident)
    """

    confident: bool
    value: object = None


_NOT_CONFIDENT = Evaluation(confident=False)


def to_js_string(value: object) -> str:
    """Convert a constant to text the way JavaScript string conversion does.

    Example:
        >>> to_js_string(3.0), to_js_string(True), to_js_string(None)
        ('3', 'true', 'null')
    """
    match value:
        case str():
            return value
        case bool():
            return "true" if value else "false"
        case None:
            return "null"
        case int():
            return str(value)
        case float():
            if math.isnan(value):
                return "NaN"
            if math.isinf(value):
                return "Infinity" if value > 0 else "-Infinity"
            if value.is_integer():
                return str(int(value))
            return repr(value)
        case _:
            return str(value)


def _to_number(value: object) -> float | int:
    match value:
        case bool():
            return int(value)
        case None:
            return 0
        case int() | float():
            return value
        case _:
            return math.nan


class LiteralEvaluator:
    """Evaluates literal expressions; satisfies the StaticEvaluator protocol."""

    __slots__ = ("_guard",)

    def __init__(self, *, max_depth: int = MAX_TREE_DEPTH) -> None:
        self._guard = DepthGuard(max_depth=max_depth)

    def evaluate(self, node: Node) -> Evaluation:
        """Evaluate a node to a constant if possible."""
        with self._guard:
            match node:
                case StringLiteral(value=value) | NumericLiteral(value=value):
                    return Evaluation(confident=True, value=value)
                case BooleanLiteral(value=value):
                    return Evaluation(confident=True, value=value)
                case NullLiteral():
                    return Evaluation(confident=True, value=None)
                case TemplateLiteral():
                    return self._evaluate_template(node)
                case BinaryExpression(operator="+", left=left, right=right):
                    return self._evaluate_addition(left, right)
                case _:
                    return _NOT_CONFIDENT

    def _evaluate_template(self, node: TemplateLiteral) -> Evaluation:
        parts: list[str] = []
        for index, quasi in enumerate(node.quasis):
            if quasi.cooked is None:
                return _NOT_CONFIDENT
            parts.append(quasi.cooked)
            if index < len(node.expressions):
                result = self.evaluate(node.expressions[index])
                if not result.confident:
                    return _NOT_CONFIDENT
                parts.append(to_js_string(result.value))
        return Evaluation(confident=True, value="".join(parts))

    def _evaluate_addition(self, left: Node, right: Node) -> Evaluation:
        lhs = self.evaluate(left)
        if not lhs.confident:
            return _NOT_CONFIDENT
        rhs = self.evaluate(right)
        if not rhs.confident:
            return _NOT_CONFIDENT

        if isinstance(lhs.value, str) or isinstance(rhs.value, str):
            return Evaluation(confident=True, value=to_js_string(lhs.value) + to_js_string(rhs.value))
        return Evaluation(confident=True, value=_to_number(lhs.value) + _to_number(rhs.value))
