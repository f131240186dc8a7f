"""Calculator tool — arithmetic over a sanitized expression.

Input is first reduced to digits, ``+ - * / ( ) .`` and whitespace, then
parsed with :mod:`ast` and evaluated by walking the tree. Only numeric
literals, unary ``+``/``-`` and binary ``+ - * /`` are accepted, so nothing
but that arithmetic grammar is ever evaluated.
"""
import ast
import logging
import math
import operator
import re
from typing import Union

from ..registry import register_tool, ToolResult, ToolParam

logger = logging.getLogger(__name__)

INVALID_EXPRESSION = "Invalid mathematical expression"

_DISALLOWED = re.compile(r"[^0-9+\-*/().\s]")

_BIN_OPS = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
}

_UNARY_OPS = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}

Number = Union[int, float]


class ExpressionError(ValueError):
    """Expression is outside the arithmetic grammar or has no finite value."""


def sanitize_expression(expression: str) -> str:
    """Strip every character that is not a digit, operator, paren, dot or space."""
    return _DISALLOWED.sub("", expression)


def _eval_node(node: ast.AST) -> Number:
    if isinstance(node, ast.Expression):
        return _eval_node(node.body)
    if isinstance(node, ast.Constant) and type(node.value) in (int, float):
        # float arithmetic: results past float range become inf, never huge ints
        return float(node.value)
    if isinstance(node, ast.BinOp) and type(node.op) in _BIN_OPS:
        left = _eval_node(node.left)
        right = _eval_node(node.right)
        return _BIN_OPS[type(node.op)](left, right)
    if isinstance(node, ast.UnaryOp) and type(node.op) in _UNARY_OPS:
        return _UNARY_OPS[type(node.op)](_eval_node(node.operand))
    raise ExpressionError(f"unsupported syntax: {type(node).__name__}")


def evaluate(expression: str) -> Number:
    """Evaluate a sanitized arithmetic expression.

    Evaluation uses float arithmetic. Raises ExpressionError for malformed
    input, division by zero and non-finite results, including anything past
    float range. Integral results are returned as int.
    """
    sanitized = sanitize_expression(expression).strip()
    if not sanitized:
        raise ExpressionError("empty expression")
    try:
        tree = ast.parse(sanitized, mode="eval")
    except SyntaxError as e:
        raise ExpressionError(f"syntax error: {e.msg}") from e
    except ValueError as e:
        # integer literal past the int string conversion limit
        raise ExpressionError(str(e)) from e
    except RecursionError as e:
        raise ExpressionError("expression nested too deeply") from e

    try:
        value = _eval_node(tree)
    except (ZeroDivisionError, OverflowError, RecursionError) as e:
        raise ExpressionError(str(e)) from e

    if not math.isfinite(value):
        raise ExpressionError("non-finite result")
    if value.is_integer():
        return int(value)
    return value


@register_tool(
    "calculator",
    description="Perform mathematical calculations",
    params=[
        ToolParam("expression", description="the mathematical expression to evaluate"),
    ],
    category="math",
)
async def calculator(expression: str = "", **kwargs) -> ToolResult:
    try:
        result = evaluate(expression)
    except ExpressionError as e:
        logger.info(f"Calculator rejected {expression!r}: {e}")
        return ToolResult.failure(INVALID_EXPRESSION)
    return ToolResult(data={"expression": expression, "result": result})
