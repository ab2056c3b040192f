from __future__ import annotations

import logging
from typing import Any, NamedTuple, Optional, Sequence

import numpy as np

from lamcalc.errors import UnsupportedExpressionError
from lamcalc.utils.ast_utils import ASTNode, TypeSpec, is_declaration

logger = logging.getLogger(__name__)


# Runtime values are tagged tuples, like AST nodes:
#   ("number", float), ("vector", (value, ...)), ("matrix", (value, ...)), ("void",)
Value = tuple[Any, ...]

VOID: Value = ("void",)


def number_value(n: float) -> Value:
    return ("number", float(n))


def vector_value(items: Sequence[Value]) -> Value:
    return ("vector", tuple(items))


def matrix_value(rows: Sequence[Value]) -> Value:
    return ("matrix", tuple(rows))


class Declaration(NamedTuple):
    """Key of the evaluator's definition table.

    Equality and hashing cover both fields, so ``x :: number`` and
    ``x :: [3]`` are separate entries.
    """

    name: str
    type: TypeSpec


# Binary node tag -> float operation.  numpy keeps IEEE semantics for
# division by zero (inf / nan) where Python floats would raise.
ARITHMETIC = {
    "add": np.add,
    "sub": np.subtract,
    "mul": np.multiply,
    "div": np.divide,
}


class Evaluator:
    """Tree-walking evaluator for parsed lines.

    Each call to :meth:`evaluate` takes one top-level AST and returns one
    value.  The only side effect is on ``definitions``, which maps each
    :class:`Declaration` bound with ``:=`` to its unevaluated right-hand
    side and lives as long as the evaluator.

    Forms without an evaluation rule (identifiers, lambdas, calls, unary
    operators, ``==``, ``^``, a lone declaration) evaluate to ``VOID``.
    With ``strict=True`` they raise :class:`UnsupportedExpressionError`
    instead, so that "no rule yet" can be told apart from a definition's
    legitimate ``VOID``.

    Parameters
    ----------
    strict : bool, default False
        Raise on unsupported forms instead of returning ``VOID``.

    Examples
    --------
    >>> ev = Evaluator()
    >>> ev.evaluate(("add", ("num", 1.0), ("mul", ("num", 2.0), ("num", 3.0))))
    ('number', 7.0)
    >>> ev.evaluate(("define", ("decl", "x", "number"), ("num", 5.0)))
    ('void',)
    >>> ev.lookup("x", "number")
    ('num', 5.0)
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict
        self.definitions: dict[Declaration, ASTNode] = {}

    def evaluate(self, expr: ASTNode) -> Value:
        tag = expr[0] if isinstance(expr, tuple) and expr else None

        if tag == "num":
            return number_value(expr[1])
        if tag == "define" and is_declaration(expr[1]):
            return self.define(expr[1], expr[2])
        if tag in ARITHMETIC:
            return self.arithmetic(tag, expr[1], expr[2])
        return self.unsupported(expr)

    def define(self, decl: ASTNode, rhs: ASTNode) -> Value:
        _, name, ty = decl
        self.definitions[Declaration(name, ty)] = rhs
        logger.debug("bound %r :: %r", name, ty)
        return VOID

    def arithmetic(self, tag: str, lhs: ASTNode, rhs: ASTNode) -> Value:
        left = self.evaluate(lhs)
        right = self.evaluate(rhs)
        if left[0] != "number" or right[0] != "number":
            return VOID
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            result = ARITHMETIC[tag](np.float64(left[1]), np.float64(right[1]))
        return number_value(result)

    def unsupported(self, expr: ASTNode) -> Value:
        if self.strict:
            raise UnsupportedExpressionError(expr)
        logger.debug("no evaluation rule for %r, yielding void", expr)
        return VOID

    def lookup(self, name: str, ty: TypeSpec) -> Optional[ASTNode]:
        """Return the expression bound to ``name :: ty``, if any."""
        return self.definitions.get(Declaration(name, ty))
