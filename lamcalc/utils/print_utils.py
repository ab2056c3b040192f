from __future__ import annotations

from typing import Any

from lamcalc.utils.ast_utils import ASTNode, TypeSpec, BINARY_TAGS, OP_SYMBOLS, UNARY_TAGS


def type_to_str(t: TypeSpec) -> str:
    """Convert a type spec to the annotation syntax that produces it.

    Parameters
    ----------
    t : TypeSpec
        ``"number"``, ``"void"``, ``("vector", w)``, ``("matrix", w, h)``
        or ``("func_type", param, result)``.

    Returns
    -------
    str
        e.g. ``"number"``, ``"[3]"``, ``"[2, 3]"``, ``"number -> [3]"``.
        A function type in parameter position is parenthesised.

    Examples
    --------
    >>> from lamcalc.utils.print_utils import type_to_str
    >>> type_to_str(("func_type", "number", ("func_type", "number", "number")))
    'number -> number -> number'
    >>> type_to_str(("matrix", 2, 3))
    '[2, 3]'
    """
    if isinstance(t, str):
        return t
    if isinstance(t, tuple):
        if t[0] == "vector":
            return f"[{t[1]}]"
        if t[0] == "matrix":
            return f"[{t[1]}, {t[2]}]"
        if t[0] == "func_type":
            param = type_to_str(t[1])
            if isinstance(t[1], tuple) and t[1][0] == "func_type":
                param = f"({param})"
            return f"{param} -> {type_to_str(t[2])}"
    return str(t)


def _format_number(n: float) -> str:
    return repr(float(n))


def expr_to_str(node: ASTNode) -> str:
    """Render an AST back to source-like text, parenthesising every
    compound sub-expression so the tree shape is visible.

    Examples
    --------
    >>> from lamcalc.utils.print_utils import expr_to_str
    >>> expr_to_str(("add", ("num", 1.0), ("mul", ("num", 2.0), ("num", 3.0))))
    '1.0 + (2.0 * 3.0)'
    >>> expr_to_str(("define", ("decl", "x", "number"), ("num", 5.0)))
    'x :: number := 5.0'
    """
    def sub(child: ASTNode) -> str:
        text = expr_to_str(child)
        if isinstance(child, tuple) and child[0] in BINARY_TAGS | {"lambda", "call"}:
            return f"({text})"
        return text

    if not isinstance(node, tuple) or not node:
        return str(node)

    tag = node[0]
    if tag == "num":
        return _format_number(node[1])
    if tag == "var":
        return node[1]
    if tag == "decl":
        return f"{node[1]} :: {type_to_str(node[2])}"
    if tag == "lambda":
        param = node[1] if node[1] is not None else ""
        return f"λ{param}. {expr_to_str(node[2])}"
    if tag == "call":
        return f"{node[1]} {sub(node[2])}"
    if tag == "define":
        return f"{expr_to_str(node[1])} := {expr_to_str(node[2])}"
    if tag in BINARY_TAGS:
        return f"{sub(node[1])} {OP_SYMBOLS[tag]} {sub(node[2])}"
    if tag in UNARY_TAGS:
        return f"{OP_SYMBOLS[tag]}{sub(node[1])}"
    return repr(node)


def value_to_str(value: tuple[Any, ...]) -> str:
    """Format a runtime value for display.

    Examples
    --------
    >>> from lamcalc.utils.print_utils import value_to_str
    >>> value_to_str(("number", 7.0))
    '7.0'
    >>> value_to_str(("vector", (("number", 1.0), ("number", 2.0))))
    '[1.0, 2.0]'
    >>> value_to_str(("void",))
    'void'
    """
    tag = value[0]
    if tag == "number":
        return _format_number(value[1])
    if tag in ("vector", "matrix"):
        return "[" + ", ".join(value_to_str(v) for v in value[1]) + "]"
    return tag


def print_line_result(ast: ASTNode, value: tuple[Any, ...]) -> None:
    """Print the parsed tree and the value of one evaluated line.

    Examples
    --------
    >>> from lamcalc.utils.print_utils import print_line_result
    >>> print_line_result(("add", ("num", 1.0), ("num", 2.0)), ("number", 3.0))
    ast -> 1.0 + 2.0
    -> 3.0
    """
    print(f"ast -> {expr_to_str(ast)}")
    print(f"-> {value_to_str(value)}")


def print_error(error: Exception) -> None:
    """Print a lexical, parse or evaluation error for one line.

    Examples
    --------
    >>> from lamcalc.errors import ParseError
    >>> from lamcalc.utils.print_utils import print_error
    >>> print_error(ParseError("EOF"))
      ✗ ParseError: EOF
    """
    print(f"  ✗ {type(error).__name__}: {error}")
