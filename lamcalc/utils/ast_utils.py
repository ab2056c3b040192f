from __future__ import annotations

from typing import Any, Iterator, Literal, Optional, Union


# AST TYPE DEFINITIONS
# The parser produces a tree of tagged tuples.  Every non-leaf node is a
# tuple whose first element is a string (tag) and whose remaining elements are
# other nodes or scalar leaves.  Nodes never share children.

ExprTag = Literal[
    "num", "var",                                    # literals / references
    "decl",                                          # x :: T
    "lambda",                                        # λx. body
    "call",                                          # f arg
    "add", "sub", "mul", "div", "pow", "eq",         # binary arithmetic / comparison
    "define",                                        # decl := expr
    "pos", "neg",                                    # unary arithmetic
]

TypeTag = Literal[
    "func_type",   # T -> U                -> (tag, param_type, result_type)
    "vector",      # [3]                   -> (tag, width)
    "matrix",      # [2, 3]                -> (tag, width, height)
]

ASTNode = Union[
        tuple[Any, ...],     # tagged nodes: ("add", left, right), ("num", 1.0), ...
        str,                 # identifiers, primitive type names
        int,                 # vector / matrix dimensions
        float,               # numeric literal values
        None,                # lambda without a parameter
    ]

TypeSpec = Union[str, tuple[Any, ...]]


# Primitive types
NUMBER_TYPE = "number"
VOID_TYPE = "void"

# Closed table of type names usable in annotations
TYPE_NAMES: dict[str, TypeSpec] = {
    "number": NUMBER_TYPE,
}

# Token type -> binary node tag
BINARY_OPS: dict[str, str] = {
    "PLUS": "add",
    "MINUS": "sub",
    "TIMES": "mul",
    "DIVIDE": "div",
    "POWER": "pow",
    "EQEQ": "eq",
    "DEFINE": "define",
}

# Token type -> unary node tag
UNARY_OPS: dict[str, str] = {
    "PLUS": "pos",
    "MINUS": "neg",
}

BINARY_TAGS = frozenset(BINARY_OPS.values())
UNARY_TAGS = frozenset(UNARY_OPS.values())

# Operator spelling for each binary / unary tag
OP_SYMBOLS: dict[str, str] = {
    "add": "+", "sub": "-", "mul": "*", "div": "/",
    "pow": "^", "eq": "==", "define": ":=",
    "pos": "+", "neg": "-",
}


def resolve_type_name(name: str) -> Optional[TypeSpec]:
    """Look up a primitive type by the name used in an annotation.

    Returns ``None`` for names outside the closed table.

    Examples
    --------
    >>> resolve_type_name("number")
    'number'
    >>> resolve_type_name("string") is None
    True
    """
    return TYPE_NAMES.get(name)


def func_type(param: TypeSpec, result: TypeSpec) -> tuple[str, TypeSpec, TypeSpec]:
    return ("func_type", param, result)


def vector_type(width: int) -> tuple[str, int]:
    return ("vector", width)


def matrix_type(width: int, height: int) -> tuple[str, int, int]:
    return ("matrix", width, height)


def is_declaration(node: ASTNode) -> bool:
    return isinstance(node, tuple) and len(node) == 3 and node[0] == "decl"


def children(node: ASTNode) -> list[ASTNode]:
    """Return the sub-expressions of an AST node, left to right.

    Type annotations, names and literal payloads are leaves and are not
    returned.

    Examples
    --------
    >>> children(("add", ("num", 1.0), ("neg", ("num", 2.0))))
    [('num', 1.0), ('neg', ('num', 2.0))]
    >>> children(("call", "f", ("var", "x")))
    [('var', 'x')]
    """
    if not isinstance(node, tuple) or not node:
        return []
    tag = node[0]
    if tag in BINARY_TAGS:
        return [node[1], node[2]]
    if tag in UNARY_TAGS:
        return [node[1]]
    if tag in ("lambda", "call"):
        return [node[2]]
    return []


def walk(node: ASTNode) -> Iterator[ASTNode]:
    """Yield *node* and every sub-expression below it in pre-order."""
    yield node
    for child in children(node):
        yield from walk(child)
