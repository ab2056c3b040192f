from __future__ import annotations

from typing import Any, Optional


UNEXPECTED_TOKEN = "UnexpectedToken"
EOF = "EOF"


class LamcalcError(Exception):
    """Base class for all lamcalc errors."""


class LexError(LamcalcError):
    """Raised when a line contains a character the tokenizer cannot use.

    Covers both characters outside the alphabet and a ``-``, ``:`` or ``=``
    left dangling at the end of the line.
    """

    def __init__(self, message: str, character: str, position: int) -> None:
        super().__init__(message)
        self.character = character
        self.position = position


class ParseError(LamcalcError):
    """Raised when the token stream does not match the grammar.

    ``kind`` is ``"UnexpectedToken"`` or ``"EOF"``; ``token`` is the token
    under the cursor when the production failed (``None`` at end of input).
    """

    def __init__(self, kind: str, token: Optional[Any] = None) -> None:
        if token is None:
            message = kind
        else:
            message = f"{kind} at {token.value!r}"
        super().__init__(message)
        self.kind = kind
        self.token = token


class UnsupportedExpressionError(LamcalcError):
    """Raised by a strict evaluator for a form that has no evaluation rule."""

    def __init__(self, expr: Any) -> None:
        tag = expr[0] if isinstance(expr, tuple) and expr else expr
        super().__init__(f"Cannot evaluate '{tag}' expressions yet")
        self.expr = expr
