from __future__ import annotations

import logging
from typing import Any, NamedTuple

import ply.lex as lex

from lamcalc.errors import LexError

logger = logging.getLogger(__name__)


tokens = (
    "ID", "NUMBER",
    "LAMBDA",
    "DOT", "COMMA", "SEMICOLON",
    "LBRACKET", "RBRACKET",
    "LPAREN", "RPAREN",
    "DEFINE", "DEFINE_TYPE", "EQEQ",
    "PLUS", "MINUS", "TIMES", "DIVIDE", "POWER",
    "ARROW",
)


class Token(NamedTuple):
    """One lexical unit.  ``value`` is the name, the number, or the fixed
    spelling of a symbol.  Tokens carry no source position."""

    type: str
    value: Any


t_DOT       = r"\."
t_COMMA     = r","
t_SEMICOLON = r";"
t_LPAREN    = r"\("
t_RPAREN    = r"\)"
t_LBRACKET  = r"\["
t_RBRACKET  = r"\]"
t_PLUS      = r"\+"
t_MINUS     = r"-"
t_TIMES     = r"\*"
t_DIVIDE    = r"/"
t_POWER     = r"\^"

t_ignore = " \t\r\n"

# Function rules are tried in definition order, before the string rules above.

def t_INCOMPLETE(t):
    r"[-:=]\Z"
    raise LexError(f"Incomplete token '{t.value}' at end of input", t.value, t.lexpos)

def t_ARROW(t):
    r"->"
    return t

def t_DEFINE_TYPE(t):
    r"::"
    return t

def t_DEFINE(t):
    r":="
    return t

def t_EQEQ(t):
    r"=="
    return t

def t_STRAY(t):
    r"[:=]"
    pass  # a lone ':' or '=' mid-line is dropped

def t_LAMBDA(t):
    r"λ"
    return t

def t_NUMBER(t):
    r"[0-9]+"
    t.value = float(t.value)
    return t

def t_ID(t):
    r"[^\W\d_]+"
    # \w also admits non-decimal numerics such as superscripts
    for i, ch in enumerate(t.value):
        if not ch.isalpha():
            pos = t.lexpos + i
            raise LexError(f"Illegal character '{ch}' at column {pos}", ch, pos)
    return t

def t_error(t):
    raise LexError(f"Illegal character '{t.value[0]}' at column {t.lexpos}", t.value[0], t.lexpos)

_raw_lexer = lex.lex()


def tokenize(line: str) -> list[Token]:
    """Convert one line of text into its sequence of tokens.

    Whitespace is discarded and no token keeps its source position.  A
    decimal point is not part of a number: ``3.14`` is three tokens.

    Parameters
    ----------
    line : str
        The raw input line.

    Returns
    -------
    list[Token]
        Tokens in source order.

    Raises
    ------
    LexError
        If the line contains a character outside the alphabet, or ends in a
        ``-``, ``:`` or ``=`` that starts a symbol it never finishes.

    Examples
    --------
    >>> tokenize("x := 1 + 2")
    [Token(type='ID', value='x'), Token(type='DEFINE', value=':='), Token(type='NUMBER', value=1.0), Token(type='PLUS', value='+'), Token(type='NUMBER', value=2.0)]
    >>> tokenize("3.14")
    [Token(type='NUMBER', value=3.0), Token(type='DOT', value='.'), Token(type='NUMBER', value=14.0)]
    """
    lexer = _raw_lexer.clone()
    lexer.input(line)
    result = [Token(tok.type, tok.value) for tok in lexer]
    logger.debug("tokenized %r into %d token(s)", line, len(result))
    return result
