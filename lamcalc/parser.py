from __future__ import annotations

import logging
from typing import Optional, Sequence

from lamcalc.errors import EOF, UNEXPECTED_TOKEN, ParseError
from lamcalc.lexer import Token
from lamcalc.utils.ast_utils import (ASTNode
                                     , TypeSpec
                                     , BINARY_OPS
                                     , UNARY_OPS
                                     , func_type
                                     , is_declaration
                                     , matrix_type
                                     , resolve_type_name
                                     , vector_type)

logger = logging.getLogger(__name__)


class Parser:
    """Recursive-descent parser producing one tagged-tuple AST per line.

    Precedence, loosest to tightest::

        definition -> declaration -> term -> factor -> unary -> primary

    ``lambda_expr`` sits between ``definition`` and ``term`` but is only
    entered for the right-hand side of ``:=``.

    The parser keeps its own ``symbol_table`` (name -> right-hand side) for
    the lifetime of the instance.  Every parsed ``name :: T := expr`` is
    recorded there, and an identifier found in it is parsed as a call that
    takes the following primary as its argument.

    Examples
    --------
    >>> from lamcalc.lexer import tokenize
    >>> p = Parser()
    >>> p.parse(tokenize("1 + 2 * 3"))
    ('add', ('num', 1.0), ('mul', ('num', 2.0), ('num', 3.0)))
    >>> p.parse(tokenize("f :: number -> number := λx. x + 1"))
    ('define', ('decl', 'f', ('func_type', 'number', 'number')), ('lambda', 'x', ('add', ('var', 'x'), ('num', 1.0))))
    >>> p.parse(tokenize("f 2"))
    ('call', 'f', ('num', 2.0))
    """

    def __init__(self) -> None:
        self.tokens: list[Token] = []
        self.current = 0
        self.symbol_table: dict[str, ASTNode] = {}

    def parse(self, tokens: Sequence[Token]) -> ASTNode:
        """Parse a full line of tokens, starting at ``definition``.

        Raises
        ------
        ParseError
            On the first production that fails; no partial tree is returned.
        """
        self.tokens = list(tokens)
        self.current = 0
        result = self.definition()
        if self.current < len(self.tokens):
            logger.debug("ignoring %d trailing token(s) from %r",
                         len(self.tokens) - self.current, self.tokens[self.current].value)
        return result

    # Cursor helpers

    def peek(self) -> Optional[Token]:
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return None

    def next(self) -> Token:
        tok = self.peek()
        if tok is None:
            raise ParseError(EOF)
        self.current += 1
        return tok

    def match(self, *types: str) -> Optional[Token]:
        """Consume and return the current token if its type is one of
        *types*; otherwise leave the cursor alone and return ``None``."""
        tok = self.peek()
        if tok is not None and tok.type in types:
            self.current += 1
            return tok
        return None

    def expect(self, type_: str) -> Token:
        tok = self.peek()
        if tok is None:
            raise ParseError(EOF)
        if tok.type != type_:
            raise ParseError(UNEXPECTED_TOKEN, tok)
        self.current += 1
        return tok

    def unexpected(self) -> ParseError:
        tok = self.peek()
        if tok is None:
            return ParseError(EOF)
        return ParseError(UNEXPECTED_TOKEN, tok)

    # Productions

    def definition(self) -> ASTNode:
        res = self.declaration()
        if is_declaration(res) and self.match("DEFINE"):
            name = res[1]
            rhs = self.lambda_expr()
            self.symbol_table[name] = rhs
            logger.debug("recorded definition of %r", name)
            res = (BINARY_OPS["DEFINE"], res, rhs)
        return res

    def declaration(self) -> ASTNode:
        res = self.term()
        if isinstance(res, tuple) and res[0] == "var" and self.match("DEFINE_TYPE"):
            res = ("decl", res[1], self.type_spec())
        return res

    def type_spec(self) -> TypeSpec:
        """Parse a type annotation.

        ``number``, ``[N]`` and ``[N, M]`` are the base forms; any of them
        followed by ``->`` is the parameter of a function type whose result
        is parsed recursively, so arrows associate to the right.
        """
        tok = self.peek()
        if tok is not None and tok.type == "ID":
            ty = resolve_type_name(tok.value)
            if ty is None:
                raise ParseError(UNEXPECTED_TOKEN, tok)
            self.current += 1
        elif self.match("LBRACKET"):
            width = int(self.expect("NUMBER").value)
            if self.match("COMMA"):
                height = int(self.expect("NUMBER").value)
                self.expect("RBRACKET")
                ty = matrix_type(width, height)
            else:
                self.expect("RBRACKET")
                ty = vector_type(width)
        else:
            raise self.unexpected()

        if self.match("ARROW"):
            return func_type(ty, self.type_spec())
        return ty

    def lambda_expr(self) -> ASTNode:
        if not self.match("LAMBDA"):
            return self.term()

        param = self.match("ID")
        if param is not None:
            self.expect("DOT")
            return ("lambda", param.value, self.term())
        if self.match("DOT"):
            return ("lambda", None, self.term())
        raise self.unexpected()

    def term(self) -> ASTNode:
        res = self.factor()
        op = self.match("PLUS", "MINUS")
        while op is not None:
            res = (BINARY_OPS[op.type], res, self.factor())
            op = self.match("PLUS", "MINUS")
        return res

    def factor(self) -> ASTNode:
        res = self.unary()
        op = self.match("TIMES", "DIVIDE")
        while op is not None:
            res = (BINARY_OPS[op.type], res, self.unary())
            op = self.match("TIMES", "DIVIDE")
        return res

    def unary(self) -> ASTNode:
        # Binds a single primary: -2 * 3 is (-2) * 3.
        op = self.match("PLUS", "MINUS")
        if op is not None:
            return (UNARY_OPS[op.type], self.primary())
        return self.primary()

    def primary(self) -> ASTNode:
        tok = self.next()
        if tok.type == "NUMBER":
            return ("num", tok.value)

        if tok.type == "ID":
            name = tok.value
            if name in self.symbol_table:
                start = self.current
                try:
                    return ("call", name, self.primary())
                except ParseError:
                    self.current = start
            return ("var", name)

        self.current -= 1
        raise ParseError(UNEXPECTED_TOKEN, tok)
