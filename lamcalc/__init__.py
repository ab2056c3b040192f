from lamcalc.errors import LamcalcError, LexError, ParseError, UnsupportedExpressionError
from lamcalc.lexer import Token, tokenize
from lamcalc.parser import Parser
from lamcalc.runtime import VOID, Declaration, Evaluator
from lamcalc.execute import LineResult, Session, parse_and_evaluate

__version__ = "0.1.0"
