from __future__ import annotations

import argparse
import cmd
import logging
import sys
from typing import NamedTuple, Optional, Sequence, Union

from lamcalc.errors import LamcalcError, ParseError
from lamcalc.lexer import Token, tokenize
from lamcalc.parser import Parser
from lamcalc.runtime import VOID, Evaluator, Value
from lamcalc.utils.ast_utils import ASTNode
from lamcalc.utils.print_utils import print_error, print_line_result

logger = logging.getLogger(__name__)


class LineResult(NamedTuple):
    """Outcome of running one line: the tree and value, or the error that
    stopped it (``ast`` and ``value`` are ``None`` then)."""

    ast: Optional[ASTNode]
    value: Optional[Value]
    error: Optional[LamcalcError] = None


class Session:
    """One parser and one evaluator, each with its own definition table.

    The two tables are deliberately separate: the parser's records names so
    later lines can use call syntax, the evaluator's records typed
    declarations for lookup.  Neither is ever cleared.

    Examples
    --------
    >>> sess = Session()
    >>> sess.run_line("1 + 2 * 3").value
    ('number', 7.0)
    >>> sess.run_line("x :: number := 5").value
    ('void',)
    >>> sess.run_line("x").value
    ('void',)
    """

    def __init__(self, strict: bool = False) -> None:
        self.parser = Parser()
        self.evaluator = Evaluator(strict=strict)

    def parse_and_evaluate(self, tokens: Sequence[Token]) -> tuple[Union[ASTNode, ParseError], Value]:
        """Parse one top-level expression and evaluate it.

        A parse error is returned in place of the tree, together with
        ``VOID``; the evaluator is not called for that line.
        """
        try:
            ast = self.parser.parse(tokens)
        except ParseError as e:
            logger.debug("parse failed: %s", e)
            return e, VOID
        return ast, self.evaluator.evaluate(ast)

    def run_line(self, line: str) -> LineResult:
        """Tokenize, parse and evaluate a single line of input."""
        try:
            ast, value = self.parse_and_evaluate(tokenize(line))
        except LamcalcError as e:
            return LineResult(None, None, e)
        if isinstance(ast, ParseError):
            return LineResult(None, None, ast)
        return LineResult(ast, value)


_default_session = Session()


def parse_and_evaluate(tokens: Sequence[Token]) -> tuple[Union[ASTNode, ParseError], Value]:
    """Parse and evaluate *tokens* against the process-wide session."""
    return _default_session.parse_and_evaluate(tokens)


def report(result: LineResult) -> None:
    if result.error is not None:
        print_error(result.error)
    else:
        print_line_result(result.ast, result.value)


# ======================================================
# CLI
# ======================================================

class Shell(cmd.Cmd):
    """Interactive read-evaluate-print loop."""
    intro = "lamcalc :: type 'quit' to leave"
    prompt = ">> "

    def __init__(self, session: Session, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.session = session

    def default(self, line):
        """Runs one line of input."""
        report(self.session.run_line(line))

    def emptyline(self):
        """Do not repeat previous line on empty input."""
        return False

    def do_quit(self, arg):
        """Exits the shell."""
        return True

    do_exit = do_quit

    def do_EOF(self, arg):
        """Exits the shell."""
        print()
        return True


def run_file(path: str, session: Session) -> int:
    """Run every non-empty line of *path* in order.

    Returns 1 if any line failed, 0 otherwise.
    """
    status = 0
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            if not line.strip():
                continue
            result = session.run_line(line)
            if result.error is not None:
                logger.debug("line %d failed", lineno)
                status = 1
            report(result)
    return status


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="lamcalc")
    parser.add_argument("file", help="file of lines to run (if empty, starts the interactive shell)", nargs="?")
    parser.add_argument("--strict", action="store_true",
                        help="report expressions with no evaluation rule as errors instead of void")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    session = Session(strict=args.strict)
    if args.file is not None:
        return run_file(args.file, session)

    Shell(session).cmdloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
