import pytest

from lamcalc.errors import EOF, UNEXPECTED_TOKEN, ParseError
from lamcalc.lexer import tokenize
from lamcalc.parser import Parser


def annotation(text: str):
    """Helper function that parses ``x :: <text>`` and returns the type."""
    tree = Parser().parse(tokenize(f"x :: {text}"))
    assert tree[0] == "decl"
    return tree[2]


@pytest.mark.parametrize("text, expected", [
    ("number", "number"),
    ("[3]", ("vector", 3)),
    ("[2, 3]", ("matrix", 2, 3)),
    ("[2,3]", ("matrix", 2, 3)),
    ("number -> number", ("func_type", "number", "number")),
    ("[3] -> [2, 2]", ("func_type", ("vector", 3), ("matrix", 2, 2))),
    ("number -> number -> number",
     ("func_type", "number", ("func_type", "number", "number"))),
    ("[2, 3] -> number -> [4]",
     ("func_type", ("matrix", 2, 3), ("func_type", "number", ("vector", 4)))),
])
def test_type_forms(text, expected):
    assert annotation(text) == expected


def test_dimensions_are_integers():
    ty = annotation("[2, 3]")
    assert isinstance(ty[1], int) and isinstance(ty[2], int)


def test_types_are_hashable_and_structural():
    a = annotation("number -> [3]")
    b = annotation("number -> [3]")
    assert a == b
    assert {a: "f"}[b] == "f"
    assert annotation("[3]") != annotation("[3, 1]")


def test_type_parse_consumes_the_annotation():
    tree = Parser().parse(tokenize("f :: [2] -> number := 1"))
    assert tree == ("define", ("decl", "f", ("func_type", ("vector", 2), "number")), ("num", 1.0))


@pytest.mark.parametrize("text, bad_type", [
    ("string", "ID"),
    ("Number", "ID"),
    ("3", "NUMBER"),
    ("(number)", "LPAREN"),
    ("[3 4]", "NUMBER"),
    ("[a]", "ID"),
    ("[3.5]", "DOT"),
    ("[2, 3, 4]", "COMMA"),
    ("number -> foo", "ID"),
])
def test_unexpected_token(text, bad_type):
    with pytest.raises(ParseError) as exc_info:
        annotation(text)
    assert exc_info.value.kind == UNEXPECTED_TOKEN
    assert exc_info.value.token.type == bad_type


@pytest.mark.parametrize("text", ["", "[", "[3", "[3,", "[3, 4", "number ->"])
def test_running_out_of_tokens(text):
    with pytest.raises(ParseError) as exc_info:
        annotation(text + " ")
    assert exc_info.value.kind == EOF
