import pytest

from lamcalc.errors import LexError
from lamcalc.lexer import Token, tokenize


def types_of(line: str) -> list[str]:
    """Helper function that returns only the token types of a line."""
    return [tok.type for tok in tokenize(line)]


class TestNumbers:
    @pytest.mark.parametrize("text, expected", [
        ("0", 0.0),
        ("7", 7.0),
        ("42", 42.0),
        ("123456789", 123456789.0),
    ])
    def test_digit_run_is_one_number(self, text, expected):
        """A run of digits is a single NUMBER token holding a float."""
        result = tokenize(text)
        assert result == [Token("NUMBER", expected)]
        assert isinstance(result[0].value, float)

    def test_decimal_point_is_not_part_of_number(self):
        """3.14 splits into NUMBER, DOT, NUMBER."""
        assert tokenize("3.14") == [
            Token("NUMBER", 3.0),
            Token("DOT", "."),
            Token("NUMBER", 14.0),
        ]


class TestSymbols:
    def test_definition_line(self):
        assert tokenize("x := 1 + 2") == [
            Token("ID", "x"),
            Token("DEFINE", ":="),
            Token("NUMBER", 1.0),
            Token("PLUS", "+"),
            Token("NUMBER", 2.0),
        ]

    def test_type_annotation(self):
        assert tokenize("f :: number -> number") == [
            Token("ID", "f"),
            Token("DEFINE_TYPE", "::"),
            Token("ID", "number"),
            Token("ARROW", "->"),
            Token("ID", "number"),
        ]

    @pytest.mark.parametrize("text, expected", [
        (".", "DOT"),
        (",", "COMMA"),
        (";", "SEMICOLON"),
        ("(", "LPAREN"),
        (")", "RPAREN"),
        ("[", "LBRACKET"),
        ("]", "RBRACKET"),
        ("+", "PLUS"),
        ("*", "TIMES"),
        ("/", "DIVIDE"),
        ("^", "POWER"),
        ("λ", "LAMBDA"),
    ])
    def test_single_character_symbols(self, text, expected):
        assert types_of(text) == [expected]

    def test_minus_versus_arrow(self):
        assert types_of("a - b") == ["ID", "MINUS", "ID"]
        assert types_of("a -> b") == ["ID", "ARROW", "ID"]
        assert types_of("a->b") == ["ID", "ARROW", "ID"]

    def test_equal_equal(self):
        assert tokenize("a == b")[1] == Token("EQEQ", "==")

    @pytest.mark.parametrize("line", ["a : b", "a:b", "a = b", "a=b"])
    def test_lone_colon_or_equals_is_dropped(self, line):
        assert tokenize(line) == [Token("ID", "a"), Token("ID", "b")]

    @pytest.mark.parametrize("line, expected", [
        ("a ::: b", ["ID", "DEFINE_TYPE", "ID"]),
        ("x ::= 1", ["ID", "DEFINE_TYPE", "NUMBER"]),
        ("a ==== b", ["ID", "EQEQ", "EQEQ", "ID"]),
        ("a :=: b", ["ID", "DEFINE", "ID"]),
    ])
    def test_pair_consumes_both_characters(self, line, expected):
        assert types_of(line) == expected

    def test_lambda(self):
        assert tokenize("λx. x") == [
            Token("LAMBDA", "λ"),
            Token("ID", "x"),
            Token("DOT", "."),
            Token("ID", "x"),
        ]

    def test_whitespace_and_newlines_are_discarded(self):
        assert types_of(" 1\n+\t2 \r\n") == ["NUMBER", "PLUS", "NUMBER"]

    def test_empty_line(self):
        assert tokenize("") == []
        assert tokenize("   ") == []


class TestIdentifiers:
    def test_case_sensitive(self):
        assert tokenize("Foo foo") == [Token("ID", "Foo"), Token("ID", "foo")]

    def test_digits_end_identifier(self):
        assert tokenize("abc123") == [Token("ID", "abc"), Token("NUMBER", 123.0)]

    def test_unicode_letters(self):
        assert tokenize("αβ") == [Token("ID", "αβ")]

    def test_lambda_glyph_inside_identifier(self):
        assert tokenize("xλ") == [Token("ID", "xλ")]

    def test_underscore_is_rejected(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("a_b")
        assert exc_info.value.character == "_"
        assert exc_info.value.position == 1

    @pytest.mark.parametrize("word", ["let", "true", "false", "letter"])
    def test_keyword_like_words_are_identifiers(self, word):
        assert tokenize(word) == [Token("ID", word)]

    @pytest.mark.parametrize("text, character, position", [
        ("x²", "²", 1),
        ("a½b", "½", 1),
        ("²", "²", 0),
    ])
    def test_non_letter_word_characters_are_rejected(self, text, character, position):
        with pytest.raises(LexError) as exc_info:
            tokenize(text)
        assert exc_info.value.character == character
        assert exc_info.value.position == position


class TestLexErrors:
    @pytest.mark.parametrize("line", ["5 -", "x :", "x =", "-", ":", "=", "a::b -"])
    def test_trailing_incomplete_symbol(self, line):
        """A dangling -, : or = at end of input is an error, not a crash."""
        with pytest.raises(LexError) as exc_info:
            tokenize(line)
        assert exc_info.value.character == line[-1]
        assert exc_info.value.position == len(line) - 1

    def test_trailing_symbol_followed_by_space_is_fine(self):
        assert types_of("5 - ") == ["NUMBER", "MINUS"]

    @pytest.mark.parametrize("line", ["1 # 2", "a @ b", "$", "x!", "a > b"])
    def test_illegal_character(self, line):
        with pytest.raises(LexError):
            tokenize(line)


def test_tokens_are_immutable():
    tok = tokenize("x")[0]
    with pytest.raises(AttributeError):
        tok.type = "NUMBER"
