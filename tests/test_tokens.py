import pytest

from mdsl.tokens import Precedence, Token, TokenKind


@pytest.mark.parametrize(
    "kind, expected",
    [
        (TokenKind.EQUAL, Precedence.EQUALITY),
        (TokenKind.EQUAL_EQUAL, Precedence.EQUALITY),
        (TokenKind.BANG_EQUAL, Precedence.EQUALITY),
        (TokenKind.LESS, Precedence.COMPARISON),
        (TokenKind.LESS_EQUAL, Precedence.COMPARISON),
        (TokenKind.GREATER, Precedence.COMPARISON),
        (TokenKind.GREATER_EQUAL, Precedence.COMPARISON),
        (TokenKind.PLUS, Precedence.TERM),
        (TokenKind.MINUS, Precedence.TERM),
        (TokenKind.STAR, Precedence.FACTOR),
        (TokenKind.SLASH, Precedence.FACTOR),
        (TokenKind.PERCENT, Precedence.FACTOR),
        (TokenKind.AND_AND, Precedence.AND),
        (TokenKind.OR_OR, Precedence.OR),
        (TokenKind.QUESTION, Precedence.TERNARY),
    ],
)
def test_operator_precedence(kind, expected):
    assert Token(kind).precedence() == expected


@pytest.mark.parametrize(
    "token",
    [
        Token(TokenKind.SEMICOLON),
        Token(TokenKind.BANG),
        Token(TokenKind.NULL),
        Token(TokenKind.IDENTIFIER, "x"),
        Token(TokenKind.INTEGER, 1),
        Token(TokenKind.PLUS_ASSIGN),
    ],
)
def test_other_tokens_have_lowest_precedence(token):
    assert token.precedence() == Precedence.LOWEST


def test_precedence_ordering():
    lowest = Token(TokenKind.SEMICOLON).precedence()
    ternary = Token(TokenKind.QUESTION).precedence()
    or_ = Token(TokenKind.OR_OR).precedence()
    and_ = Token(TokenKind.AND_AND).precedence()
    equality = Token(TokenKind.EQUAL_EQUAL).precedence()
    comparison = Token(TokenKind.LESS).precedence()
    term = Token(TokenKind.PLUS).precedence()
    factor = Token(TokenKind.STAR).precedence()
    assert lowest < ternary < or_ < and_ < equality < comparison < term < factor
    assert factor < Precedence.PREFIX < Precedence.PRIMARY


def test_precedence_values_fixed_by_source():
    assert Token(TokenKind.SEMICOLON).precedence() == 0
    assert Token(TokenKind.QUESTION).precedence() == 2
    assert Token(TokenKind.OR_OR).precedence() == 3
    assert Token(TokenKind.AND_AND).precedence() == 4
    assert Token(TokenKind.EQUAL).precedence() == 5
    assert Token(TokenKind.GREATER_EQUAL).precedence() == 6
    assert Token(TokenKind.MINUS).precedence() == 7
    assert Token(TokenKind.PERCENT).precedence() == 8


def test_token_equality_includes_value():
    assert Token(TokenKind.IDENTIFIER, "foo") == Token(TokenKind.IDENTIFIER, "foo")
    assert Token(TokenKind.IDENTIFIER, "foo") != Token(TokenKind.IDENTIFIER, "bar")
    assert Token(TokenKind.INTEGER, 1) != Token(TokenKind.FLOAT, 1.0)


@pytest.mark.parametrize(
    "kind, value",
    [
        (TokenKind.FLOAT, 8.43),
        (TokenKind.INTEGER, 123),
        (TokenKind.STRING_LITERAL, "hello"),
        (TokenKind.CHAR_LITERAL, "c"),
        (TokenKind.IDENTIFIER, "foo"),
    ],
)
def test_payload_tokens_have_no_text_and_lowest_precedence(kind, value):
    token = Token(kind, value)
    assert kind.has_payload
    assert kind.text is None
    assert token.precedence() == Precedence.LOWEST


def test_payload_kinds_are_exactly_the_literals():
    payload = {kind for kind in TokenKind if kind.has_payload}
    assert payload == {
        TokenKind.FLOAT,
        TokenKind.INTEGER,
        TokenKind.STRING_LITERAL,
        TokenKind.CHAR_LITERAL,
        TokenKind.IDENTIFIER,
    }
    assert all(Token(kind, "v").precedence() == Precedence.LOWEST for kind in payload)


@pytest.mark.parametrize(
    "kind, text, name",
    [
        (TokenKind.SHIFT_LEFT_ASSIGN, "<<=", "ShiftLeftAssign"),
        (TokenKind.ARROW, "->", "Arrow"),
        (TokenKind.RETURN, "return", "Return"),
    ],
)
def test_fixed_token_text(kind, text, name):
    assert kind.text == text
    assert str(Token(kind)) == name


def test_display_and_str():
    assert TokenKind.LEFT_PAREN.display_name == "LeftParen"
    assert str(Token(TokenKind.SEMICOLON)) == "Semicolon"
    assert str(Token(TokenKind.INTEGER, 42)) == "Integer(42)"