"""Token kinds, tokens and operator precedence."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Union

TokenValue = Union[int, float, str]


class TokenKind(Enum):
    """Every kind of token the lexer produces.

    Fixed tokens carry their source text as value; kinds that carry a
    payload use a bracketed placeholder instead.
    """

    # punctuation
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    COMMA = ","
    SEMICOLON = ";"
    COLON = ":"
    DOT = "."
    ARROW = "->"
    QUESTION = "?"

    # operators
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    PERCENT = "%"
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    LESS = "<"
    LESS_EQUAL = "<="
    GREATER = ">"
    GREATER_EQUAL = ">="
    AND_AND = "&&"
    OR_OR = "||"
    AND = "&"
    OR = "|"
    CARET = "^"
    TILDE = "~"
    SHIFT_LEFT = "<<"
    SHIFT_RIGHT = ">>"
    SHIFT_LEFT_ASSIGN = "<<="
    SHIFT_RIGHT_ASSIGN = ">>="
    PLUS_ASSIGN = "+="
    MINUS_ASSIGN = "-="
    STAR_ASSIGN = "*="
    SLASH_ASSIGN = "/="
    PERCENT_ASSIGN = "%="
    AND_ASSIGN = "&="
    OR_ASSIGN = "|="
    CARET_ASSIGN = "^="

    # literals
    FLOAT = "<float>"
    INTEGER = "<integer>"
    STRING_LITERAL = "<string>"
    CHAR_LITERAL = "<char>"

    # keywords
    VAL = "val"
    VAR = "var"
    IF = "if"
    ELSE = "else"
    WHILE = "while"
    FOR = "for"
    FN = "fn"
    RETURN = "return"
    STRUCT = "struct"
    ENUM = "enum"
    MATCH = "match"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"

    IDENTIFIER = "<identifier>"

    @property
    def has_payload(self) -> bool:
        """True for kinds whose tokens carry a value."""
        return self in _PAYLOAD_KINDS

    @property
    def text(self) -> Optional[str]:
        """The exact source text of a fixed token, or None for payload kinds."""
        return None if self.has_payload else self.value

    @property
    def display_name(self) -> str:
        """CamelCase name used in diagnostics, e.g. ``LeftParen``."""
        return "".join(part.capitalize() for part in self.name.split("_"))


_PAYLOAD_KINDS = frozenset(
    {
        TokenKind.FLOAT,
        TokenKind.INTEGER,
        TokenKind.STRING_LITERAL,
        TokenKind.CHAR_LITERAL,
        TokenKind.IDENTIFIER,
    }
)


class Precedence(IntEnum):
    """Binding power of operators, from weakest to strongest."""

    LOWEST = 0
    ASSIGNMENT = 1
    TERNARY = 2
    OR = 3
    AND = 4
    EQUALITY = 5
    COMPARISON = 6
    TERM = 7
    FACTOR = 8
    PREFIX = 9
    CALL = 10
    PRIMARY = 11


_PRECEDENCE = {
    TokenKind.EQUAL: Precedence.EQUALITY,
    TokenKind.EQUAL_EQUAL: Precedence.EQUALITY,
    TokenKind.BANG_EQUAL: Precedence.EQUALITY,
    TokenKind.LESS: Precedence.COMPARISON,
    TokenKind.LESS_EQUAL: Precedence.COMPARISON,
    TokenKind.GREATER: Precedence.COMPARISON,
    TokenKind.GREATER_EQUAL: Precedence.COMPARISON,
    TokenKind.PLUS: Precedence.TERM,
    TokenKind.MINUS: Precedence.TERM,
    TokenKind.STAR: Precedence.FACTOR,
    TokenKind.SLASH: Precedence.FACTOR,
    TokenKind.PERCENT: Precedence.FACTOR,
    TokenKind.AND_AND: Precedence.AND,
    TokenKind.OR_OR: Precedence.OR,
    TokenKind.QUESTION: Precedence.TERNARY,
}


@dataclass(frozen=True)
class Token:
    """A lexed token: its kind and, for literals and identifiers, its value."""

    kind: TokenKind
    value: Optional[TokenValue] = None

    def precedence(self) -> Precedence:
        """Binding power of this token when it appears as an infix operator."""
        return _PRECEDENCE.get(self.kind, Precedence.LOWEST)

    def __str__(self) -> str:
        name = self.kind.display_name
        if self.kind.has_payload:
            return f"{name}({self.value!r})"
        return name