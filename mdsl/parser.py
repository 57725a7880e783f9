"""Pratt parser that builds statements and expressions from tokens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from mdsl.tokens import Precedence, Token, TokenKind

LiteralValue = Union[int, float, str, bool, None]


class ParseError(Exception):
    """Raised when the token stream does not form a valid program."""


# ---------------------------------------------------------------- expressions


@dataclass(frozen=True)
class Literal:
    """A literal value; ``char`` marks a character literal."""

    value: LiteralValue
    char: bool = False


@dataclass(frozen=True)
class Identifier:
    """A reference to a name."""

    name: str


@dataclass(frozen=True)
class Prefix:
    """A unary operator applied to an operand."""

    op: Token
    right: "Expr"


@dataclass(frozen=True)
class Infix:
    """A binary operator between two operands."""

    left: "Expr"
    op: Token
    right: "Expr"


@dataclass(frozen=True)
class Ternary:
    """``cond ? then_branch : else_branch``."""

    cond: "Expr"
    then_branch: "Expr"
    else_branch: "Expr"


@dataclass(frozen=True)
class Grouping:
    """A parenthesised expression."""

    expression: "Expr"


Expr = Union[Literal, Identifier, Prefix, Infix, Ternary, Grouping]


# ----------------------------------------------------------------- statements


@dataclass(frozen=True)
class ExprStmt:
    """An expression evaluated for its effect."""

    expression: Expr


@dataclass(frozen=True)
class VarDecl:
    """A mutable binding."""

    name: str
    initializer: Optional[Expr] = None


@dataclass(frozen=True)
class ValDecl:
    """An immutable binding."""

    name: str
    initializer: Expr


@dataclass(frozen=True)
class If:
    """A conditional with an optional else branch."""

    cond: Expr
    then_branch: "Statement"
    else_branch: Optional["Statement"] = None


@dataclass(frozen=True)
class While:
    """A loop that runs while its condition holds."""

    cond: Expr
    body: "Statement"


@dataclass(frozen=True)
class For:
    """A C-style for loop; every header part is optional."""

    init: Optional["Statement"]
    cond: Optional[Expr]
    post: Optional[Expr]
    body: "Statement"


@dataclass(frozen=True)
class Return:
    """A return with an optional value."""

    value: Optional[Expr] = None


@dataclass(frozen=True)
class Block:
    """A braced sequence of statements."""

    statements: tuple = ()


Statement = Union[ExprStmt, VarDecl, ValDecl, If, While, For, Return, Block]

_END = Token(TokenKind.NULL)

_LITERAL_KINDS = {
    TokenKind.INTEGER,
    TokenKind.FLOAT,
    TokenKind.STRING_LITERAL,
}


class Parser:
    """Recursive-descent parser with precedence climbing for expressions."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    def _peek(self) -> Token:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return _END

    def _next(self) -> Token:
        token = self._peek()
        self._pos = min(self._pos + 1, len(self._tokens))
        return token

    def _at(self, kind: TokenKind) -> bool:
        return self._peek() == Token(kind)

    def _expect(self, kind: TokenKind) -> None:
        expected = Token(kind)
        found = self._next()
        if found != expected:
            raise ParseError(f"Expected {expected}, found {found}")

    def _parse_prefix(self) -> Expr:
        token = self._next()
        kind = token.kind
        if kind is TokenKind.IDENTIFIER:
            return Identifier(token.value)
        if kind in _LITERAL_KINDS:
            return Literal(token.value)
        if kind is TokenKind.CHAR_LITERAL:
            return Literal(token.value, char=True)
        if kind is TokenKind.TRUE:
            return Literal(True)
        if kind is TokenKind.FALSE:
            return Literal(False)
        if kind is TokenKind.NULL:
            return Literal(None)
        if kind is TokenKind.LEFT_PAREN:
            inner = self.parse_expression(Precedence.LOWEST)
            self._expect(TokenKind.RIGHT_PAREN)
            return Grouping(inner)
        if kind in (TokenKind.MINUS, TokenKind.BANG):
            right = self.parse_expression(Precedence.PREFIX)
            return Prefix(token, right)
        raise ParseError(f"Unexpected prefix token: {token}")

    def _parse_infix(self, left: Expr, op: Token) -> Expr:
        precedence = op.precedence()
        if precedence is Precedence.TERNARY:
            then_branch = self.parse_expression(Precedence.LOWEST)
            self._expect(TokenKind.COLON)
            else_branch = self.parse_expression(Precedence.TERNARY)
            return Ternary(left, then_branch, else_branch)
        right = self.parse_expression(precedence)
        return Infix(left, op, right)

    def parse_expression(self, precedence: Precedence = Precedence.LOWEST) -> Expr:
        """Parse an expression whose operators bind tighter than ``precedence``."""
        left = self._parse_prefix()
        while (
            not self._at(TokenKind.SEMICOLON)
            and precedence < self._peek().precedence()
        ):
            op = self._next()
            left = self._parse_infix(left, op)
        return left

    def parse_statement(self) -> Statement:
        """Parse one statement starting at the current token."""
        handlers = {
            TokenKind.VAR: self._parse_var_decl,
            TokenKind.VAL: self._parse_val_decl,
            TokenKind.IF: self._parse_if,
            TokenKind.WHILE: self._parse_while,
            TokenKind.FOR: self._parse_for,
            TokenKind.RETURN: self._parse_return,
            TokenKind.LEFT_BRACE: self._parse_block,
        }
        handler = handlers.get(self._peek().kind, self._parse_expr_stmt)
        return handler()

    def _parse_binding(self, keyword: str) -> tuple[str, Expr]:
        self._next()
        name_token = self._next()
        if name_token.kind is not TokenKind.IDENTIFIER:
            raise ParseError(f"Expected identifier after '{keyword}'")
        self._expect(TokenKind.EQUAL)
        initializer = self.parse_expression(Precedence.LOWEST)
        self._expect(TokenKind.SEMICOLON)
        return name_token.value, initializer

    def _parse_var_decl(self) -> Statement:
        name, initializer = self._parse_binding("var")
        return VarDecl(name, initializer)

    def _parse_val_decl(self) -> Statement:
        name, initializer = self._parse_binding("val")
        return ValDecl(name, initializer)

    def _parse_condition(self) -> Expr:
        self._expect(TokenKind.LEFT_PAREN)
        cond = self.parse_expression(Precedence.LOWEST)
        self._expect(TokenKind.RIGHT_PAREN)
        return cond

    def _parse_if(self) -> Statement:
        self._next()
        cond = self._parse_condition()
        then_branch = self.parse_statement()
        else_branch = None
        if self._at(TokenKind.ELSE):
            self._next()
            else_branch = self.parse_statement()
        return If(cond, then_branch, else_branch)

    def _parse_while(self) -> Statement:
        self._next()
        cond = self._parse_condition()
        return While(cond, self.parse_statement())

    def _parse_for(self) -> Statement:
        self._next()
        self._expect(TokenKind.LEFT_PAREN)
        if self._at(TokenKind.SEMICOLON):
            self._next()
            init = None
        else:
            init = self.parse_statement()
        cond = None
        if not self._at(TokenKind.SEMICOLON):
            cond = self.parse_expression(Precedence.LOWEST)
        self._expect(TokenKind.SEMICOLON)
        post = None
        if not self._at(TokenKind.RIGHT_PAREN):
            post = self.parse_expression(Precedence.LOWEST)
        self._expect(TokenKind.RIGHT_PAREN)
        return For(init, cond, post, self.parse_statement())

    def _parse_return(self) -> Statement:
        self._next()
        value = None
        if not self._at(TokenKind.SEMICOLON):
            value = self.parse_expression(Precedence.LOWEST)
        self._expect(TokenKind.SEMICOLON)
        return Return(value)

    def _parse_block(self) -> Statement:
        self._next()
        statements = []
        while not self._at(TokenKind.RIGHT_BRACE):
            statements.append(self.parse_statement())
        self._next()
        return Block(tuple(statements))

    def _parse_expr_stmt(self) -> Statement:
        expression = self.parse_expression(Precedence.LOWEST)
        self._expect(TokenKind.SEMICOLON)
        return ExprStmt(expression)

    def at_end(self) -> bool:
        """True once the current token is ``null`` or input is exhausted."""
        return self._at(TokenKind.NULL)

    def skip_semicolon(self) -> bool:
        """Consume a stray semicolon if one is next."""
        if self._at(TokenKind.SEMICOLON):
            self._next()
            return True
        return False


def parse_source(tokens: Iterable[Token]) -> list[Statement]:
    """Parse a whole program, skipping stray semicolons between statements."""
    parser = Parser(tokens)
    statements: list[Statement] = []
    while not parser.at_end():
        if parser.skip_semicolon():
            continue
        statements.append(parser.parse_statement())
    return statements