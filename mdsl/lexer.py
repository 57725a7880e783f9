"""Turns source text into tokens, collecting lexical errors on the way."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, Union

from mdsl.tokens import Token, TokenKind

_I64_MAX = 2**63 - 1

# Whitespace, line comments and block comments are dropped.
_SKIP = re.compile(r"[ \t\n\f]+|//[^\n]*|/\*(?:[^*]|\*+[^*/])*\*+\*/")

_LITERALS = sorted(
    (kind.text, kind) for kind in TokenKind if kind.text is not None
)
_LITERALS.sort(key=lambda item: len(item[0]), reverse=True)


@dataclass(frozen=True)
class LexError:
    """A fragment of input that no token matches; span is in characters."""

    span: range
    fragment: str


@dataclass
class LexResult:
    """All tokens and all errors found in one input."""

    tokens: list[Token] = field(default_factory=list)
    errors: list[LexError] = field(default_factory=list)


class _Overflow(Exception):
    pass


def _integer(text: str) -> int:
    value = int(text)
    if value > _I64_MAX:
        raise _Overflow
    return value


_PATTERNS: list[tuple[re.Pattern[str], TokenKind, Callable[[str], object]]] = [
    (re.compile(r"[0-9]+\.[0-9]+"), TokenKind.FLOAT, float),
    (re.compile(r"[0-9]+"), TokenKind.INTEGER, _integer),
    (re.compile(r'"(?:[^"\\]|\\.)*"'), TokenKind.STRING_LITERAL, lambda s: s[1:-1]),
    (re.compile(r"'(?:[^'\\]|\\.)'"), TokenKind.CHAR_LITERAL, lambda s: s[1]),
    (re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*"), TokenKind.IDENTIFIER, str),
]


def _longest_match(source: str, pos: int) -> Optional[tuple[int, TokenKind, Optional[Callable]]]:
    """Longest token at pos; on equal length a fixed token wins over a pattern."""
    best: Optional[tuple[int, TokenKind, Optional[Callable]]] = None
    for text, kind in _LITERALS:
        if source.startswith(text, pos):
            best = (pos + len(text), kind, None)
            break
    for pattern, kind, convert in _PATTERNS:
        match = pattern.match(source, pos)
        if match and (best is None or match.end() > best[0]):
            best = (match.end(), kind, convert)
    return best


def tokenize(source: str) -> Iterator[Union[Token, LexError]]:
    """Yield tokens in order, and a LexError for each character no token starts with."""
    pos = 0
    length = len(source)
    while pos < length:
        skipped = _SKIP.match(source, pos)
        if skipped:
            pos = skipped.end()
            continue
        found = _longest_match(source, pos)
        if found is None:
            yield LexError(range(pos, pos + 1), source[pos])
            pos += 1
            continue
        end, kind, convert = found
        text = source[pos:end]
        if convert is None:
            yield Token(kind)
        else:
            try:
                yield Token(kind, convert(text))
            except _Overflow:
                yield LexError(range(pos, end), text)
        pos = end


def lex_with_errors(source: str) -> LexResult:
    """Lex the whole input, keeping tokens and errors apart."""
    result = LexResult()
    for item in tokenize(source):
        if isinstance(item, LexError):
            result.errors.append(item)
        else:
            result.tokens.append(item)
    return result