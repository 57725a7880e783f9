"""Semantic checks over a parsed program."""

from __future__ import annotations

from typing import Sequence


class SemanticError(Exception):
    """Base class for errors found while checking a program."""


class UndefinedVariable(SemanticError):
    """A name is used that was never bound."""

    def __init__(self, name: str, span: range) -> None:
        super().__init__(f"undefined variable {name!r} at {span.start}..{span.stop}")
        self.name = name
        self.span = span


class TypeMismatch(SemanticError):
    """A value's type differs from the one required."""

    def __init__(self, expected: int, found: int, span: range) -> None:
        super().__init__(
            f"type mismatch at {span.start}..{span.stop}: "
            f"expected {expected}, found {found}"
        )
        self.expected = expected
        self.found = found
        self.span = span


def check(ast: Sequence) -> None:
    """Check a program; every program is currently accepted."""
    return None