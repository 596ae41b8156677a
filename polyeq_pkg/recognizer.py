"""Recursive-descent recognizer for single-variable polynomial equations.

Grammar recognized:

    <equation>   ::= <expression> '=' <expression>
    <expression> ::= ['-'] <term> { '+' <term> | '-' <term> }
    <term>       ::= <number> [ <identifier> <exponent> ] | <identifier> <exponent>
    <exponent>   ::= [ '^' <number> ]

The recognizers are mutually recursive functions over an immutable Cursor.
Each one either returns a Step holding the advanced cursor and the updated
degree, or None. A caller that gets None keeps its own cursor, so a failed
recognition never consumes anything.

The degree is the largest exponent seen so far. An identifier without an
explicit exponent counts as exponent 1; a bare number counts as exponent 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional, Sequence, Union

from .logging_config import get_logger
from .types import Token, TokenKind, VariableCount

logger = get_logger("recognizer")


@dataclass(frozen=True)
class Cursor:
    """Position in a token sequence; everything from index on is unconsumed."""

    tokens: tuple[Token, ...]
    index: int = 0

    @classmethod
    def start(cls, tokens: Sequence[Token]) -> Cursor:
        return cls(tuple(tokens), 0)

    @property
    def current(self) -> Optional[Token]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self.tokens)

    def advance(self) -> Cursor:
        return Cursor(self.tokens, self.index + 1)


class Step(NamedTuple):
    """Successful recognition: the cursor past the unit and the degree so far."""

    cursor: Cursor
    degree: int


Accepted = Optional[tuple[Cursor, Union[int, str]]]


# Primitive acceptors


def _accept_kind(cursor: Cursor, kind: TokenKind) -> Accepted:
    token = cursor.current
    if token is not None and token.kind is kind:
        return cursor.advance(), token.value
    return None


def accept_number(cursor: Cursor) -> Accepted:
    """Accept a number token, yielding its integer value."""
    return _accept_kind(cursor, TokenKind.NUMBER)


def accept_identifier(cursor: Cursor) -> Accepted:
    """Accept an identifier token, yielding its name."""
    return _accept_kind(cursor, TokenKind.IDENTIFIER)


def accept_character(cursor: Cursor, char: str) -> Optional[Cursor]:
    """Accept the symbol ``char``, returning the advanced cursor."""
    token = cursor.current
    if token is not None and token.kind is TokenKind.SYMBOL and token.value == char:
        return cursor.advance()
    return None


# Grammar units


def accept_exponent(cursor: Cursor, degree: int) -> Optional[Step]:
    """Accept an optional ``'^' <number>`` suffix after an identifier.

    Without a '^' this is a zero-width match with implicit exponent 1.
    A negative exponent ('^' followed by '-') or a '^' without a number fails.
    """
    after_caret = accept_character(cursor, "^")
    if after_caret is None:
        return Step(cursor, max(degree, 1))
    if accept_character(after_caret, "-") is not None:
        return None
    accepted = accept_number(after_caret)
    if accepted is None:
        return None
    after_number, exponent = accepted
    return Step(after_number, max(degree, exponent))


def accept_term(cursor: Cursor, degree: int) -> Optional[Step]:
    """Accept a constant, a variable, or a coefficient-variable-exponent term."""
    accepted = accept_number(cursor)
    if accepted is not None:
        after_number, _ = accepted
        accepted = accept_identifier(after_number)
        if accepted is None:
            # just a constant
            return Step(after_number, degree)
        return accept_exponent(accepted[0], degree)
    accepted = accept_identifier(cursor)
    if accepted is None:
        return None
    return accept_exponent(accepted[0], degree)


def accept_expression(cursor: Cursor, degree: int) -> Optional[Step]:
    """Accept ``['-'] <term> { ('+' | '-') <term> }``."""
    after_sign = accept_character(cursor, "-")
    step = accept_term(after_sign or cursor, degree)
    if step is None:
        return None
    while True:
        after_operator = accept_character(step.cursor, "+") or accept_character(
            step.cursor, "-"
        )
        if after_operator is None:
            # no + or -, so we reached the end of the expression
            return step
        step = accept_term(after_operator, step.degree)
        if step is None:
            return None


def accept_equation(cursor: Cursor, degree: int = 0) -> Optional[Step]:
    """Accept ``<expression> '=' <expression>`` as a prefix of the cursor.

    Trailing tokens are left unconsumed; use recognize_equation to require
    that the whole sequence is an equation.
    """
    lhs = accept_expression(cursor, degree)
    if lhs is None:
        return None
    after_equals = accept_character(lhs.cursor, "=")
    if after_equals is None:
        return None
    return accept_expression(after_equals, lhs.degree)


def recognize_equation(tokens: Sequence[Token]) -> Optional[Step]:
    """Recognize a complete token sequence as an equation.

    The degree starts from 0 on every call. Returns the final Step only when
    the equation consumed every token; an empty sequence is not an equation.

    Args:
        tokens: Token sequence produced by the scanner

    Returns:
        Step with the exhausted cursor and the equation's degree, or None
    """
    step = accept_equation(Cursor.start(tokens))
    if step is None:
        logger.debug("No equation recognized in %d tokens", len(tokens))
        return None
    if not step.cursor.exhausted:
        logger.debug(
            "Equation prefix ends at token %d of %d", step.cursor.index, len(tokens)
        )
        return None
    logger.debug("Recognized equation of degree %d", step.degree)
    return step


# Variable analysis


def distinct_variables(tokens: Sequence[Token]) -> list[str]:
    """Return identifier names in order of first appearance."""
    names: list[str] = []
    for token in tokens:
        if token.kind is TokenKind.IDENTIFIER and token.value not in names:
            names.append(token.value)
    return names


def count_variables(tokens: Sequence[Token]) -> VariableCount:
    """Classify the number of distinct identifiers in the full token sequence."""
    names = set()
    for token in tokens:
        if token.kind is TokenKind.IDENTIFIER:
            names.add(token.value)
            if len(names) > 1:
                return VariableCount.MANY
    return VariableCount(len(names))
