"""Public API for polyeq - returns structured objects without side effects."""

from __future__ import annotations

from typing import Sequence

from .logging_config import get_logger
from .recognizer import count_variables, distinct_variables, recognize_equation
from .scanner import tokenize
from .types import ParseError, RecognitionResult, Token, ValidationError

logger = get_logger("api")


def tokenize_line(line: str) -> tuple[Token, ...]:
    """Tokenize a line of input.

    Args:
        line: Raw input line

    Returns:
        Tuple of tokens

    Raises:
        ValidationError: If the line is too long
    """
    return tokenize(line)


def recognize_tokens(tokens: Sequence[Token]) -> RecognitionResult:
    """Recognize an already tokenized line."""
    tokens = tuple(tokens)
    step = recognize_equation(tokens)
    if step is None:
        return RecognitionResult(ok=True, is_equation=False, tokens=tokens)
    # degree and variable count are only meaningful for a complete equation
    return RecognitionResult(
        ok=True,
        is_equation=True,
        degree=step.degree,
        variable_count=count_variables(tokens),
        variables=distinct_variables(tokens),
        tokens=tokens,
    )


def recognize(line: str) -> RecognitionResult:
    """Recognize whether a line is a polynomial equation and measure it.

    Args:
        line: Equation string (e.g., "x^3 + x^2 = 5")

    Returns:
        RecognitionResult; degree and variables are only set for equations

    Example:
        >>> from polyeq_pkg.api import recognize
        >>> result = recognize("x^3 + x^2 = 5")
        >>> print(result.degree)
        3
        >>> recognize("x + = 3").is_equation
        False
    """
    try:
        tokens = tokenize(line)
    except ValidationError as e:
        return RecognitionResult(ok=False, error=str(e))
    return recognize_tokens(tokens)


def require_equation(line: str) -> RecognitionResult:
    """Recognize a line, raising if it is not an equation.

    Raises:
        ValidationError: If the line fails input validation
        ParseError: If the line is not an equation (code NOT_AN_EQUATION)
    """
    result = recognize_tokens(tokenize(line))
    if not result.is_equation:
        logger.info("Rejected non-equation input")
        raise ParseError(f"Not an equation: {line.strip()!r}", "NOT_AN_EQUATION")
    return result
