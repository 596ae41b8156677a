"""Scanner turning one line of text into an immutable token sequence.

Whitespace separates tokens. A run of digits is a number, a letter followed by
letters or digits is an identifier, and any other character is a symbol, so
scanning itself never fails; only oversized input and number literals
longer than MAX_NUMBER_DIGITS are rejected.
"""

from __future__ import annotations

from functools import lru_cache

from .config import (
    CACHE_SIZE_TOKENIZE,
    MAX_INPUT_LENGTH,
    MAX_NUMBER_DIGITS,
    TOKEN_REGEX,
)
from .logging_config import get_logger
from .types import Token, TokenKind, ValidationError

logger = get_logger("scanner")


def validate_line(line: str) -> str:
    """Strip the line and enforce the input length limit.

    Raises:
        ValidationError: If the line exceeds MAX_INPUT_LENGTH characters
    """
    line = line.strip() if line else ""
    if len(line) > MAX_INPUT_LENGTH:
        logger.warning("Rejected input of %d characters", len(line))
        raise ValidationError(
            f"Input too long (max {MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )
    return line


@lru_cache(maxsize=CACHE_SIZE_TOKENIZE)
def _scan(line: str) -> tuple[Token, ...]:
    tokens = []
    for match in TOKEN_REGEX.finditer(line):
        kind = match.lastgroup
        text = match.group(kind)
        pos = match.start(kind)
        if kind == "number":
            if len(text) > MAX_NUMBER_DIGITS:
                logger.warning("Rejected number literal of %d digits", len(text))
                raise ValidationError(
                    f"Number too long at column {pos} (max {MAX_NUMBER_DIGITS} digits)",
                    "NUMBER_TOO_LONG",
                )
            tokens.append(Token(TokenKind.NUMBER, int(text), pos))
        elif kind == "identifier":
            tokens.append(Token(TokenKind.IDENTIFIER, text, pos))
        else:
            tokens.append(Token(TokenKind.SYMBOL, text, pos))
    return tuple(tokens)


def tokenize(line: str) -> tuple[Token, ...]:
    """Tokenize a line of input.

    Args:
        line: Raw input line (e.g., "3x^2 - x = 7")

    Returns:
        Tuple of tokens in source order; empty for a blank line

    Raises:
        ValidationError: If the line is too long (TOO_LONG) or holds a number
            literal longer than MAX_NUMBER_DIGITS (NUMBER_TOO_LONG)
    """
    return _scan(validate_line(line))


def clear_cache() -> None:
    """Drop memoized token sequences."""
    _scan.cache_clear()
