"""Output formatting for recognition results.

This module handles:
- Rendering token sequences for the "token list" echo
- Superscript exponents for pretty output
- The one-line verdict shown to the user
"""

from __future__ import annotations

import re
from typing import Sequence

from .types import RecognitionResult, Token, VariableCount

NOT_AN_EQUATION = "this is not an equation"
NOT_ONE_VARIABLE = "this is an equation, but not in 1 variable"


def superscriptify(input_str: str) -> str:
    """Convert numeric string to Unicode superscript characters.

    Args:
        input_str: Input string with digits and '-' (e.g., "123", "-5")

    Returns:
        String with superscript Unicode characters (e.g., "¹²³", "⁻⁵")
    """
    mapping = {
        "0": "⁰",
        "1": "¹",
        "2": "²",
        "3": "³",
        "4": "⁴",
        "5": "⁵",
        "6": "⁶",
        "7": "⁷",
        "8": "⁸",
        "9": "⁹",
        "-": "⁻",
    }
    return "".join(mapping.get(char, char) for char in input_str)


def format_superscript(expr_str: str) -> str:
    """Replace caret exponents with Unicode superscripts.

    Args:
        expr_str: Expression string (e.g., "x^2", "x ^ 12")

    Returns:
        String with superscripts (e.g., "x²", "x¹²")
    """
    return re.sub(r"\s*\^\s*(\d+)", lambda m: superscriptify(m.group(1)), expr_str)


def format_token_list(tokens: Sequence[Token], pretty: bool = False) -> str:
    """Render tokens separated by single spaces.

    Args:
        tokens: Token sequence from the scanner
        pretty: If True, fold '^ n' into superscripts

    Returns:
        Display string (e.g., "3 x ^ 2 = 7" or "3 x² = 7")
    """
    rendered = " ".join(str(token) for token in tokens)
    return format_superscript(rendered) if pretty else rendered


def describe_result(result: RecognitionResult) -> str:
    """Return the verdict line for a recognition result."""
    if not result.ok:
        return f"Error: {result.error}"
    if not result.is_equation:
        return NOT_AN_EQUATION
    if result.variable_count != VariableCount.ONE:
        return NOT_ONE_VARIABLE
    return f"this is an equation in 1 variable of degree {result.degree}"
