"""Token definitions and result dataclasses for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Union


class TokenKind(Enum):
    """Kinds of tokens produced by the scanner."""

    NUMBER = "number"
    IDENTIFIER = "identifier"
    SYMBOL = "symbol"


@dataclass(frozen=True)
class Token:
    """A single token of an input line.

    Attributes:
        kind: The token kind
        value: int for numbers, the name for identifiers, the character for symbols
        pos: Column of the token in the source line
    """

    kind: TokenKind
    value: Union[int, str]
    pos: int = 0

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.value!r}, pos={self.pos})"


class VariableCount(IntEnum):
    """Number of distinct identifiers in an equation: 0, 1, or 2-or-more."""

    NONE = 0
    ONE = 1
    MANY = 2


@dataclass
class RecognitionResult:
    """Result of recognizing one input line."""

    ok: bool
    is_equation: bool = False
    degree: int | None = None
    variable_count: VariableCount | None = None
    variables: list[str] | None = None
    tokens: tuple[Token, ...] = ()
    error: str | None = None

    @property
    def is_single_variable(self) -> bool:
        return self.is_equation and self.variable_count == VariableCount.ONE

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok, "equation": self.is_equation}
        if self.degree is not None:
            result_dict["degree"] = self.degree
        if self.variable_count is not None:
            result_dict["variable_count"] = self.variable_count.name.lower()
        if self.variables is not None:
            result_dict["variables"] = self.variables
        if self.tokens:
            result_dict["tokens"] = [str(token) for token in self.tokens]
        if self.error is not None:
            result_dict["error"] = self.error
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"RecognitionResult(ok=False, error={self.error!r})"
        parts = [f"ok={self.ok}", f"is_equation={self.is_equation}"]
        if self.degree is not None:
            parts.append(f"degree={self.degree!r}")
        if self.variable_count is not None:
            parts.append(f"variable_count={self.variable_count.name}")
        if self.variables is not None:
            parts.append(f"variables={self.variables!r}")
        return f"RecognitionResult({', '.join(parts)})"


class ValidationError(Exception):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ParseError(Exception):
    """Raised when a line is required to be an equation and is not."""

    def __init__(self, message: str, code: str = "PARSE_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
