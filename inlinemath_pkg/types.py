"""Type definitions, result dataclasses and the error taxonomy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Token kinds produced by the extractor scan and the evaluator tokenizer
NUMBER = "number"
PERCENT = "percent"
OPERATOR = "operator"
LPAREN = "lparen"
RPAREN = "rparen"
WORD = "word"
WHITESPACE = "whitespace"

# Operator symbols; unary signs get their own names after marking
UNARY_PLUS = "u+"
UNARY_MINUS = "u-"
BINARY_OPERATORS = ("+", "-", "*", "/")
UNARY_OPERATORS = (UNARY_PLUS, UNARY_MINUS)


@dataclass(frozen=True)
class Token:
    """A single lexical token.

    ``value`` is the decimal value for number tokens and the fraction
    (value / 100) for percent tokens; it is ``None`` for everything else.
    """

    kind: str
    text: str
    value: float | None = None

    @property
    def is_operand(self) -> bool:
        return self.kind in (NUMBER, PERCENT)

    @property
    def is_binary_operator(self) -> bool:
        return self.kind == OPERATOR and self.text in BINARY_OPERATORS

    @property
    def is_unary_operator(self) -> bool:
        return self.kind == OPERATOR and self.text in UNARY_OPERATORS


@dataclass(frozen=True)
class Extraction:
    """Numeric sub-expression and optional unit pulled out of raw text."""

    expression: str
    unit: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.expression


@dataclass(frozen=True)
class Plain:
    """An ordinary number on the evaluation stack."""

    value: float


@dataclass(frozen=True)
class Percent:
    """A value that came from a ``%`` literal, stored as its fraction."""

    fraction: float

    @property
    def value(self) -> float:
        return self.fraction


@dataclass
class EvalResult:
    """Result of evaluating a piece of raw text."""

    ok: bool
    result: str | None = None
    value: float | None = None
    expression: str | None = None
    unit: str | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.result is not None:
            result_dict["result"] = self.result
        if self.value is not None:
            result_dict["value"] = self.value
        if self.expression is not None:
            result_dict["expression"] = self.expression
        if self.unit is not None:
            result_dict["unit"] = self.unit
        if self.error is not None:
            result_dict["error"] = self.error
        if self.error_code is not None:
            result_dict["error_code"] = self.error_code
        return result_dict

    def __repr__(self) -> str:
        if not self.ok:
            return f"EvalResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        parts = [f"ok={self.ok}"]
        if self.result is not None:
            parts.append(f"result={self.result!r}")
        if self.unit is not None:
            parts.append(f"unit={self.unit!r}")
        return f"EvalResult({', '.join(parts)})"


@dataclass(frozen=True)
class EquationMatch:
    """A line that ends with the ``=`` trigger, split into its parts."""

    expression: str
    left_part: str
    segment: str


@dataclass(frozen=True)
class InlineEdit:
    """Replacement field value produced by an inline evaluation."""

    value: str
    caret: int
    announcement: str


class ValidationError(Exception):
    """Raised when raw input is rejected before scanning."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ParseError(Exception):
    """Base class for every failure while evaluating an expression."""

    default_code = "PARSE_ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidCharacterError(ParseError):
    """A character that cannot start any token."""

    default_code = "INVALID_CHARACTER"


class MismatchedParenthesesError(ParseError):
    default_code = "MISMATCHED_PARENTHESES"


class MalformedExpressionError(ParseError):
    """Empty input, missing operands or leftover operands."""

    default_code = "MALFORMED_EXPRESSION"


class NonFiniteResultError(ParseError):
    """The computed value is NaN or infinite (division by zero included)."""

    default_code = "NON_FINITE_RESULT"
