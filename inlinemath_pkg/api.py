"""Public API for InlineMath - returns structured objects without side effects."""

from __future__ import annotations

from . import config
from .evaluator import evaluate_expression
from .extractor import extract
from .formatter import format_result
from .logging_config import get_logger
from .types import EvalResult, ParseError, ValidationError

logger = get_logger("api")


def evaluate(raw: str) -> EvalResult:
    """Evaluate the arithmetic found in a piece of free-form text.

    Args:
        raw: Text as typed by the user (e.g., "5 km + 2 km", "100 + 10%")

    Returns:
        EvalResult with the formatted result and unit. Text without any
        number is a no-op: ``ok`` is True and ``result`` is None.

    Example:
        >>> from inlinemath_pkg.api import evaluate
        >>> evaluate("5 km + 2 km").result
        '7 km'
        >>> evaluate("5 / 0").ok
        False
    """
    try:
        extraction = extract(raw)
    except ValidationError as e:
        logger.info("Rejected input: %s", e)
        return EvalResult(ok=False, error=str(e), error_code=e.code)

    if extraction.is_empty:
        return EvalResult(ok=True)

    try:
        value = evaluate_expression(extraction.expression)
        text = format_result(value, extraction.unit)
    except ParseError as e:
        logger.debug("Could not evaluate %r: %s (%s)", extraction.expression, e, e.code)
        return EvalResult(
            ok=False,
            expression=extraction.expression,
            error=str(e),
            error_code=e.code,
        )

    return EvalResult(
        ok=True,
        result=text,
        value=value,
        expression=extraction.expression,
        unit=extraction.unit,
    )


def evaluate_text(raw: str) -> str:
    """Evaluate raw text and return the result string.

    Failures collapse to INVALID_EXPRESSION_TEXT ("Invalid expression");
    text without a number gives an empty string.
    """
    res = evaluate(raw)
    if not res.ok:
        return config.INVALID_EXPRESSION_TEXT
    return res.result or ""


def validate_expression(expression: str) -> tuple[bool, str | None]:
    """Check a numeric expression without formatting its value.

    Division by zero is syntactically valid and is accepted here.

    Args:
        expression: Numeric expression to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        evaluate_expression(expression)
    except ParseError as e:
        return False, str(e)
    return True, None
