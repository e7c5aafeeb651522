"""Extraction of a numeric sub-expression and unit from free-form text.

Raw text typed by a user may contain stray words, units and the ``X``
multiplication glyph. The scan classifies every maximal run of characters
into a token; anything that fits no category is dropped. The numeric
expression keeps only numbers, parentheses and arithmetic operators, and
the unit is the first word that directly follows the first number.
"""

from __future__ import annotations

from .config import MAX_INPUT_LENGTH, MULTIPLY_GLYPH, RAW_TOKEN_REGEX
from .logging_config import get_logger
from .types import (
    LPAREN,
    NUMBER,
    OPERATOR,
    PERCENT,
    RPAREN,
    WHITESPACE,
    WORD,
    Extraction,
    Token,
    ValidationError,
)

logger = get_logger("extractor")

_EXPRESSION_KINDS = (NUMBER, PERCENT, LPAREN, RPAREN, OPERATOR)

# Regex group for the multiply glyph; it becomes an operator token
_GLYPH = "glyph"


def _make_token(kind: str, text: str) -> Token:
    if kind == NUMBER:
        if text.endswith("%"):
            return Token(PERCENT, text, float(text[:-1]) / 100)
        return Token(NUMBER, text, float(text))
    if kind == _GLYPH:
        return Token(OPERATOR, text)
    return Token(kind, text)


def scan(raw: str) -> tuple[Token, ...]:
    """Split raw text into tokens, preserving source order.

    Characters that start no token (punctuation, ``=``, a lone ``.`` or
    ``%``) are discarded.

    Args:
        raw: Text as typed by the user

    Returns:
        Tuple of tokens

    Raises:
        ValidationError: If the input exceeds MAX_INPUT_LENGTH
    """
    if len(raw) > MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (max {MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )
    tokens: list[Token] = []
    pos = 0
    while pos < len(raw):
        match = RAW_TOKEN_REGEX.match(raw, pos)
        if match is None:
            pos += 1
            continue
        tokens.append(_make_token(match.lastgroup, match.group()))
        pos = match.end()
    return tuple(tokens)


def find_unit(tokens: tuple[Token, ...]) -> str | None:
    """Return the first word directly after the first number, if any.

    Whitespace may separate the number and the word; any other token in
    between means there is no unit.
    """
    first_number = next((i for i, tok in enumerate(tokens) if tok.is_operand), None)
    if first_number is None:
        return None
    for tok in tokens[first_number + 1 :]:
        if tok.kind == WHITESPACE:
            continue
        if tok.kind == WORD:
            return tok.text
        return None
    return None


def numeric_expression(tokens: tuple[Token, ...]) -> str:
    """Join number, parenthesis and operator tokens with single spaces."""
    if not any(tok.is_operand for tok in tokens):
        return ""
    parts = []
    for tok in tokens:
        if tok.kind not in _EXPRESSION_KINDS:
            continue
        parts.append("*" if tok.text == MULTIPLY_GLYPH else tok.text)
    return " ".join(parts)


def extract(raw: str) -> Extraction:
    """Extract the numeric expression and unit from raw text.

    Example:
        >>> extract("5 km + 2 km")
        Extraction(expression='5 + 2', unit='km')
    """
    tokens = scan(raw)
    result = Extraction(expression=numeric_expression(tokens), unit=find_unit(tokens))
    logger.debug("Extracted %r from %r", result, raw)
    return result


def extract_numeric_expression_and_unit(raw: str) -> tuple[str, str | None]:
    """Tuple form of :func:`extract`."""
    result = extract(raw)
    return result.expression, result.unit
