"""Evaluation of numeric expressions.

This module handles:
- Normalization of the expression text (multiply glyph, whitespace)
- Tokenization with unary sign marking
- Shunting-yard conversion to reverse Polish notation
- Stack evaluation with percent-aware addition and subtraction

Values on the evaluation stack are either ``Plain`` numbers or ``Percent``
values that remember they came from a ``%`` literal. Addition and
subtraction treat a percent operand as a share of the other operand
(``100 + 10%`` is 110); every other operator uses the plain fraction.
"""

from __future__ import annotations

import math

from .config import (
    ALLOWED_EXPR_CHARS_REGEX,
    EXPR_TOKEN_REGEX,
    MULTIPLY_GLYPH,
    WHITESPACE_RUN_REGEX,
)
from .logging_config import get_logger
from .types import (
    LPAREN,
    NUMBER,
    OPERATOR,
    PERCENT,
    RPAREN,
    UNARY_MINUS,
    UNARY_OPERATORS,
    UNARY_PLUS,
    InvalidCharacterError,
    MalformedExpressionError,
    MismatchedParenthesesError,
    Percent,
    Plain,
    Token,
)

logger = get_logger("evaluator")

PRECEDENCE = {UNARY_PLUS: 3, UNARY_MINUS: 3, "*": 2, "/": 2, "+": 1, "-": 1}
RIGHT_ASSOCIATIVE = frozenset(UNARY_OPERATORS)


def normalize_expression(expression: str) -> str:
    """Rewrite the multiply glyph, collapse whitespace and check characters.

    Args:
        expression: Numeric expression (e.g., "3 X 4", "(2+3)  *  10%")

    Returns:
        Normalized expression (e.g., "3 * 4")

    Raises:
        InvalidCharacterError: If a character outside digits, '.', '%',
            operators, parentheses and whitespace is present
    """
    expr = expression.replace(MULTIPLY_GLYPH, "*")
    expr = WHITESPACE_RUN_REGEX.sub(" ", expr).strip()
    bad = ALLOWED_EXPR_CHARS_REGEX.search(expr)
    if bad:
        raise InvalidCharacterError(
            f"Invalid character {bad.group()!r} in expression at position {bad.start()}"
        )
    return expr


def _number_token(text: str) -> Token:
    if text.endswith("%"):
        return Token(PERCENT, text, float(text[:-1]) / 100)
    return Token(NUMBER, text, float(text))


def tokenize(expression: str) -> list[Token]:
    """Split a numeric expression into number, operator and parenthesis tokens.

    Raises:
        InvalidCharacterError: If some position starts no token
    """
    tokens: list[Token] = []
    pos = 0
    length = len(expression)
    while pos < length:
        if expression[pos].isspace():
            pos += 1
            continue
        match = EXPR_TOKEN_REGEX.match(expression, pos)
        if match is None:
            raise InvalidCharacterError(
                f"Unexpected {expression[pos]!r} at position {pos}"
            )
        number, symbol = match.groups()
        if number is not None:
            tokens.append(_number_token(number))
        elif symbol == "(":
            tokens.append(Token(LPAREN, symbol))
        elif symbol == ")":
            tokens.append(Token(RPAREN, symbol))
        else:
            tokens.append(Token(OPERATOR, symbol))
        pos = match.end()
    return tokens


def mark_unary(tokens: list[Token]) -> list[Token]:
    """Reclassify '+' and '-' tokens that apply to a single operand.

    A sign is unary when it comes first, or right after a binary operator,
    an opening parenthesis or another unary sign.
    """
    marked: list[Token] = []
    for tok in tokens:
        if tok.kind == OPERATOR and tok.text in ("+", "-"):
            prev = marked[-1] if marked else None
            if (
                prev is None
                or prev.kind == LPAREN
                or prev.is_binary_operator
                or prev.is_unary_operator
            ):
                tok = Token(OPERATOR, UNARY_PLUS if tok.text == "+" else UNARY_MINUS)
        marked.append(tok)
    return marked


def _should_pop(top: Token, incoming: Token) -> bool:
    if top.kind != OPERATOR:
        return False
    if incoming.text in RIGHT_ASSOCIATIVE:
        return PRECEDENCE[top.text] > PRECEDENCE[incoming.text]
    return PRECEDENCE[top.text] >= PRECEDENCE[incoming.text]


def to_rpn(tokens: list[Token]) -> list[Token]:
    """Reorder infix tokens into reverse Polish notation (shunting-yard).

    Raises:
        MismatchedParenthesesError: On a ')' without '(' or an unclosed '('
    """
    output: list[Token] = []
    operators: list[Token] = []
    for tok in tokens:
        if tok.is_operand:
            output.append(tok)
        elif tok.kind == OPERATOR:
            while operators and _should_pop(operators[-1], tok):
                output.append(operators.pop())
            operators.append(tok)
        elif tok.kind == LPAREN:
            operators.append(tok)
        elif tok.kind == RPAREN:
            while operators and operators[-1].kind != LPAREN:
                output.append(operators.pop())
            if not operators:
                raise MismatchedParenthesesError("Mismatched parentheses")
            operators.pop()
        else:
            raise InvalidCharacterError(f"Unexpected token {tok.text!r}")

    while operators:
        op = operators.pop()
        if op.kind in (LPAREN, RPAREN):
            raise MismatchedParenthesesError("Mismatched parentheses")
        output.append(op)
    return output


def _combine(op: str, a: Plain | Percent, b: Plain | Percent) -> Plain:
    """Apply a binary operator; the result is always plain."""
    if op == "+":
        if isinstance(b, Percent):
            return Plain(a.value + a.value * b.fraction)
        if isinstance(a, Percent):
            return Plain(b.value + b.value * a.fraction)
        return Plain(a.value + b.value)
    if op == "-":
        if isinstance(b, Percent):
            return Plain(a.value - a.value * b.fraction)
        if isinstance(a, Percent):
            return Plain(b.value - b.value * a.fraction)
        return Plain(a.value - b.value)
    if op == "*":
        return Plain(a.value * b.value)
    if op == "/":
        if b.value == 0:
            return Plain(math.nan)
        return Plain(a.value / b.value)
    raise MalformedExpressionError(f"Unknown operator {op!r}")


def _negate(operand: Plain | Percent) -> Plain | Percent:
    if isinstance(operand, Percent):
        return Percent(-operand.fraction)
    return Plain(-operand.value)


def evaluate_rpn(queue: list[Token]) -> float:
    """Evaluate an RPN token queue.

    Division by zero yields NaN rather than an error.

    Raises:
        MalformedExpressionError: If an operator lacks operands or more
            than one value is left over
    """
    stack: list[Plain | Percent] = []
    for tok in queue:
        if tok.kind == NUMBER:
            stack.append(Plain(tok.value))
        elif tok.kind == PERCENT:
            stack.append(Percent(tok.value))
        elif tok.is_unary_operator:
            if not stack:
                raise MalformedExpressionError(f"Missing operand for {tok.text[1]!r}")
            operand = stack.pop()
            stack.append(operand if tok.text == UNARY_PLUS else _negate(operand))
        else:
            if len(stack) < 2:
                raise MalformedExpressionError(f"Missing operand for {tok.text!r}")
            b = stack.pop()
            a = stack.pop()
            stack.append(_combine(tok.text, a, b))

    if len(stack) != 1:
        raise MalformedExpressionError("Invalid expression")
    return stack[0].value


def evaluate_expression(expression: str) -> float:
    """Evaluate a numeric expression to a float.

    Args:
        expression: Expression using digits, '.', '%', '+ - * /', parentheses
            and the 'X' multiply glyph (e.g., "100 + 10%", "(2 + 3) X 4")

    Returns:
        The value; NaN when a division by zero occurred

    Raises:
        ParseError: One of its subclasses for any malformed input

    Example:
        >>> evaluate_expression("200 - 25%")
        150.0
    """
    tokens = mark_unary(tokenize(normalize_expression(expression)))
    if not tokens:
        raise MalformedExpressionError("Empty expression")
    queue = to_rpn(tokens)
    logger.debug("RPN for %r: %s", expression, " ".join(tok.text for tok in queue))
    return evaluate_rpn(queue)
