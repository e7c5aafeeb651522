"""Inline trigger handling for text fields.

A host integration watches an editable field. When the line under the
caret ends with ``=`` followed by two spaces, the expression before it is
evaluated and the line is rewritten as ``<expression> = <result> ``.
Everything here works on plain strings; reading and writing the field is
left to the host, which should not react to its own write.
"""

from __future__ import annotations

from .api import evaluate_text
from .config import DIGIT_REGEX, TRAILING_EQUALS_REGEX, TRIGGER_REGEX
from .logging_config import get_logger
from .types import EquationMatch, InlineEdit

logger = get_logger("inline")


def active_line_bounds(value: str, caret: int) -> tuple[int, int]:
    """Return (start, end) of the line containing the caret."""
    start = value.rfind("\n", 0, max(0, caret - 1) + 1) + 1
    end = value.find("\n", caret)
    if end == -1:
        end = len(value)
    return start, end


def parse_equation(line: str) -> EquationMatch | None:
    """Split a triggered line into its expression and preserved prefix.

    Only the segment after the last '=' before the trigger is evaluated,
    so several results can be chained on one line.

    Returns:
        EquationMatch, or None if the line is not triggered or the
        segment has no digit
    """
    if not TRIGGER_REGEX.search(line):
        return None
    head = TRIGGER_REGEX.sub("", line, count=1)
    last_eq = head.rfind("=")
    left_part = head[: last_eq + 1] if last_eq >= 0 else ""
    segment = head[last_eq + 1 :] if last_eq >= 0 else head
    expression = segment.strip()
    if not expression or not DIGIT_REGEX.search(expression):
        return None
    return EquationMatch(expression=expression, left_part=left_part, segment=segment)


def rewrite_line(match: EquationMatch, result: str) -> str:
    """Build the replacement line for a triggered equation."""
    before = match.left_part
    if before:
        before = TRAILING_EQUALS_REGEX.sub(" = ", before, count=1)
    return f"{before}{match.expression} = {result} "


def apply_inline(value: str, caret: int | None = None) -> InlineEdit | None:
    """Evaluate the triggered line under the caret, if any.

    Args:
        value: Full text of the field
        caret: Caret index (defaults to the end of the text)

    Returns:
        InlineEdit with the new field value, the caret at the end of the
        rewritten line and the text to announce; None when nothing changes

    Example:
        >>> apply_inline("2 + 3 =  ").value
        '2 + 3 = 5 '
    """
    if caret is None:
        caret = len(value)
    start, end = active_line_bounds(value, caret)
    match = parse_equation(value[start:end])
    if match is None:
        return None

    new_line = rewrite_line(match, evaluate_text(match.expression))
    before = value[:start] + new_line
    logger.debug("Rewrote line %d-%d as %r", start, end, new_line)
    return InlineEdit(
        value=before + value[end:],
        caret=len(before),
        announcement=new_line,
    )
