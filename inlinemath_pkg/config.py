"""Centralized configuration for InlineMath.

This module defines:
- Output formatting (fractional digits, failure text)
- Input validation limits
- Regex patterns for scanning raw text and numeric expressions
- The inline trigger pattern used by host integrations

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with INLINEMATH_)
"""

import os
import re

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("inlinemath")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Output formatting
OUTPUT_DECIMALS = int(os.getenv("INLINEMATH_OUTPUT_DECIMALS", "8"))
INVALID_EXPRESSION_TEXT = os.getenv(
    "INLINEMATH_INVALID_EXPRESSION_TEXT", "Invalid expression"
)

# Logging level used when the CLI does not pass one
LOG_LEVEL = os.getenv("INLINEMATH_LOG_LEVEL", "WARNING")

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("INLINEMATH_MAX_INPUT_LENGTH", "10000"))  # characters

# Glyph typed by users in place of '*'
MULTIPLY_GLYPH = "X"

# Raw text scan: one alternative per lexical category, tried in order
RAW_TOKEN_REGEX = re.compile(
    r"(?P<number>[0-9]+(?:\.[0-9]+)?%?)"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<operator>[-+*/])"
    r"|(?P<glyph>X)"
    r"|(?P<word>[^\W\d_X]+)"
    r"|(?P<whitespace>\s+)"
)

# Numeric expression scan used by the evaluator
EXPR_TOKEN_REGEX = re.compile(r"([0-9]+(?:\.[0-9]+)?%?)|([-+*/()])")
ALLOWED_EXPR_CHARS_REGEX = re.compile(r"[^0-9.+\-*/()%\s]")
WHITESPACE_RUN_REGEX = re.compile(r"\s+")

# Inline trigger: the line ends with '=' followed by exactly two whitespace chars
TRIGGER_REGEX = re.compile(r"\s*=\s{2}\Z")
TRAILING_EQUALS_REGEX = re.compile(r"\s*=\s*\Z")
DIGIT_REGEX = re.compile(r"[0-9]")
