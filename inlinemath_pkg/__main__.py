"""Main entry point for running inlinemath_pkg as a module.

This allows running InlineMath with:
    python -m inlinemath_pkg
    python -m inlinemath_pkg -e "100 + 10%"
    python -m inlinemath_pkg --line "price = 20 X 3 =  "

This is equivalent to running:
    python -m inlinemath_pkg.cli
    python inlinemath.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
