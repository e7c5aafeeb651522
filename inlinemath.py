#!/usr/bin/env python3
"""
InlineMath - inline arithmetic evaluator

Main entry point for the InlineMath command-line tool.
This file serves as a thin wrapper that delegates all functionality
to the inlinemath_pkg package.

Usage:
    python inlinemath.py                          # Interactive REPL
    python inlinemath.py -e "100 + 10%"           # Evaluate expression
    python inlinemath.py --line "2 X 21 =  "      # Apply the inline trigger
    python inlinemath.py --help                   # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for InlineMath.

    Delegates all functionality to the inlinemath_pkg.cli module,
    which handles argument parsing, expression evaluation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from inlinemath_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import inlinemath_pkg: {e}")
        print("Please ensure the package is installed: pip install -e .")
        return 1


if __name__ == "__main__":
    sys.exit(main())
