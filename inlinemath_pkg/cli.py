from __future__ import annotations

import argparse
import json
import sys

from .api import evaluate
from .config import VERSION
from .inline import apply_inline
from .types import EvalResult


def print_result_pretty(res: EvalResult, output_format: str = "human") -> None:
    """Print result in specified format.

    Args:
        res: Evaluation result
        output_format: "json" for JSON output, "human" for human-readable
    """
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return
    if not res.ok:
        print("Error:", res.error)
        return
    if res.result is None:
        print("Nothing to evaluate.")
        return
    print(res.result)


def print_help_text() -> None:
    print(
        "Type an expression such as '100 + 10%', '3 X 4' or '5 km + 2 km'.\n"
        "Supported: + - * / ( ) %, decimal numbers and 'X' for multiplication.\n"
        "Words are ignored; the word after the first number is kept as the unit.\n"
        "Commands: help, quit, exit"
    )


def repl_loop(output_format: str = "human") -> None:
    """Interactive REPL loop."""
    try:
        import readline  # noqa: F401
    except (ImportError, ModuleNotFoundError):
        # readline not available on Windows - that's fine
        pass

    print("InlineMath - type 'help' for usage, 'quit' to exit.")
    while True:
        try:
            raw = input(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        if not raw:
            continue
        command = raw.lower()
        if command in ("quit", "exit"):
            print("Goodbye.")
            break
        if command == "help":
            print_help_text()
            continue
        print_result_pretty(evaluate(raw), output_format)


def _run_line(text: str, output_format: str) -> int:
    edit = apply_inline(text)
    if output_format == "json":
        payload = {"triggered": edit is not None, "value": text, "caret": len(text)}
        if edit is not None:
            payload.update(value=edit.value, caret=edit.caret)
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(text if edit is None else edit.value)
    return 0


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for InlineMath CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="inlinemath")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--line",
        type=str,
        help="Apply the '=  ' trigger to a line of text and print the rewritten line",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-d", "--decimals", type=int, help="Maximum fractional digits in results"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging level (default: INLINEMATH_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    args = parser.parse_args(argv)

    from .logging_config import setup_logging

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    import inlinemath_pkg.config as _config

    if args.decimals is not None and args.decimals >= 0:
        _config.OUTPUT_DECIMALS = int(args.decimals)

    if args.version:
        print(VERSION)
        return 0
    if args.line is not None:
        return _run_line(args.line, args.format)
    if args.eval_expr is not None:
        expr = args.eval_expr.strip()
        if not expr:
            print("Error: Empty input. Please enter an expression.")
            return 1
        res = evaluate(expr)
        print_result_pretty(res, args.format)
        return 0 if res.ok else 1

    repl_loop(args.format)
    return 0


if __name__ == "__main__":
    sys.exit(main_entry())
