"""InlineMath package: extraction, evaluation and formatting of inline arithmetic."""

__all__ = [
    "config",
    "extractor",
    "evaluator",
    "formatter",
    "inline",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "evaluate",
    "evaluate_text",
    "validate_expression",
    "apply_inline",
]
