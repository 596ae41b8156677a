"""polyeq package: scanner, recognizer, formatting, and CLI for polynomial equations."""

__all__ = [
    "config",
    "scanner",
    "recognizer",
    "formatting",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "recognize",
    "recognize_tokens",
    "require_equation",
    "tokenize_line",
]
