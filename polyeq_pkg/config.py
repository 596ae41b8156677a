"""Centralized configuration for polyeq.

This module defines:
- Input validation limits
- Cache sizes for the scanner
- REPL prompt and sentinel line
- Default output format

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with POLYEQ_)
"""

import os
import re

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("polyeq")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("POLYEQ_MAX_INPUT_LENGTH", "10000"))  # characters
MAX_NUMBER_DIGITS = int(
    os.getenv("POLYEQ_MAX_NUMBER_DIGITS", "4300")
)  # digits per number literal

# Cache configuration
CACHE_SIZE_TOKENIZE = int(os.getenv("POLYEQ_CACHE_SIZE_TOKENIZE", "1024"))

# Interactive driver
PROMPT = os.getenv("POLYEQ_PROMPT", "give an equation: ")
SENTINEL = os.getenv("POLYEQ_SENTINEL", "!")

OUTPUT_FORMAT = os.getenv("POLYEQ_OUTPUT_FORMAT", "human")  # "human", "json"

# Scanner: a digit run, an identifier, or any other single non-space character
TOKEN_REGEX = re.compile(
    r"\s*(?:(?P<number>\d+)|(?P<identifier>[A-Za-z][A-Za-z0-9]*)|(?P<symbol>\S))"
)
