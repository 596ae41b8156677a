"""Main entry point for running polyeq_pkg as a module.

This allows running polyeq with:
    python -m polyeq_pkg
    python -m polyeq_pkg --health-check
    python -m polyeq_pkg -e "x^2 + 1 = 0"

This is equivalent to running:
    python -m polyeq_pkg.cli
    python polyeq.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
