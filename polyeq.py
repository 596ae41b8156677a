#!/usr/bin/env python3
"""
polyeq - Polynomial Equation Recognizer

Main entry point for the polyeq command line tool.
This file serves as a thin wrapper that delegates all functionality
to the polyeq_pkg package.

Usage:
    python polyeq.py                          # Interactive loop, '!' to quit
    python polyeq.py -e "x^3 + x^2 = 5"       # Recognize one line
    python polyeq.py --help                   # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for polyeq.

    Delegates all functionality to the polyeq_pkg.cli module,
    which handles argument parsing, recognition, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    from polyeq_pkg.cli import main_entry

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\ngood bye")
        return 0


if __name__ == "__main__":
    sys.exit(main())
