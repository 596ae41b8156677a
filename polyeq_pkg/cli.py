from __future__ import annotations

import argparse
import json

from .api import recognize
from .config import OUTPUT_FORMAT, PROMPT, SENTINEL, VERSION
from .formatting import describe_result, format_token_list
from .logging_config import get_logger, setup_logging
from .types import RecognitionResult

logger = get_logger("cli")

REPL_COMMANDS = {"help"}


def _health_check() -> int:
    """Run health check to verify the recognizer on known inputs.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running polyeq health check...")
    print("-" * 50)

    cases = [
        ("x^3 + x^2 = 5", True, 3),
        ("-x + 3 = 0", True, 1),
        ("3 + 4 = 7", True, 0),
        ("x^-2 = 0", False, None),
        ("x + = 3", False, None),
    ]
    for line, expect_equation, expect_degree in cases:
        try:
            result = recognize(line)
            if result.is_equation == expect_equation and result.degree == expect_degree:
                print(f"[OK] {line!r}: {describe_result(result)}")
                checks_passed += 1
            else:
                print(f"[FAIL] {line!r}: unexpected {result!r}")
                checks_failed += 1
        except Exception as e:
            print(f"[FAIL] {line!r} raised: {e}")
            checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_result_pretty(
    res: RecognitionResult,
    output_format: str = "human",
    show_tokens: bool = False,
    pretty: bool = False,
) -> None:
    """Print result in specified format.

    Args:
        res: Recognition result
        output_format: "json" for JSON output, "human" for human-readable
        show_tokens: Echo the token list before the verdict (human format only)
        pretty: Render exponents as superscripts in the token echo
    """
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return
    if show_tokens and res.ok:
        token_list = format_token_list(res.tokens, pretty=pretty)
        try:
            print(f"the token list is {token_list}")
        except UnicodeEncodeError:
            print(f"the token list is {format_token_list(res.tokens)}")
    print(describe_result(res))


def print_help_text() -> None:
    """Print help text for the interactive loop."""
    help_text = f"""polyeq version {VERSION}

Type one equation per line, for example:
  x^3 + x^2 = 5        (equation in 1 variable of degree 3)
  -x + 3 = 0           (leading minus is allowed)
  2y^2 - 3 = y         (coefficients are written before the variable)
  x + y = 3            (equation, but not in 1 variable)

Terms are numbers, variables, or a number followed by a variable, with an
optional non-negative integer exponent written as '^n'. Terms are joined by
'+' or '-'.

Commands:
  help                 show this text
  {SENTINEL:<20} quit
"""
    print(help_text)


def repl_loop(
    output_format: str = "human", show_tokens: bool = False, pretty: bool = False
) -> None:
    """Interactive loop: read a line, report the verdict, stop at the sentinel."""
    try:
        import readline  # noqa: F401
    except (ImportError, ModuleNotFoundError):
        # readline not available on Windows - that's fine
        pass

    while True:
        try:
            raw = input(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if raw == SENTINEL:
            break
        if not raw:
            continue
        if raw.lower() in REPL_COMMANDS:
            print_help_text()
            continue
        res = recognize(raw)
        logger.debug("Input %r -> %r", raw, res)
        print_result_pretty(
            res, output_format=output_format, show_tokens=show_tokens, pretty=pretty
        )
    print("good bye")


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the polyeq CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="polyeq",
        description="Recognize single-variable polynomial equations and report their degree.",
    )
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Recognize one line and exit (non-interactive)",
        dest="eval_line",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default=OUTPUT_FORMAT,
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "--show-tokens",
        action="store_true",
        help="Print the token list before the verdict",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Render exponents as superscripts in the token list",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check on known equations",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.eval_line is not None:
        line = args.eval_line.strip()
        if not line:
            print("Error: Empty input. Please enter an equation.")
            return 1
        res = recognize(line)
        print_result_pretty(
            res,
            output_format=args.format,
            show_tokens=args.show_tokens,
            pretty=args.pretty,
        )
        return 0 if res.is_single_variable else 1

    repl_loop(
        output_format=args.format, show_tokens=args.show_tokens, pretty=args.pretty
    )
    return 0


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m polyeq_pkg.cli"""
    import sys

    sys.exit(main_entry())
