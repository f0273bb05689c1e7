"""
Superposition CLI — Evaluate superposition expressions from the shell.

Commands:
    superposition demo                 — Run the worked examples
    superposition combine <op> ...     — Pairwise arithmetic
    superposition compare <op> ...     — Filter by a comparison
    superposition prime <n>            — Primality via modulo over divisors
    superposition sample <values...>   — Draw one eigenstate

Values are read as int, then float, then text. Non-numeric values are
accepted and simply excluded pair by pair, the same as in the library.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Optional

from ..config import LOG_LEVELS, get_config, setup_logging
from ..domain import Mode, Superposition, display, format_value
from ..engine.combination import combine
from ..engine.filtering import filter_by
from ..sampling import random_eigenstate
from .demo import format_values, is_prime, parse_value, run_examples

logger = logging.getLogger(__name__)

# Short command-line names for engine operators
OPERATOR_ALIASES = {
    "add": "add",
    "sub": "subtract",
    "mul": "multiply",
    "div": "divide",
    "mod": "modulo",
}

COMPARISON_ALIASES = {
    "lt": "less_than",
    "gt": "greater_than",
    "eq": "equal_to",
}


# =============================================================================
# OPERAND PARSING
# =============================================================================

def build_operand(values: list[str], mode: str) -> Superposition:
    """Build a superposition from raw command-line tokens."""
    return Superposition(
        values=tuple(parse_value(v) for v in values),
        mode=Mode(mode),
    )


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_result(result: Superposition) -> list[str]:
    """Format a result superposition for display."""
    return [
        f"Result:      {display(result)}",
        f"Mode:        {result.mode.value}",
        f"Eigenstates: {format_values(result.eigenstates())}",
        f"Truth:       {result.is_true()}",
    ]


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_demo(args: argparse.Namespace) -> int:
    """Run the worked examples."""
    for i, section in enumerate(run_examples()):
        if i:
            print()
        print(section.title)
        for line in section.lines:
            print(f"  {line}")
    return 0


def cmd_combine(args: argparse.Namespace) -> int:
    """Combine two operands pairwise."""
    left = build_operand(args.left, args.left_mode)
    right = build_operand(args.right, args.right_mode)

    result = combine(left, right, OPERATOR_ALIASES[args.operator])

    for line in format_result(result.superposition):
        print(line)

    if args.explain:
        print()
        print(f"PAIRS ({result.pairs_evaluated} evaluated, {len(result.exclusions)} excluded):")
        for outcome in result.outcomes:
            print(f"  • {outcome.describe()}")

    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Filter the left operand by a comparison against the right."""
    left = build_operand(args.left, args.left_mode)
    right = build_operand(args.right, args.right_mode)

    result = filter_by(left, right, COMPARISON_ALIASES[args.comparison])

    for line in format_result(result.superposition):
        print(line)

    if args.explain:
        print()
        print(f"REJECTED: {format_values(result.rejected)}")
        print(f"PAIRS ({len(result.outcomes)} visited, {len(result.exclusions)} without verdict):")
        for outcome in result.outcomes:
            print(f"  • {outcome.describe()}")

    return 0


def cmd_prime(args: argparse.Namespace) -> int:
    """Report whether an integer is prime."""
    try:
        verdict = is_prime(args.number)
    except ValueError as e:
        print(f"ERROR: {e}")
        return 1

    print(f"{args.number} is prime" if verdict else f"{args.number} is not prime")
    return 0


def cmd_sample(args: argparse.Namespace) -> int:
    """Draw one eigenstate with an explicitly seeded generator."""
    seed = args.seed if args.seed is not None else get_config().sample_seed
    rng = random.Random(seed)

    source = build_operand(args.values, args.mode)
    choice = random_eigenstate(source, rng=rng)
    logger.debug(f"Sampled {choice!r} from {len(source.values)} eigenstates (seed={seed})")

    print(format_value(choice))
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def _add_operand_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--left",
        nargs="*",
        default=[],
        metavar="VALUE",
        help="Left operand eigenstates",
    )
    parser.add_argument(
        "--right",
        nargs="*",
        default=[],
        metavar="VALUE",
        help="Right operand eigenstates",
    )
    parser.add_argument(
        "--left-mode",
        choices=[m.value for m in Mode],
        default=Mode.DISJUNCTIVE.value,
        help="Mode of the left operand (default: any)",
    )
    parser.add_argument(
        "--right-mode",
        choices=[m.value for m in Mode],
        default=Mode.DISJUNCTIVE.value,
        help="Mode of the right operand (default: any)",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Show every evaluated pair and each exclusion",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="superposition",
        description="Superposition algebra — any/all value bundles with pairwise arithmetic",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=None,
        help="Logging level (default: SUPERPOSITION_LOG_LEVEL or WARNING)",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # Demo command
    demo_parser = subparsers.add_parser(
        "demo",
        help="Run the worked examples",
    )
    demo_parser.set_defaults(func=cmd_demo)

    # Combine command
    combine_parser = subparsers.add_parser(
        "combine",
        help="Pairwise arithmetic between two operands",
    )
    combine_parser.add_argument(
        "operator",
        choices=list(OPERATOR_ALIASES.keys()),
        help="Arithmetic operator",
    )
    _add_operand_arguments(combine_parser)
    combine_parser.set_defaults(func=cmd_combine)

    # Compare command
    compare_parser = subparsers.add_parser(
        "compare",
        help="Filter the left operand by a comparison",
    )
    compare_parser.add_argument(
        "comparison",
        choices=list(COMPARISON_ALIASES.keys()),
        help="Comparison operator",
    )
    _add_operand_arguments(compare_parser)
    compare_parser.set_defaults(func=cmd_compare)

    # Prime command
    prime_parser = subparsers.add_parser(
        "prime",
        help="Primality test via modulo over all divisors",
    )
    prime_parser.add_argument(
        "number",
        type=parse_value,
        help="Integer to test",
    )
    prime_parser.set_defaults(func=cmd_prime)

    # Sample command
    sample_parser = subparsers.add_parser(
        "sample",
        help="Draw one eigenstate at random",
    )
    sample_parser.add_argument(
        "values",
        nargs="+",
        metavar="VALUE",
        help="Eigenstates to draw from",
    )
    sample_parser.add_argument(
        "--mode",
        choices=[m.value for m in Mode],
        default=Mode.DISJUNCTIVE.value,
        help="Mode of the superposition (default: any)",
    )
    sample_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Generator seed (default: SUPERPOSITION_SEED or unseeded)",
    )
    sample_parser.set_defaults(func=cmd_sample)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config()
    except ValueError as e:
        print("ERROR: Invalid configuration")
        print(f"Reason: {e}")
        return 1

    if not config.validate():
        print("ERROR: Invalid configuration")
        print(f"Reason: log level must be one of {list(LOG_LEVELS)}, got {config.log_level!r}")
        return 1

    setup_logging(args.log_level or config.log_level, config.log_file)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
