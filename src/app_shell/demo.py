"""
Array utilities demo - prints the component operations on sample data.

Usage:
    python -m src.app_shell.demo [--rules rules.yaml] [--size N] [--log-level DEBUG]
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Any

from src.adapters.array_rules import ArrayUtilsRulesAdapter
from src.components.array_utils import (
    ChunkedFilterInput,
    ChunkedReduceInput,
    ChunkInput,
    DeduplicateInput,
    RulesPort,
    SetDifferenceInput,
    run,
)
from src.rules.loader import load_rules
from src.rules.models import LOG_LEVELS

logger = logging.getLogger("demo")

SAMPLE_DUPLICATES = [1, 2, 2, 3, 3, 4, 5]
SAMPLE_LEFT = [1, 2, 3, 4]
SAMPLE_RIGHT = [3, 4, 5, 6]
SAMPLE_LONG = [1, 2, 3, 4, 5, 6, 7, 8, 9]
SAMPLE_SHORT = [1, 2, 3, 4, 5]
SAMPLE_FRUITS = ["apple", "banana", "apple", "orange", "banana"]


def _print_result(label: str, result: Any) -> bool:
    if not result.success:
        for error in result.errors:
            print(f"{label}: error [{error.code}] {error.message}")
        return False
    value = getattr(result, "chunks", None)
    if value is None:
        value = getattr(result, "items", None)
    if value is None:
        value = result.value
    print(f"{label}: {value}")
    return True


def run_demo(rules: RulesPort, size: int | None = None) -> int:
    """Print every demo scenario. Returns 0, or 2 if a chunk size was rejected."""
    ok = True

    ok &= _print_result(
        "Remove duplicates", run(DeduplicateInput(items=SAMPLE_DUPLICATES), rules=rules)
    )
    ok &= _print_result(
        "Unique fruits", run(DeduplicateInput(items=SAMPLE_FRUITS), rules=rules)
    )
    ok &= _print_result(
        "Unique to array1",
        run(SetDifferenceInput(items=SAMPLE_LEFT, exclude=SAMPLE_RIGHT), rules=rules),
    )
    ok &= _print_result(
        "Chunked", run(ChunkInput(items=SAMPLE_LONG, size=size), rules=rules)
    )
    ok &= _print_result(
        "Chunked (uneven)", run(ChunkInput(items=SAMPLE_SHORT, size=size), rules=rules)
    )
    ok &= _print_result(
        "Even numbers (chunked filter)",
        run(
            ChunkedFilterInput(
                items=list(range(1, 21)), predicate=lambda n: n % 2 == 0, chunk_size=size
            ),
            rules=rules,
        ),
    )
    ok &= _print_result(
        "Sum (chunked reduce)",
        run(
            ChunkedReduceInput(
                items=list(range(1, 101)),
                reducer=lambda total, n: total + n,
                initial=0,
                chunk_size=size,
            ),
            rules=rules,
        ),
    )

    return 0 if ok else 2


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Array utilities demo")
    parser.add_argument("--rules", help="Path to rules.yaml")
    parser.add_argument("--size", type=int, help="Chunk size (defaults to rules)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override observability.logs.level",
    )
    args = parser.parse_args(argv)

    try:
        rules = load_rules(args.rules)
    except (FileNotFoundError, ValueError) as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error("Could not load rules: %s", e)
        return 1

    log_rules = rules.observability.logs
    logging.basicConfig(
        level=args.log_level or log_rules.level,
        format=log_rules.format,
    )
    logger.info("Loaded rules for %s (v%s)", rules.project.slug, rules.project.rules_version)

    return run_demo(ArrayUtilsRulesAdapter(rules), size=args.size)


if __name__ == "__main__":
    sys.exit(main())
