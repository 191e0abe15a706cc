#!/usr/bin/env python3
"""Print the exact, simplified and closest common aspect ratio of an image size."""

import argparse
import logging
import re
import sys
from typing import List, Optional, Tuple

from aspectratio import AspectDescription, ApproximationResult, describe, load_settings
from aspectratio.errors import DomainError

logger = logging.getLogger("describe_aspect")


def parse_size(values: List[str]) -> Tuple[int, int]:
    """Accept ``WIDTH HEIGHT`` or a single ``WIDTHxHEIGHT``, ``WIDTH:HEIGHT`` or ``WIDTH/HEIGHT``."""
    if len(values) == 1:
        parts = re.split(r"[:/xX]", values[0])
    else:
        parts = values
    if len(parts) != 2:
        raise ValueError(f"Expected WIDTH HEIGHT or WIDTHxHEIGHT, got {' '.join(values)!r}")
    try:
        width, height = (int(part.strip()) for part in parts)
    except ValueError as exc:
        raise ValueError(f"Width and height must be integers, got {' '.join(values)!r}") from exc
    return width, height


def format_item(label: str, result: ApproximationResult) -> str:
    return f"{label} {format(result.fraction, ':')} ({result.error * 100:.2f}% error)"


def render(description: AspectDescription) -> List[str]:
    lines = [f"Exactly {format(description.exact, ':')}"]
    if description.approximate is not None:
        lines.append(format_item("Approx.", description.approximate))
    if description.common is not None:
        lines.append(format_item("Closest common is", description.common))
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print the exact, simplified and closest common aspect ratio of an image size.",
    )
    parser.add_argument("size", nargs="+", help="WIDTH HEIGHT, or WIDTHxHEIGHT")
    parser.add_argument(
        "--max-denominator",
        dest="max_denominator",
        type=int,
        help="Largest denominator of the simplified ratio (default 10)",
    )
    parser.add_argument("--config", dest="config", help="TOML settings file with an [aspect] table")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(args.config)
        max_denominator = settings.max_denominator
        if args.max_denominator is not None:
            max_denominator = args.max_denominator
        width, height = parse_size(args.size)
        description = describe(
            width,
            height,
            max_denominator=max_denominator,
            table=settings.common_ratios,
        )
    except (DomainError, ValueError, OSError) as exc:
        logger.debug("Failed to describe %s", args.size, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for line in render(description):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
