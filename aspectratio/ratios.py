"""Simple and catalog approximations of an exact aspect ratio."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .errors import DomainError
from .rational import Rational

DEFAULT_MAX_DENOMINATOR = 10

# Table order decides ties: the first entry at the smallest distance wins.
COMMON_RATIOS: Tuple[Rational, ...] = tuple(
    Rational(width, height, normalize=False)
    for width, height in (
        (1, 1),
        (2, 3),
        (3, 2),
        (3, 4),
        (4, 3),
        (16, 9),
        (9, 16),
        (5, 4),
        (4, 5),
        (3, 5),
        (5, 3),
        (3, 1),
    )
)


def _ensure_nonzero(ratio: Rational) -> None:
    # Relative error is undefined against a zero ratio.
    if not ratio:
        raise DomainError(f"cannot approximate a zero ratio ({ratio})")


@dataclass(frozen=True)
class ApproximationResult:
    """An approximating fraction and its error relative to the exact ratio."""

    fraction: Rational
    error: float


def find_approximate_aspect_ratio(
    ratio: Rational, max_denominator: int = DEFAULT_MAX_DENOMINATOR
) -> ApproximationResult:
    """Return the best approximation of *ratio* with a small denominator."""
    _ensure_nonzero(ratio)
    limited = ratio.limit_denominator(max_denominator)
    error = limited.subtract(ratio).abs().to_number() / ratio.to_number()
    return ApproximationResult(limited, error)


def find_closest_common_aspect_ratio(
    ratio: Rational, table: Sequence[Rational] = COMMON_RATIOS
) -> ApproximationResult:
    """Return the entry of *table* closest to *ratio*."""
    _ensure_nonzero(ratio)
    if not table:
        raise ValueError("table of common ratios must not be empty")

    closest = None
    best = float("inf")
    for candidate in table:
        difference = candidate.subtract(ratio).abs().to_number()
        if difference < best:
            closest = candidate
            best = difference
    return ApproximationResult(closest, best / ratio.to_number())


__all__ = [
    "ApproximationResult",
    "COMMON_RATIOS",
    "DEFAULT_MAX_DENOMINATOR",
    "find_approximate_aspect_ratio",
    "find_closest_common_aspect_ratio",
]
