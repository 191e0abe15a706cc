"""Describe a width/height pair as exact, simplified and common aspect ratios."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np

from .errors import DomainError, ZeroDenominator
from .rational import Rational, _ensure_int
from .ratios import (
    COMMON_RATIOS,
    DEFAULT_MAX_DENOMINATOR,
    ApproximationResult,
    find_approximate_aspect_ratio,
    find_closest_common_aspect_ratio,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AspectDescription:
    """Everything shown for one image size.

    ``approximate`` and ``common`` are ``None`` when they equal ``exact``.
    """

    width: int
    height: int
    exact: Rational
    approximate: Optional[ApproximationResult]
    common: Optional[ApproximationResult]


def _ensure_positive(value: Any, *, name: str) -> int:
    value = _ensure_int(value, name=name)
    if value <= 0:
        if name == "height" and value == 0:
            raise ZeroDenominator("height must be positive, got 0")
        raise DomainError(f"{name} must be positive, got {value}")
    return value


def describe(
    width: int,
    height: int,
    *,
    max_denominator: int = DEFAULT_MAX_DENOMINATOR,
    table: Sequence[Rational] = COMMON_RATIOS,
) -> AspectDescription:
    """Compute the exact, approximate and closest common ratio of ``width:height``."""
    width = _ensure_positive(width, name="width")
    height = _ensure_positive(height, name="height")

    exact = Rational(width, height)
    approximate: Optional[ApproximationResult] = find_approximate_aspect_ratio(
        exact, max_denominator
    )
    if approximate.fraction.compare_to(exact) == 0:
        approximate = None
    common: Optional[ApproximationResult] = find_closest_common_aspect_ratio(exact, table)
    if common.fraction.compare_to(exact) == 0:
        common = None

    logger.debug(
        "%dx%d: exact=%s approximate=%s common=%s",
        width,
        height,
        exact,
        approximate and approximate.fraction,
        common and common.fraction,
    )
    return AspectDescription(width, height, exact, approximate, common)


def describe_many(widths: Any, heights: Any, **kwargs: Any) -> np.ndarray:
    """Element-wise :func:`describe` over broadcastable arrays of sizes.

    Returns an array with ``dtype=object`` holding :class:`AspectDescription`
    values in the broadcast shape of *widths* and *heights*.
    """
    widths = np.asarray(widths)
    heights = np.asarray(heights)
    vectorised = np.vectorize(
        lambda w, h: describe(w, h, **kwargs),
        otypes=[object],
    )
    return vectorised(widths, heights)


__all__ = ["AspectDescription", "describe", "describe_many"]
