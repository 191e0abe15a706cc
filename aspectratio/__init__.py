"""Exact aspect ratio utilities package."""

from .errors import DomainError, InvalidBound, NonIntegerOperand, ZeroDenominator
from .rational import Rational, gcd, rationalize
from .ratios import (
    COMMON_RATIOS,
    DEFAULT_MAX_DENOMINATOR,
    ApproximationResult,
    find_approximate_aspect_ratio,
    find_closest_common_aspect_ratio,
)
from .query import AspectDescription, describe, describe_many
from .config import Settings, load_settings, parse_ratio

__all__ = [
    "ApproximationResult",
    "AspectDescription",
    "COMMON_RATIOS",
    "DEFAULT_MAX_DENOMINATOR",
    "DomainError",
    "InvalidBound",
    "NonIntegerOperand",
    "Rational",
    "Settings",
    "ZeroDenominator",
    "describe",
    "describe_many",
    "find_approximate_aspect_ratio",
    "find_closest_common_aspect_ratio",
    "gcd",
    "load_settings",
    "parse_ratio",
    "rationalize",
]
