"""TOML settings for the command line front end."""
from __future__ import annotations

import logging
import re
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .rational import Rational
from .ratios import COMMON_RATIOS, DEFAULT_MAX_DENOMINATOR

logger = logging.getLogger(__name__)

_RATIO_PATTERN = re.compile(r"^\s*(\d+)\s*[:/xX]\s*(\d+)\s*$")


@dataclass(frozen=True)
class Settings:
    max_denominator: int = DEFAULT_MAX_DENOMINATOR
    common_ratios: Tuple[Rational, ...] = COMMON_RATIOS


def parse_ratio(text: str) -> Rational:
    """Parse ``"16:9"``, ``"16/9"`` or ``"1920x1080"`` into a :class:`Rational`."""
    match = _RATIO_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Malformed ratio {text!r}; expected WIDTH:HEIGHT")
    return Rational(int(match.group(1)), int(match.group(2)))


def _settings_from_table(table: Dict[str, Any], source: Path) -> Settings:
    unknown = set(table) - {"max_denominator", "common_ratios"}
    if unknown:
        raise ValueError(f"Unknown keys in [aspect] of {source}: {', '.join(sorted(unknown))}")

    max_denominator = table.get("max_denominator", DEFAULT_MAX_DENOMINATOR)
    if isinstance(max_denominator, bool) or not isinstance(max_denominator, int):
        raise ValueError(f"max_denominator in {source} must be an integer")
    if max_denominator < 1:
        raise ValueError(f"max_denominator in {source} must be at least 1")

    if "common_ratios" in table:
        entries = table["common_ratios"]
        if not isinstance(entries, list) or not entries:
            raise ValueError(f"common_ratios in {source} must be a non-empty list")
        common_ratios = tuple(parse_ratio(str(entry)) for entry in entries)
    else:
        common_ratios = COMMON_RATIOS

    return Settings(max_denominator=max_denominator, common_ratios=common_ratios)


def load_settings(path: Optional[str | Path] = None) -> Settings:
    """Read settings from the ``[aspect]`` table of a TOML file.

    Without *path* the built-in defaults are returned.
    """
    if path is None:
        return Settings()

    source = Path(path).expanduser()
    if not source.exists():
        raise FileNotFoundError(f"Settings file not found: {source}")
    with source.open("rb") as fh:
        data = tomllib.load(fh)

    table = data.get("aspect", {})
    if not isinstance(table, dict):
        raise ValueError(f"[aspect] in {source} must be a table, got {type(table).__name__}")
    settings = _settings_from_table(table, source)
    logger.debug(
        "Loaded settings from %s: max_denominator=%d, %d common ratios",
        source,
        settings.max_denominator,
        len(settings.common_ratios),
    )
    return settings


__all__ = ["Settings", "load_settings", "parse_ratio"]
