"""Utility functions for split-ide."""

import math
from typing import Iterable

from .config.defaults import MAX_RATIO, MIN_RATIO, UNTITLED_FIRST_NUMBER, UNTITLED_PREFIX


def clamp_ratio(ratio: float) -> float:
    """Clamp a split ratio into the allowed range."""
    return max(MIN_RATIO, min(MAX_RATIO, ratio))


def is_finite(value: float) -> bool:
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def unique_untitled_name(existing_names: Iterable[str]) -> str:
    """Return the first ``Untitled-N`` (N >= 2) not in ``existing_names``."""
    taken = set(existing_names)
    number = UNTITLED_FIRST_NUMBER
    while f"{UNTITLED_PREFIX}-{number}" in taken:
        number += 1
    return f"{UNTITLED_PREFIX}-{number}"
