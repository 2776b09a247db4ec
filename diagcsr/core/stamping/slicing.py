"""
Choose which contiguous run of a band feeds its diagonal.

For square and tall matrices sub-diagonals are read from the head of their band
and the main/super-diagonals from the tail. Wide matrices flip both, so the
band values stay aligned with the longer dimension.
"""
from __future__ import annotations
from enum import Enum
from typing import Tuple

import numpy as np


class SliceRule(Enum):
    TAKE_FIRST_N = "first"
    TAKE_LAST_N = "last"


def slice_rule(offset: int, shape: Tuple[int, int]) -> SliceRule:
    rows, cols = shape
    below = offset < 0
    tall = rows >= cols
    # sub-diagonal in a tall matrix, or main/super-diagonal in a wide one
    if below == tall:
        return SliceRule.TAKE_FIRST_N
    return SliceRule.TAKE_LAST_N


def take(band: np.ndarray, rule: SliceRule, n: int) -> np.ndarray:
    """Return `n` elements of `band` as selected by `rule` (a view, not a copy)."""
    if n <= 0:
        return band[:0]
    if rule is SliceRule.TAKE_FIRST_N:
        return band[:n]
    return band[band.shape[0] - n:]
