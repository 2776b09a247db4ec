# core/stamping/_worker.py
from __future__ import annotations
from typing import Tuple

import numpy as np

from diagcsr.core.stamping.pattern import INDEX_DTYPE, TripletPattern
from diagcsr.core.stamping.placement import DiagonalPlacement
from diagcsr.core.stamping.slicing import slice_rule, take


def diagonal_triplets(
    args: Tuple[
        np.ndarray,               # band (1D)
        DiagonalPlacement,        # validated geometry
        Tuple[int, int],          # matrix shape
    ]
) -> TripletPattern:
    """
    Emit the triplets of one diagonal.

    Takes a single tuple so it can be handed straight to `executor.map`.
    The placement must already be validated (n > 0, band long enough).
    """
    band, placement, shape = args

    values = take(band, slice_rule(placement.offset, shape), placement.n)
    steps = np.arange(placement.n, dtype=INDEX_DTYPE)

    return TripletPattern(
        rows=steps + placement.row,
        cols=steps + placement.col,
        data=np.array(values, copy=True),   # detach from the band table
    )
