# core/validation.py
"""
Input-contract checks for diagonal construction.

Everything here runs before a single triplet is emitted, so a failing input
never yields a partially populated matrix.
"""
from collections import Counter
from typing import List, Sequence, Tuple

import numpy as np

from diagcsr.core.exceptions import BandTooShortError, DiagsInputError, InvalidOffsetError
from diagcsr.core.stamping.placement import DiagonalPlacement, place
from diagcsr.utils.logging_config import get_logger

logger = get_logger(__name__)


def validate_diagonals(
    table: np.ndarray,
    offsets: Sequence[int],
    shape: Tuple[int, int],
) -> List[DiagonalPlacement]:
    """
    Check a (K, L) band table against its offsets and target shape.

    Returns:
        One placement per offset, in offset order.

    Raises:
        DiagsInputError: count mismatch or repeated offsets.
        InvalidOffsetError: an offset places no element inside `shape`.
        BandTooShortError: a band is shorter than its diagonal.
    """
    n_bands, band_len = table.shape
    if n_bands != len(offsets):
        raise DiagsInputError(
            f"Number of bands ({n_bands}) does not match number of offsets ({len(offsets)})"
        )

    repeated = sorted(o for o, count in Counter(offsets).items() if count > 1)
    if repeated:
        raise DiagsInputError(f"Repeated diagonal offsets are not allowed: {repeated}")

    placements: List[DiagonalPlacement] = []
    for k, offset in enumerate(offsets):
        placement = place(offset, shape)
        if placement.is_empty:
            logger.debug("Offset %d rejected for shape %s", offset, shape)
            raise InvalidOffsetError(offset, shape)
        if placement.n > band_len:
            logger.debug("Band %d too short: %d < %d", k, band_len, placement.n)
            raise BandTooShortError(k, offset, placement.n, band_len)
        placements.append(placement)
    return placements
