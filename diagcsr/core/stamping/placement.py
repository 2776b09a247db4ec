from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class DiagonalPlacement:
    """
    Geometry of one diagonal inside a (rows, cols) matrix.

    `row`/`col` is the first coordinate on the diagonal and `n` the number of
    elements that fit. `n <= 0` means the diagonal misses the matrix entirely.
    """
    offset: int
    row: int
    col: int
    n: int

    @property
    def is_empty(self) -> bool:
        return self.n <= 0


def place(offset: int, shape: Tuple[int, int]) -> DiagonalPlacement:
    rows, cols = shape
    i = max(0, -offset)
    j = max(0, offset)
    return DiagonalPlacement(offset=offset, row=i, col=j, n=min(rows - i, cols - j))
