from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
import scipy.sparse as sp

INDEX_DTYPE = np.intp


@dataclass(frozen=True)
class TripletPattern:
    """
    Immutable COO triplets (row, col, value).

    Arrays are flagged read-only on construction; the pattern is consumed once
    by `to_csr` and never exposed to callers of the builder.
    """
    rows: np.ndarray
    cols: np.ndarray
    data: np.ndarray

    def __post_init__(self):
        if not (self.rows.shape == self.cols.shape == self.data.shape) or self.rows.ndim != 1:
            raise ValueError("rows, cols and data must be 1D arrays of equal length")
        for arr in (self.rows, self.cols, self.data):
            arr.flags.writeable = False

    @property
    def nnz(self) -> int:         # number of stored triplets
        return self.rows.size

    @classmethod
    def empty(cls, dtype) -> "TripletPattern":
        return cls(
            rows=np.empty(0, dtype=INDEX_DTYPE),
            cols=np.empty(0, dtype=INDEX_DTYPE),
            data=np.empty(0, dtype=dtype),
        )

    @classmethod
    def concat(cls, batches: Sequence["TripletPattern"], dtype) -> "TripletPattern":
        """Merge per-diagonal batches; order is irrelevant to the final matrix."""
        if not batches:
            return cls.empty(dtype)
        return cls(
            rows=np.concatenate([b.rows for b in batches]).astype(INDEX_DTYPE, copy=False),
            cols=np.concatenate([b.cols for b in batches]).astype(INDEX_DTYPE, copy=False),
            data=np.concatenate([b.data for b in batches]).astype(dtype, copy=False),
        )

    def to_csr(self, shape: Tuple[int, int]) -> sp.csr_matrix:
        # coo -> csr sorts indices; explicit zeros stay stored
        return sp.coo_matrix(
            (self.data, (self.rows, self.cols)),
            shape=shape,
            dtype=self.data.dtype,
        ).tocsr()
