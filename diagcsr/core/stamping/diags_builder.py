# core/stamping/diags_builder.py
"""
Assemble a CSR matrix from dense diagonal bands.

Each offset is turned into a batch of COO triplets, the batches are merged into
one immutable pattern, and the pattern is converted to CSR in a single step.
"""
from typing import Any, List, Optional, Sequence, Tuple
from concurrent.futures import ProcessPoolExecutor

import scipy.sparse as sp

from diagcsr.core.exceptions import DiagsInputError
from diagcsr.core.validation import validate_diagonals
from diagcsr.core.stamping.pattern import TripletPattern
from diagcsr.core.stamping._worker import diagonal_triplets
from diagcsr.utils.matrix import as_band_table, inexact_dtype, normalize_offsets, normalize_shape
from diagcsr.utils.logging_config import get_logger

logger = get_logger(__name__)


class DiagonalMatrixBuilder:
    def __init__(self, dtype: Any = None, parallel: bool = False, max_workers: Optional[int] = None):
        if max_workers is not None:
            if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1:
                raise DiagsInputError(f"max_workers must be a positive integer, got {max_workers!r}")
        self.dtype       = None if dtype is None else inexact_dtype(dtype)
        self.parallel    = parallel
        self.max_workers = max_workers

    def build(self, bands: Any, offsets: Any, shape: Sequence[int]) -> sp.csr_matrix:
        """
        Build a (rows, cols) CSR matrix whose k-th diagonal band sits on offsets[k].

        Args
        ----
        bands : array_like, (K, L)
            One row per diagonal. A 1D sequence is accepted when `offsets`
            is a single integer.
        offsets : int or sequence of int
            Diagonal offsets; negative is below the main diagonal.
        shape : (rows, cols)
            Target shape, rectangular allowed.

        Returns
        -------
        csr_matrix with the band table's dtype (integers promoted to float64).

        Raises
        ------
        DiagsInputError, InvalidOffsetError, BandTooShortError
            Before any triplet is emitted.
        """
        offset_list, single = normalize_offsets(offsets)
        shape = normalize_shape(shape)
        table = as_band_table(bands, dtype=self.dtype, single=single)

        placements = validate_diagonals(table, offset_list, shape)
        for p in placements:
            logger.debug("offset %d -> origin (%d, %d), %d element(s)", p.offset, p.row, p.col, p.n)

        tasks: List[Tuple] = [(table[k], p, shape) for k, p in enumerate(placements)]
        batches = self._run(tasks)

        pattern = TripletPattern.concat(batches, dtype=table.dtype)
        logger.debug("Assembled %d triplet(s) from %d diagonal(s) into %s matrix",
                     pattern.nnz, len(placements), shape)
        return pattern.to_csr(shape)

    def _run(self, tasks: List[Tuple]) -> List[TripletPattern]:
        if not self.parallel or len(tasks) < 2:
            return [diagonal_triplets(t) for t in tasks]

        with ProcessPoolExecutor(max_workers=self.max_workers) as executor:
            return list(executor.map(diagonal_triplets, tasks))


def diags(bands: Any, offsets: Any, shape: Sequence[int], **options) -> sp.csr_matrix:
    """
    Shortcut for ``DiagonalMatrixBuilder(**options).build(bands, offsets, shape)``.

    >>> diags([[1., 2., 3.]], [0], (3, 3)).toarray()
    array([[1., 0., 0.],
           [0., 2., 0.],
           [0., 0., 3.]])
    """
    return DiagonalMatrixBuilder(**options).build(bands, offsets, shape)
