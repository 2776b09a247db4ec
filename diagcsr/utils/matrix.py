# utils/matrix.py
from __future__ import annotations
from typing import Any, List, Sequence, Tuple

import numpy as np

from diagcsr.core.exceptions import DiagsInputError


# dtypes scipy.sparse can store among the inexact ones; float16 is not one of them
SPARSE_DTYPES = frozenset((
    np.float32, np.float64, np.longdouble,
    np.complex64, np.complex128, np.clongdouble,
))


def inexact_dtype(requested: Any) -> np.dtype:
    """Parse a user-supplied dtype, accepting only floating and complex types scipy.sparse supports."""
    try:
        dtype = np.dtype(requested)
    except TypeError as e:
        raise DiagsInputError(f"Unknown dtype {requested!r}: {e}")
    if not np.issubdtype(dtype, np.inexact):
        raise DiagsInputError(f"Requested dtype {dtype} is not a floating or complex type")
    if dtype.type not in SPARSE_DTYPES:
        raise DiagsInputError(f"Requested dtype {dtype} is not supported by scipy.sparse")
    return dtype


def resolve_dtype(table_dtype: np.dtype, requested: Any = None) -> np.dtype:
    """
    Pick the scalar type of the output matrix.

    Floating and complex tables keep their dtype, integer and boolean tables are
    promoted to float64. An explicit `requested` dtype wins but must be inexact,
    and a complex table cannot be narrowed to a real type.
    """
    is_int = np.issubdtype(table_dtype, np.integer) or np.issubdtype(table_dtype, np.bool_)
    if not (is_int or np.issubdtype(table_dtype, np.inexact)):
        raise DiagsInputError(f"Band table has non-numeric dtype {table_dtype}")

    if requested is not None:
        dtype = inexact_dtype(requested)
        if np.issubdtype(table_dtype, np.complexfloating) and not np.issubdtype(dtype, np.complexfloating):
            raise DiagsInputError(
                f"Complex band table cannot be converted to {dtype} without dropping the imaginary part"
            )
        return dtype

    if is_int:
        return np.dtype(np.float64)
    if table_dtype.type not in SPARSE_DTYPES:
        raise DiagsInputError(f"Band table dtype {table_dtype} is not supported by scipy.sparse")
    return table_dtype


def as_band_table(bands: Any, dtype: Any = None, single: bool = False) -> np.ndarray:
    """
    Coerce `bands` into a 2D (K, L) ndarray of an inexact dtype.

    With `single=True` a 1D sequence is accepted and treated as one band.
    The result is always a fresh array, never a view of the caller's data.
    """
    try:
        table = np.asarray(bands)
    except ValueError as e:      # ragged nested lists
        raise DiagsInputError(f"Bands must form a rectangular table: {e}")

    if table.dtype == object:
        raise DiagsInputError("Bands must form a rectangular numeric table")

    if single and table.ndim == 1:
        table = table[np.newaxis, :]
    if table.ndim == 1 and table.size == 0:
        table = table.reshape(0, 0)
    if table.ndim != 2:
        raise DiagsInputError(f"Bands must be a 2D table, got {table.ndim} dimension(s)")

    return np.array(table, dtype=resolve_dtype(table.dtype, dtype), copy=True)


def normalize_offsets(offsets: Any) -> Tuple[List[int], bool]:
    """
    Return (offsets as a list of Python ints, whether a single scalar was given).
    """
    if isinstance(offsets, np.ndarray) and offsets.ndim == 0:
        offsets = offsets.item()
    if np.isscalar(offsets):
        return [_as_offset(offsets)], True
    try:
        return [_as_offset(o) for o in offsets], False
    except TypeError:
        raise DiagsInputError(f"Offsets must be an integer or a sequence of integers, got {offsets!r}")


def _as_offset(value: Any) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise DiagsInputError(f"Offsets must be integers, got {value!r}")
    return int(value)


def normalize_shape(shape: Sequence[Any]) -> Tuple[int, int]:
    """Validate a (rows, cols) pair of non-negative integers."""
    try:
        rows, cols = shape
    except (TypeError, ValueError):
        raise DiagsInputError(f"Shape must be a (rows, cols) pair, got {shape!r}")
    dims = []
    for d in (rows, cols):
        if isinstance(d, (bool, np.bool_)) or not isinstance(d, (int, np.integer)):
            raise DiagsInputError(f"Shape entries must be integers, got {shape!r}")
        if d < 0:
            raise DiagsInputError(f"Shape entries must be non-negative, got {shape!r}")
        dims.append(int(d))
    return dims[0], dims[1]

