import numpy as np
import pytest

from diagcsr.core.stamping.pattern import TripletPattern
from diagcsr.core.stamping.placement import place
from diagcsr.core.stamping._worker import diagonal_triplets

def _pattern(rows, cols, data):
    return TripletPattern(np.array(rows), np.array(cols), np.array(data, dtype=float))

def test_pattern_arrays_are_read_only():
    p = _pattern([0, 1], [1, 2], [3., 4.])
    with pytest.raises(ValueError):
        p.data[0] = 1.
    assert p.nnz == 2

def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        _pattern([0, 1], [1], [3., 4.])

def test_concat_and_to_csr():
    a = _pattern([1, 2], [0, 1], [1., 2.])
    b = _pattern([0], [2], [9.])
    merged = TripletPattern.concat([a, b], dtype=np.float64)
    assert merged.nnz == 3
    mat = merged.to_csr((3, 3))
    expected = np.array([[0., 0., 9.],
                         [1., 0., 0.],
                         [0., 2., 0.]])
    np.testing.assert_array_equal(mat.toarray(), expected)

def test_concat_empty():
    merged = TripletPattern.concat([], dtype=np.float32)
    assert merged.nnz == 0
    assert merged.to_csr((2, 2)).dtype == np.float32

def test_worker_emits_one_diagonal():
    band = np.array([7., 8., 9.])
    shape = (3, 5)
    batch = diagonal_triplets((band, place(1, shape), shape))
    np.testing.assert_array_equal(batch.rows, [0, 1, 2])
    np.testing.assert_array_equal(batch.cols, [1, 2, 3])
    np.testing.assert_array_equal(batch.data, [7., 8., 9.])

def test_worker_copies_band_values():
    band = np.array([1., 2., 3.])
    batch = diagonal_triplets((band, place(0, (3, 3)), (3, 3)))
    band[0] = 100.
    assert batch.data[0] == 1.
