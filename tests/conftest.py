import numpy as np
import pytest
import scipy.sparse as sp

@pytest.fixture
def golden_bands():
    return np.array([
        [1., 2., 3.],
        [4., 5., 6.],
        [7., 8., 9.],
    ])

@pytest.fixture
def diags_yaml(tmp_path):
    """Write a YAML diagonal description and return its path."""
    def _write(content: str, name: str = "diags.yaml"):
        file = tmp_path / name
        file.write_text(content)
        return file
    return _write

@pytest.fixture
def dummy_logger(caplog):
    caplog.set_level("DEBUG")
    return caplog

@pytest.fixture
def stored_coordinates():
    """Return a function listing the (row, col) of every stored entry, explicit zeros included."""
    def _coords(M):
        coo = sp.coo_matrix(M)
        return list(zip(coo.row.tolist(), coo.col.tolist()))
    return _coords
