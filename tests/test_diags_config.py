import pytest

from diagcsr.core.exceptions import ConfigError
from diagcsr.core.inout.diags_config import DIAGS_SCHEMA, load_diags_config, validate_schema

def test_load_valid_config(diags_yaml):
    file = diags_yaml("""
shape: [3, 5]
offsets: [-1, 0, 1]
bands:
  - [1, 2, 3]
  - [4, 5, 6]
  - [7, 8, 9]
dtype: float32
parallel: true
max_workers: 2
""")
    config = load_diags_config(file)
    assert config.shape == (3, 5)
    assert config.offsets == [-1, 0, 1]
    assert config.bands[2] == [7, 8, 9]
    assert config.builder_options() == {"dtype": "float32", "parallel": True, "max_workers": 2}

def test_optional_keys_default(diags_yaml):
    file = diags_yaml("""
shape: [2, 2]
offsets: [0]
bands: [[1.5, 2.5]]
""")
    config = load_diags_config(str(file))
    assert config.dtype is None
    assert config.parallel is False
    assert config.max_workers is None

@pytest.mark.parametrize("content", [
    # missing bands
    "shape: [3, 3]\noffsets: [0]\n",
    # shape needs two entries
    "shape: [3]\noffsets: [0]\nbands: [[1, 2, 3]]\n",
    # negative dimension
    "shape: [-1, 3]\noffsets: [0]\nbands: [[1]]\n",
    # unsupported dtype
    "shape: [1, 1]\noffsets: [0]\nbands: [[1]]\ndtype: int8\n",
    # unknown key
    "shape: [1, 1]\noffsets: [0]\nbands: [[1]]\nformat: dia\n",
    # non-numeric band value
    "shape: [1, 1]\noffsets: [0]\nbands: [[x]]\n",
])
def test_schema_errors(diags_yaml, content):
    with pytest.raises(ConfigError):
        load_diags_config(diags_yaml(content))

def test_top_level_must_be_mapping(diags_yaml):
    with pytest.raises(ConfigError, match="mapping"):
        load_diags_config(diags_yaml("- 1\n- 2\n"))

def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="Failed to read"):
        load_diags_config(tmp_path / "nope.yaml")

def test_malformed_yaml(diags_yaml):
    with pytest.raises(ConfigError):
        load_diags_config(diags_yaml("shape: [1, 2\n"))

def test_validation_errors_are_logged(dummy_logger):
    with pytest.raises(ConfigError):
        validate_schema({"shape": [1, 1]}, DIAGS_SCHEMA)
    assert "schema validation errors" in dummy_logger.text
