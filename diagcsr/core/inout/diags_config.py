# core/inout/diags_config.py
"""
Load and validate YAML diagonal-matrix descriptions.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from cerberus import Validator

from diagcsr.core.exceptions import ConfigError
from diagcsr.utils.logging_config import get_logger

logger = get_logger(__name__)


# Cerberus schema for a diagonal-matrix description
DIAGS_SCHEMA: Dict[str, Any] = {
    'shape': {
        'type': 'list',
        'required': True,
        'minlength': 2,
        'maxlength': 2,
        'schema': {'type': 'integer', 'min': 0},
    },
    'offsets': {
        'type': 'list',
        'required': True,
        'schema': {'type': 'integer'},
    },
    'bands': {
        'type': 'list',
        'required': True,
        'schema': {
            'type': 'list',
            'schema': {'type': 'number'},
        },
    },
    'dtype': {
        'type': 'string',
        'required': False,
        'allowed': ['float32', 'float64', 'complex64', 'complex128'],
    },
    'parallel': {'type': 'boolean', 'required': False},
    'max_workers': {'type': 'integer', 'required': False, 'min': 1, 'nullable': True},
}


@dataclass
class DiagsConfig:
    shape: Tuple[int, int]
    offsets: List[int]
    bands: List[List[float]]
    dtype: Optional[str] = None
    parallel: bool = False
    max_workers: Optional[int] = None

    def builder_options(self) -> Dict[str, Any]:
        """Keyword arguments for DiagonalMatrixBuilder."""
        return {'dtype': self.dtype, 'parallel': self.parallel, 'max_workers': self.max_workers}


def validate_schema(data: Any, schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate parsed YAML against a cerberus schema and return the normalized document.

    Raises:
        ConfigError: If the document is not a mapping or fails validation.
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping at top level, got {type(data).__name__}")
    validator = Validator(schema, allow_unknown=False)
    if not validator.validate(data):
        logger.error("YAML schema validation errors: %s", validator.errors)
        raise ConfigError(f"Diagonal config schema validation failed: {validator.errors}")
    return validator.document


def load_diags_config(path: Path) -> DiagsConfig:
    """
    Read a YAML diagonal description, validate its schema, and return a DiagsConfig.

    Band lengths, offsets and shape are only checked structurally here; the
    builder enforces the geometric contract.

    Raises:
        ConfigError: If the file cannot be read or parsed, or the schema check fails.
    """
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read diagonal YAML '{path}': {e}")

    doc = validate_schema(raw, DIAGS_SCHEMA)
    rows, cols = doc['shape']
    return DiagsConfig(
        shape=(rows, cols),
        offsets=list(doc['offsets']),
        bands=[list(band) for band in doc['bands']],
        dtype=doc.get('dtype'),
        parallel=doc.get('parallel', False),
        max_workers=doc.get('max_workers'),
    )
