# core/inout/sweep.py
"""
Load and validate YAML AC-analysis configurations.

    analysis:
      output_node: 2
      input_source: V1      # component name or list index
      start: 10
      stop: 1e5
      points_per_decade: 10
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from cerberus import Validator

from core.exceptions import SweepConfigError


# Cerberus schema for the analysis configuration
SWEEP_SCHEMA = {
    'analysis': {
        'type': 'dict',
        'required': True,
        'schema': {
            'output_node': {'type': 'integer', 'required': True, 'coerce': int, 'min': 1},
            'input_source': {'type': ['string', 'integer'], 'required': True},
            'start': {'type': 'float', 'required': True, 'coerce': float, 'min': 0.0},
            'stop': {'type': 'float', 'required': True, 'coerce': float, 'min': 0.0},
            'points_per_decade': {'type': 'integer', 'required': True, 'coerce': int, 'min': 1},
        }
    }
}


@dataclass
class SweepConfig:
    output_node: int
    input_source: Union[str, int]
    start: float
    stop: float
    points_per_decade: int


def parse_sweep_config(raw: Any) -> SweepConfig:
    """Validate an already-loaded analysis document."""
    validator = Validator(SWEEP_SCHEMA, allow_unknown=False)
    if not validator.validate(raw if isinstance(raw, dict) else {}):
        raise SweepConfigError(f"Sweep schema validation errors: {validator.errors}")
    doc: Dict[str, Any] = validator.document['analysis']

    if doc['start'] <= 0:
        raise SweepConfigError("Sweep 'start' must be a positive frequency.")
    if doc['stop'] < doc['start']:
        raise SweepConfigError("Sweep 'stop' must not be below 'start'.")

    return SweepConfig(
        output_node=doc['output_node'],
        input_source=doc['input_source'],
        start=doc['start'],
        stop=doc['stop'],
        points_per_decade=doc['points_per_decade'],
    )


def load_sweep_config(path: Union[str, Path]) -> SweepConfig:
    """
    Load a YAML analysis file, validate its schema, and return a SweepConfig.

    Raises:
        SweepConfigError: If file read fails or schema validation fails.
    """
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        raise SweepConfigError(f"Failed to read sweep YAML '{path}': {e}") from e
    return parse_sweep_config(raw)
