"""
Experiment configuration.

An ExperimentConfig loads a YAML definition of a threshold estimation run:

    name: square_200
    grid:
      n: 200
    trials:
      m: 100
      seed: 42
      confidence: 0.95
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional


class ExperimentConfig:
    """
    Loads and validates an experiment configuration YAML.

    Example:
        config = ExperimentConfig.from_yaml('config/square_200.yaml')
        print(config.n, config.m)
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data if data is not None else {}
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'ExperimentConfig':
        """Load experiment config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Experiment config not found: {path}")

        with open(path, 'r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Malformed experiment config {path}: {e}") from e

        return cls(data)

    def _validate(self):
        """Validate required config sections."""
        if not isinstance(self._data, dict):
            raise ValueError("Experiment config must be a mapping")

        required = {'grid': 'n', 'trials': 'm'}
        for section, key in required.items():
            if section not in self._data:
                raise ValueError(f"Missing required config section: '{section}'")
            if not isinstance(self._data[section], dict) or key not in self._data[section]:
                raise ValueError(f"Missing required config key: '{section}.{key}'")

        trials = self._data['trials']
        seed = trials.get('seed')
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise ValueError(f"trials.seed must be an integer, got {seed!r}")
        confidence = trials.get('confidence', 0.95)
        if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
            raise ValueError(f"trials.confidence must be a number, got {confidence!r}")

    # --- Properties ---

    @property
    def name(self) -> str:
        return self._data.get('name', 'percolation')

    @property
    def n(self) -> int:
        return self._data['grid']['n']

    @property
    def m(self) -> int:
        return self._data['trials']['m']

    @property
    def seed(self) -> Optional[int]:
        return self._data['trials'].get('seed')

    @property
    def confidence(self) -> float:
        return float(self._data['trials'].get('confidence', 0.95))
