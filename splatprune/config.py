"""Configuration for an opacity pruning run."""

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union
import json
import os

import yaml
from addict import Dict as AttrDict

from .planner import validate_percentage
from .schema import DEFAULT_PERCENTAGES

_YAML_EXTENSIONS = (".yaml", ".yml")


@dataclass(frozen=True)
class PruneConfig:
    input_file: str
    output_dir: str
    percentages: Tuple[int, ...] = DEFAULT_PERCENTAGES
    show_progress: bool = True

    def __post_init__(self):
        # Repeated levels would write the same file twice.
        levels = tuple(dict.fromkeys(validate_percentage(p) for p in self.percentages))
        object.__setattr__(self, 'percentages', levels)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PruneConfig':
        """Build a config from a plain dict, rejecting unknown keys.

        Args:
            data: Dict with 'input_file' and 'output_dir', optionally
                  'percentages' (list of ints) and 'show_progress' (bool).

        Returns:
            PruneConfig: The validated configuration.
        """
        data = AttrDict(data)
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        if not data.input_file or not data.output_dir:
            raise ValueError("Config requires 'input_file' and 'output_dir'")

        return cls(
            input_file=str(data.input_file),
            output_dir=str(data.output_dir),
            percentages=tuple(data.get('percentages', DEFAULT_PERCENTAGES)),
            show_progress=bool(data.get('show_progress', True)),
        )


def load_config(config_path: str) -> AttrDict:
    """Load a YAML configuration file and return it as an addict.Dict."""
    with open(config_path, 'r') as f:
        config_data = yaml.safe_load(f)
    if not isinstance(config_data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")
    return AttrDict(config_data)


def parse_config(config: Union[PruneConfig, Dict[str, Any], str]) -> PruneConfig:
    """
    Normalize any supported config form into a PruneConfig.

    Args:
        config: Can be:
                - PruneConfig object
                - Dictionary with config data
                - Path to a .yaml/.yml file
                - JSON string with config data

    Returns:
        PruneConfig
    """
    if isinstance(config, PruneConfig):
        return config
    if isinstance(config, dict):
        return PruneConfig.from_dict(config)
    if isinstance(config, str):
        if os.path.splitext(config)[1].lower() in _YAML_EXTENSIONS:
            return PruneConfig.from_dict(load_config(config))
        return PruneConfig.from_dict(json.loads(config))
    raise TypeError("config must be a PruneConfig, dictionary, YAML path or JSON string")
