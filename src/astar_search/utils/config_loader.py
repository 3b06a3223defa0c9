"""
YAML configuration file loader for the search scenarios.

This module provides utilities to load and validate YAML configuration files
for the grid and sliding-tile scenarios run by the command line interface.
"""

import copy
import yaml
from typing import Dict, Any, Optional
from pathlib import Path


DEFAULT_CONFIGS: Dict[str, Dict[str, Any]] = {
    'grid': {
        'grid': {
            'width': 20,
            'height': 20,
            'wall_percentage': 25,
            'start': {'x': 0, 'y': 0},
            'goal': {'x': 19, 'y': 19},
            'seed': None
        },
        'search': {
            'max_steps': None,
            'progress_interval': 10000
        },
        'output': {
            'save_path': 'outputs/grid/',
            'plot_filename': 'grid_path.png'
        }
    },
    'puzzle': {
        'puzzle': {
            'size': 3,
            'shuffle_moves': 10,
            'seed': None
        },
        'search': {
            'max_steps': None,
            'progress_interval': 10000
        },
        'output': {
            'save_path': 'outputs/puzzle/',
            'plot_filename': 'puzzle_path.png'
        }
    }
}


def load_yaml_config(filepath: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filepath: Path to YAML file

    Returns:
        Dictionary containing configuration parameters

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If file is not valid YAML

    Example:
        >>> config = load_yaml_config('configs/grid.yaml')
        >>> print(config['grid']['width'])
        20
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    with open(filepath, 'r') as f:
        try:
            config = yaml.safe_load(f)
            return config if config is not None else {}
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Error parsing YAML file {filepath}: {e}")


def load_domain_config(domain: str, config_dir: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration for a search scenario.

    Built-in defaults are used for anything the YAML file leaves out.

    Args:
        domain: Scenario name ('grid' or 'puzzle')
        config_dir: Directory containing '<domain>.yaml'; defaults only if None

    Returns:
        Dictionary with the scenario section plus 'search' and 'output'

    Raises:
        ValueError: If the domain is unknown or a section is not a mapping
        FileNotFoundError: If config_dir is given but has no file for the domain

    Example:
        >>> config = load_domain_config('puzzle', 'configs')
        >>> size = config['puzzle']['size']
    """
    if domain not in DEFAULT_CONFIGS:
        raise ValueError(f"Unknown domain '{domain}'. "
                         f"Available domains: {', '.join(DEFAULT_CONFIGS)}")

    defaults = copy.deepcopy(DEFAULT_CONFIGS[domain])
    if config_dir is None:
        return defaults

    config_path = Path(config_dir) / f'{domain}.yaml'
    config = load_yaml_config(str(config_path))

    for section, values in config.items():
        if section in defaults and not isinstance(values, dict):
            raise ValueError(f"Configuration section '{section}' in {config_path} must be a mapping")

    return merge_sections(defaults, config)


def merge_configs(*configs: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge multiple configuration dictionaries.

    Later dictionaries override earlier ones for conflicting keys.

    Args:
        *configs: Variable number of configuration dictionaries

    Returns:
        Merged configuration dictionary

    Example:
        >>> base_config = {'a': 1, 'b': 2}
        >>> override_config = {'b': 3, 'c': 4}
        >>> merged = merge_configs(base_config, override_config)
        >>> print(merged)
        {'a': 1, 'b': 3, 'c': 4}
    """
    merged = {}
    for config in configs:
        merged.update(config)
    return merged


def merge_sections(*configs: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge configuration dictionaries one level deep.

    Sections that are mappings in both are merged key by key, anything else
    is overridden as in ``merge_configs``.

    Example:
        >>> merge_sections({'search': {'max_steps': None, 'progress_interval': 10}},
        ...                {'search': {'max_steps': 500}})
        {'search': {'max_steps': 500, 'progress_interval': 10}}
    """
    merged: Dict[str, Any] = {}
    for config in configs:
        for section, values in config.items():
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                merged[section] = merge_configs(merged[section], values)
            else:
                merged[section] = values
    return merged
