"""
Configuration loading

Settings come from a YAML file merged over built-in defaults, so a
config file only needs the keys it changes.
"""

import copy
import logging
import os
from typing import Dict, Optional

import yaml

logger = logging.getLogger(__name__)


def default_config() -> Dict:
    """Default configuration."""
    return {
        'rmq': {
            'solver': 'cartesian',
            'tie_break': 'later',
            'validate': False,
        },
        'logging': {
            'level': 'INFO',
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        },
    }


def _merge(base: Dict, override: Dict) -> Dict:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = "config.yaml") -> Dict:
    """
    Load configuration.

    Args:
        config_path: YAML file; None or a missing file gives the defaults

    Returns:
        Configuration dict
    """
    if config_path is None or not os.path.exists(config_path):
        logger.warning(f"No config file found at {config_path}, using defaults")
        return default_config()

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    logger.info(f"Loaded config from {config_path}")
    return _merge(default_config(), config)


def setup_logging(config: Dict):
    """Configure root logging from the 'logging' section."""
    section = config.get('logging', {})
    logging.basicConfig(
        level=getattr(logging, str(section.get('level', 'INFO')).upper()),
        format=section.get('format', default_config()['logging']['format'])
    )
