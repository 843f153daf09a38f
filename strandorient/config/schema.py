"""
StrandOrient v0.1.0

Configuration schema for StrandOrient.

Defines all available configuration parameters with defaults and validation.

Author: StrandOrient Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import copy
from typing import Dict, Any, List
from pathlib import Path
import yaml

from ..graph_core.orientation_resolver import CONFLICT_MODES

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Orientation
    # ========================================================================
    'orientation': {
        'conflict_mode': 'report',  # 'ignore', 'report', 'fail'
        'streaming_edges': False,  # Derive edges per unitig during traversal
    },

    # ========================================================================
    # Output
    # ========================================================================
    'output': {
        'compress': False,  # gzip the output file (ignored for stdout)
        'report': None,  # Optional JSON run report path
    },

    # ========================================================================
    # Logging
    # ========================================================================
    'logging': {
        'level': 'INFO',
    },
}


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


def deep_merge(base: Dict, override: Dict) -> Dict:
    """Deep merge two dictionaries; override values win."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def default_config() -> Dict[str, Any]:
    """Fresh copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def load_config(config_path: Path) -> Dict[str, Any]:
    """
    Load a YAML configuration file merged over the defaults.

    Args:
        config_path: Path to YAML file

    Returns:
        Complete configuration dictionary

    Raises:
        ConfigValidationError: If the file is not YAML or not a mapping
    """
    try:
        with open(config_path, 'r') as f:
            user_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in config file {config_path}: {e}")

    if not isinstance(user_config, dict):
        raise ConfigValidationError(
            f"Config file {config_path} must contain a mapping at top level"
        )

    return deep_merge(DEFAULT_CONFIG, user_config)


def save_config_template(output_path: Path):
    """
    Save the default configuration as a YAML template.

    Args:
        output_path: Output file path
    """
    with open(output_path, 'w') as f:
        yaml.dump(default_config(), f, default_flow_style=False, sort_keys=False)


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    # Sections left empty in YAML load as None
    sections = {}
    for name in DEFAULT_CONFIG:
        section = config.get(name, {})
        if isinstance(section, dict):
            sections[name] = section
        else:
            errors.append(f"Section '{name}' must be a mapping, got {type(section).__name__}")

    orientation = sections.get('orientation')
    if orientation is not None:
        conflict_mode = orientation.get('conflict_mode')
        if conflict_mode not in CONFLICT_MODES:
            errors.append(
                f"Invalid orientation.conflict_mode: {conflict_mode!r} "
                f"(expected one of {', '.join(CONFLICT_MODES)})"
            )
        if not isinstance(orientation.get('streaming_edges'), bool):
            errors.append("orientation.streaming_edges must be true or false")

    output = sections.get('output')
    if output is not None:
        if not isinstance(output.get('compress'), bool):
            errors.append("output.compress must be true or false")
        report = output.get('report')
        if report is not None and not isinstance(report, str):
            errors.append("output.report must be a file path or null")

    logging_section = sections.get('logging')
    if logging_section is not None:
        level = str(logging_section.get('level', '')).upper()
        if level not in LOG_LEVELS:
            errors.append(f"Invalid logging.level: {level!r}")

    return errors
