"""
AdjWeaver v0.1.0

Configuration schema for AdjWeaver.

Defines all available configuration parameters with defaults and validation.

Author: AdjWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import copy
from typing import Dict, Any, Optional, List
from pathlib import Path
import yaml


OUTPUT_FORMATS = ['adj', 'dot', 'sam', 'gfa']
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Overlap detection
    # ========================================================================
    'overlap': {
        'kmer_size': None,  # Required; contigs overlap by exactly k-1 bases
    },

    # ========================================================================
    # Output
    # ========================================================================
    'output': {
        'format': 'adj',  # 'adj', 'dot', 'sam', 'gfa'
        'path': None,  # None writes to standard output
        'logging': {
            'level': 'WARNING',
            'log_file': None,
        },
    },
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file, merged over the defaults.

    Args:
        config_path: Path to config file (None = defaults only)

    Returns:
        Configuration dictionary
    """
    from .parser import ConfigParser
    return ConfigParser(config_path).to_dict()


def save_config_template(output_path: Path, template: str = 'default',
                         kmer_size: Optional[int] = None):
    """
    Save a configuration template to file.

    Args:
        output_path: Output file path
        template: Template type ('default' or one of the output formats)
        kmer_size: k-mer size to pre-fill (left empty when None)
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if template in OUTPUT_FORMATS:
        config['output']['format'] = template
    elif template != 'default':
        raise ValueError(f"Unknown configuration template: {template}")

    config['overlap']['kmer_size'] = kmer_size

    with open(output_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def _section(config: Dict[str, Any], key: str, errors: List[str],
             label: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Return a nested section, or record an error if it is not a mapping."""
    section = config.get(key)
    if not isinstance(section, dict):
        errors.append(f"{label or key} must be a section of key: value settings, got {section!r}")
        return None
    return section


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    overlap = _section(config, 'overlap', errors)
    if overlap is not None:
        k = overlap.get('kmer_size')
        if k is None:
            errors.append("missing -k,--kmer option (overlap.kmer_size)")
        elif isinstance(k, bool) or not isinstance(k, int):
            errors.append(f"overlap.kmer_size must be an integer, got {k!r}")
        elif k <= 0:
            errors.append(f"overlap.kmer_size must be positive, got {k}")

    output = _section(config, 'output', errors)
    if output is not None:
        fmt = output.get('format')
        if fmt not in OUTPUT_FORMATS:
            errors.append(f"Invalid output format: {fmt} (choose from {', '.join(OUTPUT_FORMATS)})")

        log_config = _section(output, 'logging', errors, 'output.logging')
        if log_config is not None:
            level = log_config.get('level')
            if level not in LOG_LEVELS:
                errors.append(f"Invalid logging level: {level}")

    return errors
