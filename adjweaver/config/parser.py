#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AdjWeaver v0.1.0

Run configuration: the defaults from schema.py, overlaid by an optional YAML
file, overlaid by command-line options.

Author: AdjWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import copy
import os
import re
import yaml
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

# ${VAR} or ${VAR:-fallback}
_ENV_REFERENCE = re.compile(r'\$\{([^}:]+)(?::-(.*?))?\}')


class ConfigurationError(Exception):
    """Raised when the run configuration is missing or invalid."""
    pass


def _overlay(base: Dict[str, Any], top: Mapping[str, Any]) -> Dict[str, Any]:
    """Nested dict update; mappings present on both sides are merged key by key."""
    merged = dict(base)
    for key, value in top.items():
        below = merged.get(key)
        if isinstance(below, dict) and isinstance(value, Mapping):
            merged[key] = _overlay(below, value)
        else:
            merged[key] = value
    return merged


def _expand_env(value: Any) -> Any:
    """Expand environment references in every string of a YAML document."""
    if isinstance(value, dict):
        return {key: _expand_env(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand_env(item) for item in value]
    if not isinstance(value, str):
        return value
    return _ENV_REFERENCE.sub(
        lambda m: os.environ.get(m.group(1), m.group(2) or ''), value
    )


class ConfigParser:
    """
    Layered AdjWeaver configuration with dotted-key access,
    e.g. ``parser.get('overlap.kmer_size')``.
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        from .schema import DEFAULT_CONFIG

        self.config_file = Path(config_file) if config_file else None
        self._config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)

        if self.config_file is not None:
            self._config = _overlay(self._config, self._read_file(self.config_file))

    @staticmethod
    def _read_file(path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path) as f:
            try:
                document = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ConfigurationError(
                f"Config file {path} must contain a mapping at the top level"
            )
        return _expand_env(document)

    def merge_cli_overrides(self, overrides: Dict[str, Any]):
        """
        Apply command-line values given as {'section.key': value}.

        None means the option was not given, so the file or default value stays.
        """
        for dotted, value in overrides.items():
            if value is None:
                continue
            *parents, leaf = dotted.split('.')
            node = self._config
            for part in parents:
                node = node.setdefault(part, {})
                if not isinstance(node, dict):
                    raise ConfigurationError(f"Cannot set {dotted}: {part} is not a section")
            node[leaf] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key, returning default if any part is missing."""
        node: Any = self._config
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def to_dict(self) -> Dict[str, Any]:
        """A deep copy of the merged configuration."""
        return copy.deepcopy(self._config)

    def validate(self) -> bool:
        """
        Raise ConfigurationError listing every problem, or return True.
        """
        from .schema import validate_config

        errors = validate_config(self._config)
        if errors:
            raise ConfigurationError("; ".join(errors))
        return True
