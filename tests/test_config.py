#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
AdjWeaver v0.1.0

Tests for configuration loading, merging and validation.

Author: AdjWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest
import yaml

from adjweaver.config.parser import ConfigParser, ConfigurationError
from adjweaver.config.schema import (
    DEFAULT_CONFIG,
    load_config,
    save_config_template,
    validate_config,
)


class TestConfigParser:
    """Test YAML loading and overrides."""

    def test_defaults(self):
        parser = ConfigParser()
        assert parser.get('overlap.kmer_size') is None
        assert parser.get('output.format') == 'adj'
        assert parser.get('output.logging.level') == 'WARNING'
        assert parser.get('missing.key', 'fallback') == 'fallback'

    def test_defaults_not_shared(self):
        parser = ConfigParser()
        parser.merge_cli_overrides({'overlap.kmer_size': 31})
        assert DEFAULT_CONFIG['overlap']['kmer_size'] is None

    def test_user_file_merged(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("overlap:\n  kmer_size: 31\noutput:\n  format: dot\n")
        parser = ConfigParser(path)
        assert parser.get('overlap.kmer_size') == 31
        assert parser.get('output.format') == 'dot'
        assert parser.get('output.logging.level') == 'WARNING'

    def test_environment_substitution(self, tmp_path, monkeypatch):
        monkeypatch.setenv('ADJ_LOG', '/tmp/adj.log')
        monkeypatch.delenv('ADJ_OUT', raising=False)
        path = tmp_path / "config.yaml"
        path.write_text("output:\n  path: ${ADJ_OUT:-graph.adj}\n"
                        "  logging:\n    log_file: ${ADJ_LOG}\n")
        parser = ConfigParser(path)
        assert parser.get('output.path') == 'graph.adj'
        assert parser.get('output.logging.log_file') == '/tmp/adj.log'

    def test_cli_overrides_skip_none(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("overlap:\n  kmer_size: 31\n")
        parser = ConfigParser(path)
        parser.merge_cli_overrides({'overlap.kmer_size': None, 'output.format': 'sam'})
        assert parser.get('overlap.kmer_size') == 31
        assert parser.get('output.format') == 'sam'

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("overlap: [unclosed\n")
        with pytest.raises(ConfigurationError):
            ConfigParser(path)

    def test_non_mapping_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigurationError):
            ConfigParser(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigParser(tmp_path / "missing.yaml")

    def test_validate(self):
        parser = ConfigParser()
        with pytest.raises(ConfigurationError, match="missing -k"):
            parser.validate()
        parser.merge_cli_overrides({'overlap.kmer_size': 4})
        assert parser.validate()

    def test_scalar_section_from_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("overlap: 5\n")
        parser = ConfigParser(path)
        assert parser.get('overlap.kmer_size') is None
        with pytest.raises(ConfigurationError, match="overlap must be a section"):
            parser.validate()
        with pytest.raises(ConfigurationError, match="not a section"):
            parser.merge_cli_overrides({'overlap.kmer_size': 4})


class TestValidateConfig:
    """Test configuration validation messages."""

    def valid(self):
        config = load_config()
        config['overlap']['kmer_size'] = 31
        return config

    def test_valid(self):
        assert validate_config(self.valid()) == []

    @pytest.mark.parametrize("k", [0, -1, "31", 2.5, True])
    def test_bad_kmer_size(self, k):
        config = self.valid()
        config['overlap']['kmer_size'] = k
        assert len(validate_config(config)) == 1

    def test_bad_format(self):
        config = self.valid()
        config['output']['format'] = 'fasta'
        assert "Invalid output format" in validate_config(config)[0]

    def test_bad_log_level(self):
        config = self.valid()
        config['output']['logging']['level'] = 'LOUD'
        assert "Invalid logging level" in validate_config(config)[0]

    @pytest.mark.parametrize("section", ['overlap', 'output'])
    @pytest.mark.parametrize("value", [5, None, "text"])
    def test_section_not_a_mapping(self, section, value):
        config = self.valid()
        config[section] = value
        errors = validate_config(config)
        assert errors == [f"{section} must be a section of key: value settings, got {value!r}"]

    def test_logging_section_not_a_mapping(self):
        config = self.valid()
        config['output']['logging'] = 'quiet'
        assert "output.logging must be a section" in validate_config(config)[0]


class TestConfigTemplate:
    """Test template generation."""

    def test_default_template(self, tmp_path):
        path = tmp_path / "config.yaml"
        save_config_template(path, kmer_size=31)
        with open(path) as f:
            config = yaml.safe_load(f)
        assert config['overlap']['kmer_size'] == 31
        assert validate_config(config) == []

    def test_format_template(self, tmp_path):
        path = tmp_path / "config.yaml"
        save_config_template(path, template='gfa')
        assert load_config(path)['output']['format'] == 'gfa'

    def test_unknown_template(self, tmp_path):
        with pytest.raises(ValueError):
            save_config_template(tmp_path / "config.yaml", template='ancient')
