#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
StrandOrient v0.1.0

Tests for configuration loading and validation.

Author: StrandOrient Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest
import yaml

from strandorient.config import (
    ConfigParser,
    ConfigValidationError,
    DEFAULT_CONFIG,
    load_config,
    save_config_template,
    validate_config,
)


def _write_yaml(path, data):
    with open(path, 'w') as f:
        yaml.dump(data, f)
    return path


def load_config_dict(overrides):
    parser = ConfigParser()
    parser.merge_cli_overrides({
        f"{section}.{key}": value
        for section, values in overrides.items()
        for key, value in values.items()
    })
    return parser.to_dict()


class TestConfigParser:
    """Test YAML loading, merging and overrides."""

    def test_defaults(self):
        parser = ConfigParser()

        assert parser.get('orientation.conflict_mode') == 'report'
        assert parser.get('orientation.streaming_edges') is False
        assert parser.get('missing.key', 'fallback') == 'fallback'
        assert parser.validate()

    def test_user_values_override_defaults(self, temp_output_dir):
        path = _write_yaml(temp_output_dir / "c.yaml", {'orientation': {'conflict_mode': 'fail'}})

        parser = ConfigParser(path)

        assert parser.get('orientation.conflict_mode') == 'fail'
        assert parser.get('orientation.streaming_edges') is False

    def test_defaults_not_mutated(self, temp_output_dir):
        path = _write_yaml(temp_output_dir / "c.yaml", {'orientation': {'conflict_mode': 'ignore'}})

        ConfigParser(path).merge_cli_overrides({'output.compress': True})

        assert DEFAULT_CONFIG['orientation']['conflict_mode'] == 'report'
        assert DEFAULT_CONFIG['output']['compress'] is False

    def test_env_substitution(self, temp_output_dir, monkeypatch):
        monkeypatch.setenv('STRANDORIENT_REPORT', '/tmp/run.json')
        path = _write_yaml(temp_output_dir / "c.yaml", {
            'output': {'report': '${STRANDORIENT_REPORT}'},
            'logging': {'level': '${STRANDORIENT_UNSET_LEVEL:-DEBUG}'},
        })

        parser = ConfigParser(path)

        assert parser.get('output.report') == '/tmp/run.json'
        assert parser.get('logging.level') == 'DEBUG'

    def test_cli_overrides_skip_none(self):
        parser = ConfigParser()
        parser.merge_cli_overrides({
            'orientation.conflict_mode': 'ignore',
            'orientation.streaming_edges': None,
        })

        assert parser.get('orientation.conflict_mode') == 'ignore'
        assert parser.get('orientation.streaming_edges') is False

    def test_invalid_yaml(self, temp_output_dir):
        path = temp_output_dir / "bad.yaml"
        path.write_text("orientation: [unclosed\n")

        with pytest.raises(ConfigValidationError):
            ConfigParser(path)

    def test_missing_file(self, temp_output_dir):
        with pytest.raises(FileNotFoundError):
            ConfigParser(temp_output_dir / "missing.yaml")

    def test_empty_section_fails_validation(self, temp_output_dir):
        path = temp_output_dir / "c.yaml"
        path.write_text("orientation:\n")

        parser = ConfigParser(path)

        with pytest.raises(ConfigValidationError, match="orientation"):
            parser.validate()

    def test_override_replaces_empty_section(self, temp_output_dir):
        path = temp_output_dir / "c.yaml"
        path.write_text("orientation:\n")

        parser = ConfigParser(path)
        parser.merge_cli_overrides({'orientation.conflict_mode': 'fail'})

        assert parser.get('orientation.conflict_mode') == 'fail'

    def test_invalid_value(self):
        parser = ConfigParser()
        parser.merge_cli_overrides({'orientation.conflict_mode': 'strict'})

        with pytest.raises(ConfigValidationError, match="conflict_mode"):
            parser.validate()


class TestSchema:
    """Test schema helpers."""

    def test_template_round_trip(self, temp_output_dir):
        path = temp_output_dir / "template.yaml"
        save_config_template(path)

        config = load_config(path)

        assert config == DEFAULT_CONFIG
        assert validate_config(config) == []

    def test_validate_reports_each_error(self):
        config = load_config_dict({
            'orientation': {'conflict_mode': 'x', 'streaming_edges': 'yes'},
            'output': {'compress': 1, 'report': 3},
            'logging': {'level': 'LOUD'},
        })

        assert len(validate_config(config)) == 5

    def test_empty_section_reported(self):
        config = load_config_dict({})
        config['orientation'] = None

        errors = validate_config(config)

        assert errors == ["Section 'orientation' must be a mapping, got NoneType"]

    def test_load_rejects_non_mapping(self, temp_output_dir):
        path = temp_output_dir / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigValidationError, match="mapping"):
            load_config(path)

    def test_load_rejects_invalid_yaml(self, temp_output_dir):
        path = temp_output_dir / "bad.yaml"
        path.write_text("orientation: [unclosed\n")

        with pytest.raises(ConfigValidationError):
            load_config(path)
