"""Tests for configuration loading."""

import json
import os

import pytest

from boilerplater.config import ConfigError, ToolkitConfig, load_config


def test_defaults():
    config = load_config()
    assert config.locale == "ru"
    assert config.locales == {}
    assert config.context == os.getcwd()
    assert config.log_level == "WARNING"


def test_overrides_ignore_empty_values():
    config = load_config({"locale": "en", "context": None})
    assert config.locale == "en"
    assert config.context == os.getcwd()


def test_file_then_overrides(tmp_path):
    path = tmp_path / "boilerplater.json"
    path.write_text(json.dumps({"locale": "en", "context": "/srv"}), encoding="utf-8")
    config = load_config({"context": "/work"}, config_file=path)
    assert config == ToolkitConfig(locale="en", context="/work")


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(config_file=tmp_path / "missing.json")


def test_file_must_be_json(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("locale: en", encoding="utf-8")
    with pytest.raises(ConfigError, match="must be JSON"):
        load_config(config_file=path)


def test_invalid_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_config(config_file=path)


@pytest.mark.parametrize(
    "values, message",
    [
        ({"colour": "red"}, "Unknown configuration keys"),
        ({"locale": 1}, "'locale' must be a string"),
        ({"locales": {"en": 1}}, "'locales' must map"),
        ({"log_level": "LOUD"}, "Invalid log_level"),
    ],
)
def test_validation(values, message):
    with pytest.raises(ConfigError, match=message):
        load_config(values)
