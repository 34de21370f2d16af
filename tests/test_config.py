"""Unit tests for config.py."""

import json

import pytest

from cblaunch.config import (
    ApiKeyEntry,
    ConfigManager,
    SelectorMode,
    Settings,
    default_config_dir,
)
from cblaunch.errors import ConfigMissingError, ConfigParseError


def test_validate_passes_when_all_files_exist(config_dir):
    ConfigManager(config_dir).validate()


@pytest.mark.parametrize("missing", ["config.json", "models.json", "settings.json"])
def test_validate_reports_missing_file(config_dir, missing):
    (config_dir / missing).unlink()

    with pytest.raises(ConfigMissingError) as exc_info:
        ConfigManager(config_dir).validate()

    assert exc_info.value.paths == [config_dir / missing]
    assert missing in exc_info.value.message


def test_validate_lists_every_missing_file(tmp_path):
    with pytest.raises(ConfigMissingError) as exc_info:
        ConfigManager(tmp_path).validate()

    assert len(exc_info.value.paths) == 3


def test_load_api_keys(config_dir):
    entries = ConfigManager(config_dir).load_api_keys()

    assert [e.name for e in entries] == ["A", "B"]
    assert entries[0].base_url == "http://a.example"
    assert entries[0].key == "sk-aaaaaaaaaaaa"


def test_api_key_label():
    assert ApiKeyEntry(name="solo", key="k", baseURL="http://x").label == "solo"
    assert ApiKeyEntry(name="A", description="desc", key="k", baseURL="http://x").label == "A - desc"


def test_load_models_ignores_extra_fields(config_dir):
    models = ConfigManager(config_dir).load_models()

    assert [m.id for m in models] == ["gpt-4", "gpt-4o-mini"]


def test_settings_defaults_when_empty(config_dir):
    settings = ConfigManager(config_dir).load_settings()

    assert settings.quick_start is False
    assert settings.default_api_key == ""
    assert settings.default_model == ""
    assert settings.always_resume is True
    assert settings.selector is SelectorMode.AUTO


def test_settings_null_values_fall_back_to_defaults():
    settings = Settings.model_validate(
        {"quickStart": None, "defaultApiKey": None, "defaultModel": None, "alwaysResume": None, "selector": None}
    )

    assert settings.quick_start is False
    assert settings.default_api_key == ""
    assert settings.always_resume is True
    assert settings.selector is SelectorMode.AUTO


def test_settings_from_camel_case(make_config):
    config_dir = make_config(
        settings={"quickStart": True, "defaultApiKey": "A", "defaultModel": "gpt-4", "selector": "numbered"},
    )

    settings = ConfigManager(config_dir).load_settings()

    assert settings.quick_start is True
    assert settings.default_api_key == "A"
    assert settings.default_model == "gpt-4"
    assert settings.selector is SelectorMode.NUMBERED


def test_malformed_json_raises_parse_error(config_dir):
    (config_dir / "config.json").write_text("{not json")

    with pytest.raises(ConfigParseError) as exc_info:
        ConfigManager(config_dir).load_api_keys()

    assert exc_info.value.path == config_dir / "config.json"
    assert "invalid JSON" in exc_info.value.detail


def test_missing_required_field_raises_parse_error(make_config):
    config_dir = make_config(api_keys=[{"name": "A", "baseURL": "http://x"}])

    with pytest.raises(ConfigParseError) as exc_info:
        ConfigManager(config_dir).load_api_keys()

    assert "key" in exc_info.value.detail


def test_missing_top_level_list_raises_parse_error(config_dir):
    (config_dir / "models.json").write_text(json.dumps({"models": []}))

    with pytest.raises(ConfigParseError) as exc_info:
        ConfigManager(config_dir).load_models()

    assert "data" in exc_info.value.detail


def test_non_object_document_raises_parse_error(config_dir):
    (config_dir / "settings.json").write_text("[]")

    with pytest.raises(ConfigParseError):
        ConfigManager(config_dir).load_settings()


def test_default_config_dir_honours_env(monkeypatch, tmp_path):
    monkeypatch.setenv("CBLAUNCH_CONFIG_DIR", str(tmp_path))

    assert default_config_dir() == tmp_path
    assert ConfigManager().config_dir == tmp_path


def test_default_config_dir_uses_app_dir(monkeypatch, mocker, tmp_path):
    monkeypatch.delenv("CBLAUNCH_CONFIG_DIR", raising=False)
    mocker.patch("typer.get_app_dir", return_value=str(tmp_path))

    assert default_config_dir() == tmp_path
