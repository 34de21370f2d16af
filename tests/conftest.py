"""Shared fixtures: a config directory populated with the three JSON files."""

import json

import pytest


API_KEYS = [
    {"name": "A", "description": "desc", "key": "sk-aaaaaaaaaaaa", "baseURL": "http://a.example"},
    {"name": "B", "description": "second", "key": "sk-bbbbbbbbbbbb", "baseURL": "http://b.example"},
]
MODELS = [{"id": "gpt-4"}, {"id": "gpt-4o-mini", "object": "model", "owned_by": "openai"}]


def write_config(config_dir, api_keys=None, models=None, settings=None):
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "config.json").write_text(json.dumps({"apiKeys": API_KEYS if api_keys is None else api_keys}))
    (config_dir / "models.json").write_text(json.dumps({"data": MODELS if models is None else models}))
    (config_dir / "settings.json").write_text(json.dumps({} if settings is None else settings))
    return config_dir


@pytest.fixture
def config_dir(tmp_path):
    return write_config(tmp_path / "cfg")


@pytest.fixture
def make_config(tmp_path):
    """Factory writing a config directory with overridable documents."""
    def _make(**documents):
        return write_config(tmp_path / "custom", **documents)
    return _make
