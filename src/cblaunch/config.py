"""
CBLAUNCH Configuration.

Read-only access to the three JSON documents the launcher depends on:

    config.json    API keys ({"apiKeys": [...]})
    models.json    available models ({"data": [...]})
    settings.json  quick-start defaults and launcher preferences

The files live in a per-user config directory which is resolved once and
handed to ``ConfigManager`` explicitly. Nothing in this module writes files.
"""

import json
import os
from enum import Enum
from pathlib import Path
from typing import Optional, Type, TypeVar

import typer
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cblaunch.errors import ConfigMissingError, ConfigParseError

APP_NAME = "cblaunch"
CONFIG_DIR_ENV = "CBLAUNCH_CONFIG_DIR"

CONFIG_FILE = "config.json"
MODELS_FILE = "models.json"
SETTINGS_FILE = "settings.json"


class SelectorMode(str, Enum):
    AUTO = "auto"
    FZF = "fzf"
    INQUIRER = "inquirer"
    NUMBERED = "numbered"


class ApiKeyEntry(BaseModel):
    """A named API key and the endpoint it belongs to."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    description: Optional[str] = None
    key: str
    base_url: str = Field(alias="baseURL")

    @property
    def label(self) -> str:
        """Selection line shown to the user: ``name - description``."""
        if self.description:
            return f"{self.name} - {self.description}"
        return self.name


class ModelEntry(BaseModel):
    """A model id; any other fields of the models listing are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str


class ApiKeysDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    api_keys: list[ApiKeyEntry] = Field(alias="apiKeys")


class ModelsDocument(BaseModel):
    data: list[ModelEntry]


class Settings(BaseModel):
    """Quick-start defaults and launcher preferences.

    Every key is optional; missing or null values fall back to the defaults
    below.
    """

    model_config = ConfigDict(populate_by_name=True)

    quick_start: bool = Field(False, alias="quickStart")
    default_api_key: str = Field("", alias="defaultApiKey")
    default_model: str = Field("", alias="defaultModel")
    always_resume: bool = Field(True, alias="alwaysResume")
    selector: SelectorMode = SelectorMode.AUTO

    @field_validator("default_api_key", "default_model", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("quick_start", mode="before")
    @classmethod
    def _none_to_false(cls, value):
        return False if value is None else value

    @field_validator("always_resume", mode="before")
    @classmethod
    def _none_to_true(cls, value):
        return True if value is None else value

    @field_validator("selector", mode="before")
    @classmethod
    def _none_to_auto(cls, value):
        return SelectorMode.AUTO if value is None else value


Document = TypeVar("Document", bound=BaseModel)


def default_config_dir() -> Path:
    """Return the config directory, honouring ``CBLAUNCH_CONFIG_DIR``."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path(typer.get_app_dir(APP_NAME))


def _describe_validation_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<root>"
    return f"{location}: {first['msg']}"


class ConfigManager:
    """Locates, validates and parses the launcher's config files."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else default_config_dir()

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILE

    @property
    def models_file(self) -> Path:
        return self.config_dir / MODELS_FILE

    @property
    def settings_file(self) -> Path:
        return self.config_dir / SETTINGS_FILE

    @property
    def required_files(self) -> list[Path]:
        return [self.config_file, self.models_file, self.settings_file]

    def validate(self) -> None:
        """Check that all three config files exist.

        Raises:
            ConfigMissingError: listing every missing file
        """
        missing = [path for path in self.required_files if not path.is_file()]
        if missing:
            raise ConfigMissingError(missing)

    def load_api_keys(self) -> list[ApiKeyEntry]:
        return self._read_document(self.config_file, ApiKeysDocument).api_keys

    def load_models(self) -> list[ModelEntry]:
        return self._read_document(self.models_file, ModelsDocument).data

    def load_settings(self) -> Settings:
        return self._read_document(self.settings_file, Settings)

    def _read_document(self, path: Path, model: Type[Document]) -> Document:
        """Parse ``path`` as JSON and validate it against ``model``.

        Raises:
            ConfigParseError: on unreadable files, malformed JSON, a non-object
                document or a missing/invalid field
        """
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigParseError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e
        except OSError as e:
            raise ConfigParseError(path, str(e)) from e

        if not isinstance(raw, dict):
            raise ConfigParseError(path, "expected a JSON object at the top level")

        try:
            return model.model_validate(raw)
        except ValidationError as e:
            raise ConfigParseError(path, _describe_validation_error(e)) from e


def get_config_manager(config_dir: Optional[Path] = None) -> ConfigManager:
    """Build a ConfigManager for ``config_dir`` or the default location."""
    return ConfigManager(config_dir)
