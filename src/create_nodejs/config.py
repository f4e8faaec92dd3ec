"""Configuration loading for the questionnaire and the GitHub settings file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .models import Choice

SETTINGS_FILENAME = "create-nodejs-settings.json"
DEFAULT_SETTINGS_PATH = Path("~") / SETTINGS_FILENAME


class ChoiceConfig(BaseModel):
    """Option offered by a select or checkbox prompt."""

    label: str
    value: str

    def to_choice(self) -> Choice:
        return Choice(label=self.label, value=self.value)


class DefaultsConfig(BaseModel):
    """Pre-filled answers for the project details step."""

    project_name: str = ""
    version: str = "0.1.0"
    license: str = "MIT"
    template: str = "node"


def _ensure_unique(values: List[ChoiceConfig]) -> List[ChoiceConfig]:
    seen: set[str] = set()
    for item in values:
        if item.value in seen:
            raise ValueError(f"Duplicate choice value '{item.value}'")
        seen.add(item.value)
    return values


class QuestionnaireConfig(BaseModel):
    """Top-level questionnaire configuration."""

    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    licenses: List[ChoiceConfig]
    templates: List[ChoiceConfig]
    test_packages: List[ChoiceConfig] = Field(default_factory=list)

    @field_validator("licenses", "templates")
    @classmethod
    def _require_choices(cls, value: List[ChoiceConfig]) -> List[ChoiceConfig]:
        if not value:
            raise ValueError("At least one choice must be configured")
        return _ensure_unique(value)

    @field_validator("test_packages")
    @classmethod
    def _unique_test_packages(cls, value: List[ChoiceConfig]) -> List[ChoiceConfig]:
        return _ensure_unique(value)

    @model_validator(mode="after")
    def _defaults_are_choices(self) -> "QuestionnaireConfig":
        if self.defaults.license not in {item.value for item in self.licenses}:
            raise ValueError(f"Default license '{self.defaults.license}' is not a configured license")
        if self.defaults.template not in {item.value for item in self.templates}:
            raise ValueError(f"Default template '{self.defaults.template}' is not a configured template")
        return self

    def license_choices(self) -> List[Choice]:
        return [item.to_choice() for item in self.licenses]

    def template_choices(self) -> List[Choice]:
        return [item.to_choice() for item in self.templates]

    def test_package_choices(self) -> List[Choice]:
        return [item.to_choice() for item in self.test_packages]


class GithubSettings(BaseModel):
    """Credentials persisted between runs in the settings file."""

    user: str = ""
    token: str = ""


class ConfigError(Exception):
    """Raised when a configuration or settings file is invalid."""


def default_config() -> QuestionnaireConfig:
    return QuestionnaireConfig(
        licenses=[
            ChoiceConfig(label="MIT License", value="MIT"),
            ChoiceConfig(label="ISC License", value="ISC"),
            ChoiceConfig(label="Apache License 2.0", value="Apache-2.0"),
            ChoiceConfig(label="GNU GPLv3", value="GPL-3.0"),
            ChoiceConfig(label="Unlicensed", value="UNLICENSED"),
        ],
        templates=[
            ChoiceConfig(label="Node.js package", value="node"),
            ChoiceConfig(label="TypeScript package", value="typescript"),
        ],
        test_packages=[
            ChoiceConfig(label="jest", value="jest"),
            ChoiceConfig(label="mocha", value="mocha"),
            ChoiceConfig(label="chai", value="chai"),
            ChoiceConfig(label="sinon", value="sinon"),
            ChoiceConfig(label="nyc", value="nyc"),
        ],
    )


def load_config(path: Path) -> QuestionnaireConfig:
    """Load questionnaire configuration from a YAML file."""

    try:
        data = yaml.safe_load(path.read_text())
    except FileNotFoundError as exc:
        raise ConfigError(f"Configuration file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML: {exc}") from exc

    try:
        return QuestionnaireConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def save_config(config: QuestionnaireConfig, path: Path) -> None:
    """Persist configuration to disk as YAML."""

    rendered = config.model_dump()
    path.write_text(yaml.safe_dump(rendered, sort_keys=False))


def load_settings(path: Path) -> GithubSettings:
    """Read persisted GitHub credentials; a missing file means no credentials yet."""

    try:
        raw = path.read_text()
    except FileNotFoundError:
        return GithubSettings()
    except OSError as exc:
        raise ConfigError(f"Unable to read settings file {path}: {exc}") from exc
    if not raw.strip():
        return GithubSettings()

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Failed to parse settings file {path}: {exc}") from exc

    try:
        return GithubSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid settings file {path}: {exc}") from exc


def save_settings(settings: GithubSettings, path: Path) -> None:
    try:
        path.write_text(json.dumps(settings.model_dump(), indent=2) + "\n")
    except OSError as exc:
        raise ConfigError(f"Unable to write settings file {path}: {exc}") from exc


__all__ = [
    "ChoiceConfig",
    "ConfigError",
    "DEFAULT_SETTINGS_PATH",
    "DefaultsConfig",
    "GithubSettings",
    "QuestionnaireConfig",
    "SETTINGS_FILENAME",
    "default_config",
    "load_config",
    "load_settings",
    "save_config",
    "save_settings",
]
