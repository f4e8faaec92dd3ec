from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from create_nodejs.config import (
    ChoiceConfig,
    ConfigError,
    DefaultsConfig,
    GithubSettings,
    QuestionnaireConfig,
    default_config,
    load_config,
    load_settings,
    save_config,
    save_settings,
)


def test_default_config_choices() -> None:
    config = default_config()
    assert config.defaults.license == "MIT"
    assert [choice.value for choice in config.template_choices()] == ["node", "typescript"]
    assert "jest" in [choice.value for choice in config.test_package_choices()]


def test_config_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "questionnaire.yaml"
    save_config(default_config(), path)
    assert load_config(path) == default_config()


def test_missing_config(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("licenses: [\n")
    with pytest.raises(ConfigError, match="Failed to parse YAML"):
        load_config(path)


def test_default_license_must_be_a_choice(tmp_path: Path) -> None:
    path = tmp_path / "questionnaire.yaml"
    path.write_text(
        "defaults:\n  license: GPL-3.0\n"
        "licenses:\n  - {label: MIT License, value: MIT}\n"
        "templates:\n  - {label: Node, value: node}\n"
    )
    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_config(path)


def test_choices_required_and_unique() -> None:
    with pytest.raises(ValidationError):
        QuestionnaireConfig(licenses=[], templates=[ChoiceConfig(label="Node", value="node")])
    with pytest.raises(ValidationError):
        QuestionnaireConfig(
            licenses=[ChoiceConfig(label="MIT", value="MIT"), ChoiceConfig(label="Also MIT", value="MIT")],
            templates=[ChoiceConfig(label="Node", value="node")],
        )


def test_test_packages_optional() -> None:
    config = QuestionnaireConfig(
        defaults=DefaultsConfig(license="MIT", template="node"),
        licenses=[ChoiceConfig(label="MIT", value="MIT")],
        templates=[ChoiceConfig(label="Node", value="node")],
    )
    assert config.test_package_choices() == []


def test_settings_missing_file_is_empty(tmp_path: Path) -> None:
    assert load_settings(tmp_path / "create-nodejs-settings.json") == GithubSettings()


def test_settings_empty_file_is_empty(tmp_path: Path) -> None:
    path = tmp_path / "create-nodejs-settings.json"
    path.write_text("")
    assert load_settings(path) == GithubSettings()


def test_settings_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "create-nodejs-settings.json"
    save_settings(GithubSettings(user="octocat", token="tok123"), path)
    assert load_settings(path) == GithubSettings(user="octocat", token="tok123")


def test_settings_malformed(tmp_path: Path) -> None:
    path = tmp_path / "create-nodejs-settings.json"
    path.write_text("{not json")
    with pytest.raises(ConfigError, match="Failed to parse settings"):
        load_settings(path)

    path.write_text('{"user": ["a"]}')
    with pytest.raises(ConfigError, match="Invalid settings"):
        load_settings(path)


def test_settings_path_is_a_directory(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Unable to read settings file"):
        load_settings(tmp_path)
    with pytest.raises(ConfigError, match="Unable to write settings file"):
        save_settings(GithubSettings(user="octocat", token="tok123"), tmp_path)
