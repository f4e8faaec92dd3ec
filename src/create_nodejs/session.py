"""Drive the questionnaire steps for a full scaffolding session."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from loguru import logger

from .config import GithubSettings, QuestionnaireConfig, load_settings, save_settings
from .models import GitRemoteDetails, ProjectDefaults, ProjectDetails
from .paths import resolve_path
from .prompts import PromptBackend
from .questionnaire import (
    collect_auth_token,
    collect_git_remote_details,
    collect_github_user,
    collect_project_details,
    collect_settings_file_path,
    collect_update_token_confirmation,
)


@dataclass(slots=True)
class GithubCredentials:
    """GitHub answers plus what happened to the settings file."""

    user: str
    token: str
    settings_path: str
    token_updated: bool = False


@dataclass(slots=True)
class ScaffoldAnswers:
    project: ProjectDetails
    remote: GitRemoteDetails
    github: Optional[GithubCredentials] = None

    def to_dict(self) -> Dict[str, Any]:
        data = self.project.to_dict()
        data.update(self.remote.to_dict())
        if self.github is not None:
            data["github"] = {"user": self.github.user, "token": self.github.token}
            data["settingsPath"] = self.github.settings_path
            data["updateToken"] = self.github.token_updated
        return data


def _git_config_value(key: str, cwd: Path | None) -> str:
    try:
        completed = subprocess.run(
            ["git", "config", "--get", key],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        logger.debug("Unable to read git config {}: {}", key, exc)
        return ""
    return completed.stdout.strip() if completed.returncode == 0 else ""


def git_identity(cwd: Path | None = None) -> Tuple[str, str]:
    """Return ``(user.name, user.email)`` from git, blank when unavailable."""

    if shutil.which("git") is None:
        logger.debug("git executable not found; author defaults left blank")
        return "", ""
    return _git_config_value("user.name", cwd), _git_config_value("user.email", cwd)


def build_defaults(
    config: QuestionnaireConfig,
    project_dir: Path,
    identity: Tuple[str, str] | None = None,
) -> ProjectDefaults:
    name, email = identity if identity is not None else git_identity(project_dir)
    return ProjectDefaults(
        project_name=config.defaults.project_name or project_dir.resolve().name,
        version=config.defaults.version,
        license=config.defaults.license,
        git_user_name=name,
        git_user_email=email,
        template=config.defaults.template,
    )


def collect_github_credentials(prompter: PromptBackend, default_settings_path: str) -> GithubCredentials:
    """Ask for GitHub credentials, reusing and optionally updating the settings file."""

    location = collect_settings_file_path(prompter, default_settings_path)
    settings_file = resolve_path(location.settings_path) or Path(location.settings_path)
    stored = load_settings(settings_file)
    logger.debug("Loaded GitHub settings from {}", settings_file)

    user = collect_github_user(prompter, stored.user).github.user
    token = collect_auth_token(prompter, user, stored.token).github.token

    updated = False
    if token != stored.token or user != stored.user:
        if collect_update_token_confirmation(prompter).update_token:
            save_settings(GithubSettings(user=user, token=token), settings_file)
            logger.info("Updated GitHub settings in {}", settings_file)
            updated = True

    return GithubCredentials(
        user=user,
        token=token,
        settings_path=location.settings_path,
        token_updated=updated,
    )


def run_session(
    prompter: PromptBackend,
    config: QuestionnaireConfig,
    defaults: ProjectDefaults,
    default_settings_path: str,
) -> ScaffoldAnswers:
    """Run every questionnaire step in order, skipping GitHub when declined."""

    project = collect_project_details(
        prompter,
        defaults,
        config.license_choices(),
        config.test_package_choices(),
        config.template_choices(),
    )
    remote = collect_git_remote_details(prompter)
    answers = ScaffoldAnswers(project=project, remote=remote)

    if not project.use_github:
        logger.debug("GitHub integration declined; skipping credential prompts")
        return answers

    answers.github = collect_github_credentials(prompter, default_settings_path)
    return answers


__all__ = [
    "GithubCredentials",
    "ScaffoldAnswers",
    "build_defaults",
    "collect_github_credentials",
    "git_identity",
    "run_session",
]
