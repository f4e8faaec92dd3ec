"""Questionnaire steps for scaffolding a new Node.js project.

Each ``collect_*`` function presents a fixed, ordered set of prompts through
the given :class:`~create_nodejs.prompts.PromptBackend` and returns a single
answer record. The steps are independent of one another; sequencing and
branching belong to the caller (see :mod:`create_nodejs.session`).
"""

from __future__ import annotations

from typing import List, Sequence

from loguru import logger

from .models import (
    Author,
    Choice,
    GitRemote,
    GitRemoteDetails,
    GithubToken,
    GithubTokenAnswer,
    GithubUser,
    GithubUserAnswer,
    ProjectDefaults,
    ProjectDetails,
    SettingsFileLocation,
    UpdateTokenConfirmation,
)
from .paths import path_exists, resolve_path
from .prompts import PromptBackend

SETTINGS_PATH_ERROR = "You should introduce a real path for the create-nodejs-settings.json"


def split_keywords(raw: str) -> List[str]:
    """Split a comma-separated keyword answer.

    Segments are kept exactly as typed, surrounding whitespace included.
    """

    return raw.split(",")


def validate_settings_path(answer: str) -> str | None:
    """Return the error message for an unusable settings path, else ``None``."""

    resolved = resolve_path(answer)
    if resolved and path_exists(resolved):
        return None
    return SETTINGS_PATH_ERROR


def collect_project_details(
    prompter: PromptBackend,
    defaults: ProjectDefaults,
    license_choices: Sequence[Choice],
    test_package_choices: Sequence[Choice],
    template_choices: Sequence[Choice],
) -> ProjectDetails:
    """Ask for the metadata of the project being created."""

    logger.debug("Collecting project details")
    name = prompter.text("What is your project name?", default=defaults.project_name)
    template = prompter.select(
        "What kind of project are you creating?", template_choices, default=defaults.template
    )
    description = prompter.text("How would you describe your project?")
    version = prompter.text("What version do you want to start with?", default=defaults.version)
    keywords = split_keywords(prompter.text("Provide a comma-separated list of keywords:"))
    license_ = prompter.select("Please select a license", license_choices, default=defaults.license)
    author_name = prompter.text("What is your name?", default=defaults.git_user_name)
    author_email = prompter.text("What is your email?", default=defaults.git_user_email)
    author_url = prompter.text("What is your website?")
    is_private = prompter.confirm("Is this project private?", default=False)
    project_url = prompter.text("What is your project website?")
    test_packages = prompter.checkbox("Which test packages do you want to include?", test_package_choices)
    use_github = prompter.confirm("Would you like to create a GitHub repository?")

    return ProjectDetails(
        name=name or "",
        template=template,
        description=description or "",
        version=version or "",
        keywords=keywords,
        license=license_,
        author=Author(name=author_name or "", email=author_email or "", url=author_url or ""),
        is_private=is_private,
        project_url=project_url or "",
        test_packages=list(test_packages),
        use_github=use_github,
    )


def collect_git_remote_details(prompter: PromptBackend) -> GitRemoteDetails:
    logger.debug("Collecting git remote details")
    ssh_url = prompter.text("What git remote will you be using?")
    issue_tracker = prompter.text("Where is your issue tracker?")
    return GitRemoteDetails(git=GitRemote(ssh_url=ssh_url or ""), issue_tracker=issue_tracker or "")


def collect_settings_file_path(prompter: PromptBackend, default_path: str) -> SettingsFileLocation:
    """Ask for the settings file location, re-asking until the path exists."""

    message = "What is the path for the create-nodejs-settings.json file?"
    while True:
        answer = prompter.text(message, default=default_path)
        problem = validate_settings_path(answer)
        if problem is None:
            return SettingsFileLocation(settings_path=answer)
        logger.debug("Rejected settings path {!r}", answer)
        prompter.error(problem)


def collect_github_user(prompter: PromptBackend, current_user: str) -> GithubUserAnswer:
    user = prompter.text("What is your Github user?", default=current_user)
    return GithubUserAnswer(github=GithubUser(user=user or ""))


def collect_auth_token(prompter: PromptBackend, user: str, current_token: str) -> GithubTokenAnswer:
    # Only the prompt hides the stored token; the answer is handed back verbatim.
    token = prompter.text(f"What is your GitHub token for user {user}?", default=current_token, secret=True)
    return GithubTokenAnswer(github=GithubToken(user=user, token=token or ""))


def collect_update_token_confirmation(prompter: PromptBackend) -> UpdateTokenConfirmation:
    update = prompter.confirm("Do you want to update the settings file with this token?")
    return UpdateTokenConfirmation(update_token=update)


__all__ = [
    "SETTINGS_PATH_ERROR",
    "collect_auth_token",
    "collect_git_remote_details",
    "collect_github_user",
    "collect_project_details",
    "collect_settings_file_path",
    "collect_update_token_confirmation",
    "split_keywords",
    "validate_settings_path",
]
