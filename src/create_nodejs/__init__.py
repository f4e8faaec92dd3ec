"""Interactive questionnaire for scaffolding Node.js projects."""

from .questionnaire import (
    collect_auth_token,
    collect_git_remote_details,
    collect_github_user,
    collect_project_details,
    collect_settings_file_path,
    collect_update_token_confirmation,
    split_keywords,
)

__all__ = [
    "collect_auth_token",
    "collect_git_remote_details",
    "collect_github_user",
    "collect_project_details",
    "collect_settings_file_path",
    "collect_update_token_confirmation",
    "split_keywords",
]
