"""Answer records produced by the questionnaire."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(slots=True, frozen=True)
class Choice:
    """Selectable option for a single- or multi-select prompt."""

    label: str
    value: str


@dataclass(slots=True)
class ProjectDefaults:
    """Values pre-filled into the project details prompts."""

    project_name: str = ""
    version: str = "0.1.0"
    license: str = ""
    git_user_name: str = ""
    git_user_email: str = ""
    template: str = ""


@dataclass(slots=True)
class Author:
    name: str = ""
    email: str = ""
    url: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "email": self.email, "url": self.url}


@dataclass(slots=True)
class ProjectDetails:
    """Everything asked in the project details step."""

    name: str
    template: str
    description: str
    version: str
    keywords: List[str]
    license: str
    author: Author
    is_private: bool
    project_url: str
    test_packages: List[str] = field(default_factory=list)
    use_github: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "template": self.template,
            "description": self.description,
            "version": self.version,
            "keywords": list(self.keywords),
            "license": self.license,
            "author": self.author.to_dict(),
            "isPrivate": self.is_private,
            "projectURL": self.project_url,
            "testPackages": list(self.test_packages),
            "useGithub": self.use_github,
        }


@dataclass(slots=True)
class GitRemote:
    ssh_url: str = ""


@dataclass(slots=True)
class GitRemoteDetails:
    git: GitRemote
    issue_tracker: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"git": {"sshUrl": self.git.ssh_url}, "issueTracker": self.issue_tracker}


@dataclass(slots=True)
class SettingsFileLocation:
    settings_path: str

    def to_dict(self) -> Dict[str, Any]:
        return {"settingsPath": self.settings_path}


@dataclass(slots=True)
class GithubUser:
    user: str = ""


@dataclass(slots=True)
class GithubUserAnswer:
    github: GithubUser

    def to_dict(self) -> Dict[str, Any]:
        return {"github": {"user": self.github.user}}


@dataclass(slots=True)
class GithubToken:
    user: str = ""
    token: str = ""


@dataclass(slots=True)
class GithubTokenAnswer:
    github: GithubToken

    def to_dict(self) -> Dict[str, Any]:
        return {"github": {"user": self.github.user, "token": self.github.token}}


@dataclass(slots=True)
class UpdateTokenConfirmation:
    update_token: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"updateToken": self.update_token}


__all__ = [
    "Author",
    "Choice",
    "GitRemote",
    "GitRemoteDetails",
    "GithubToken",
    "GithubTokenAnswer",
    "GithubUser",
    "GithubUserAnswer",
    "ProjectDefaults",
    "ProjectDetails",
    "SettingsFileLocation",
    "UpdateTokenConfirmation",
]
