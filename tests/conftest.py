from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

import pytest

from create_nodejs.models import Choice

ACCEPT_DEFAULT = object()


@dataclass
class RecordedPrompt:
    kind: str
    message: str
    default: Any = None
    choices: Sequence[Choice] = ()
    secret: bool = False


@dataclass
class ScriptedPrompter:
    """Replays canned answers and records every prompt shown."""

    answers: List[Any]
    prompts: List[RecordedPrompt] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def _next(self, prompt: RecordedPrompt) -> Any:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for '{prompt.message}'")
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def text(self, message: str, default: Optional[str] = None, secret: bool = False) -> str:
        answer = self._next(RecordedPrompt("text", message, default, secret=secret))
        if answer is ACCEPT_DEFAULT or answer == "":
            return default or ""
        return answer

    def select(self, message: str, choices: Sequence[Choice], default: Optional[str] = None) -> str:
        answer = self._next(RecordedPrompt("select", message, default, tuple(choices)))
        if answer is ACCEPT_DEFAULT:
            answer = default
        assert answer in [choice.value for choice in choices]
        return answer

    def checkbox(self, message: str, choices: Sequence[Choice]) -> List[str]:
        answer = self._next(RecordedPrompt("checkbox", message, None, tuple(choices)))
        values = [choice.value for choice in choices]
        assert all(item in values for item in answer)
        return list(answer)

    def confirm(self, message: str, default: Optional[bool] = None) -> bool:
        answer = self._next(RecordedPrompt("confirm", message, default))
        if answer is ACCEPT_DEFAULT:
            assert default is not None, f"'{message}' has no default"
            answer = default
        return bool(answer)

    def error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture()
def scripted():
    def _factory(*answers: Any) -> ScriptedPrompter:
        return ScriptedPrompter(list(answers))

    return _factory


@pytest.fixture()
def licenses() -> List[Choice]:
    return [Choice("MIT License", "MIT"), Choice("ISC License", "ISC")]


@pytest.fixture()
def templates() -> List[Choice]:
    return [Choice("Node.js package", "node"), Choice("TypeScript package", "typescript")]


@pytest.fixture()
def package_choices() -> List[Choice]:
    return [Choice("jest", "jest"), Choice("mocha", "mocha"), Choice("chai", "chai")]
