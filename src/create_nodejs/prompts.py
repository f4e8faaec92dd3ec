"""Prompt backends for the questionnaire.

The questionnaire never talks to the terminal directly. It receives an object
implementing :class:`PromptBackend`, so flows can be driven by
:class:`RichPromptBackend` in a real session or by canned answers in tests.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from loguru import logger
from rich.console import Console
from rich.prompt import Confirm, Prompt

from .models import Choice


class PromptBackend(Protocol):
    """One method per kind of prompt the questionnaire presents."""

    def text(self, message: str, default: Optional[str] = None, secret: bool = False) -> str:
        ...

    def select(self, message: str, choices: Sequence[Choice], default: Optional[str] = None) -> str:
        ...

    def checkbox(self, message: str, choices: Sequence[Choice]) -> List[str]:
        ...

    def confirm(self, message: str, default: Optional[bool] = None) -> bool:
        ...

    def error(self, message: str) -> None:
        ...


def match_choice(answer: str, choices: Sequence[Choice]) -> Choice | None:
    """Find the choice referenced by its value, a 1-based index or a label."""

    token = answer.strip()
    if not token:
        return None
    for choice in choices:
        if token == choice.value:
            return choice
    if token.isdigit():
        index = int(token) - 1
        if 0 <= index < len(choices):
            return choices[index]
        return None
    lowered = token.lower()
    for choice in choices:
        if lowered == choice.label.lower():
            return choice
    return None


class RichPromptBackend:
    """Terminal prompts rendered with :mod:`rich.prompt`."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _print_choices(self, choices: Sequence[Choice]) -> None:
        for position, choice in enumerate(choices, start=1):
            suffix = f" [dim]({choice.value})[/dim]" if choice.label != choice.value else ""
            self.console.print(f"  [cyan]{position}[/cyan]) {choice.label}{suffix}")

    def text(self, message: str, default: Optional[str] = None, secret: bool = False) -> str:
        if default and secret:
            # Blank input keeps the stored value without echoing it.
            return Prompt.ask(
                f"{message} [dim](blank keeps current)[/dim]",
                console=self.console,
                default=default,
                show_default=False,
            )
        if default:
            return Prompt.ask(message, console=self.console, default=default)
        return Prompt.ask(message, console=self.console, default="", show_default=False)

    def select(self, message: str, choices: Sequence[Choice], default: Optional[str] = None) -> str:
        if not choices:
            raise ValueError(f"No choices available for '{message}'")
        preselected = match_choice(default, choices) if default else None
        self.console.print(f"[bold]{message}[/bold]")
        self._print_choices(choices)
        while True:
            if preselected is not None:
                answer = Prompt.ask("Choice", console=self.console, default=preselected.value)
            else:
                answer = Prompt.ask("Choice", console=self.console)
            choice = match_choice(answer, choices)
            if choice is not None:
                return choice.value
            self.error(f"'{answer}' is not one of the listed options")

    def checkbox(self, message: str, choices: Sequence[Choice]) -> List[str]:
        self.console.print(f"[bold]{message}[/bold]")
        if not choices:
            logger.debug("No options offered for '{}'", message)
            return []
        self._print_choices(choices)
        while True:
            answer = Prompt.ask(
                "Comma-separated choices (blank for none)",
                console=self.console,
                default="",
                show_default=False,
            )
            tokens = [token for token in answer.split(",") if token.strip()]
            picked: set[str] = set()
            unknown: List[str] = []
            for token in tokens:
                choice = match_choice(token, choices)
                if choice is None:
                    unknown.append(token.strip())
                else:
                    picked.add(choice.value)
            if unknown:
                self.error(f"Unknown options: {', '.join(unknown)}")
                continue
            return [choice.value for choice in choices if choice.value in picked]

    def confirm(self, message: str, default: Optional[bool] = None) -> bool:
        if default is None:
            return Confirm.ask(message, console=self.console)
        return Confirm.ask(message, console=self.console, default=default)

    def error(self, message: str) -> None:
        self.console.print(f"[red]>> {message}[/red]")


__all__ = ["PromptBackend", "RichPromptBackend", "match_choice"]
