"""Typer-based CLI for the create-nodejs questionnaire."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from .config import DEFAULT_SETTINGS_PATH, ConfigError, QuestionnaireConfig, default_config, load_config, save_config
from .prompts import RichPromptBackend
from .session import ScaffoldAnswers, build_defaults, run_session

app = typer.Typer(help="Collect the answers needed to scaffold a new Node.js project.")
console = Console()


def _configure_logging(level: str, log_file: Path | None) -> None:
    logger.remove()
    logger.add(console.print, level=level)
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, level=level)


def _mask(token: str) -> str:
    if not token:
        return ""
    if len(token) <= 8:
        return "*" * 8
    return "*" * (len(token) - 4) + token[-4:]


def _summary_table(answers: ScaffoldAnswers) -> Table:
    project = answers.project
    table = Table(title=f"Project {project.name}", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Template", project.template)
    table.add_row("Description", project.description)
    table.add_row("Version", project.version)
    table.add_row("Keywords", json.dumps(project.keywords))
    table.add_row("License", project.license)
    table.add_row("Author", f"{project.author.name} <{project.author.email}> {project.author.url}".strip())
    table.add_row("Private", "yes" if project.is_private else "no")
    table.add_row("Project URL", project.project_url)
    table.add_row("Test packages", ", ".join(project.test_packages) or "-")
    table.add_row("Git remote", answers.remote.git.ssh_url)
    table.add_row("Issue tracker", answers.remote.issue_tracker)
    if answers.github is not None:
        table.add_row("GitHub user", answers.github.user)
        table.add_row("GitHub token", _mask(answers.github.token))
        table.add_row("Settings file", answers.github.settings_path)
    else:
        table.add_row("GitHub", "not requested")
    return table


@app.command()
def init(
    directory: Path = typer.Argument(Path("."), file_okay=False, dir_okay=True, help="Project directory"),
    config: Optional[Path] = typer.Option(None, "--config", help="Questionnaire YAML with choices and defaults"),
    settings: Path = typer.Option(
        DEFAULT_SETTINGS_PATH, "--settings", help="Default location of create-nodejs-settings.json"
    ),
    answers_out: Optional[Path] = typer.Option(None, "--answers-out", help="Write the answers as JSON"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also log to this file"),
) -> None:
    """Run the questionnaire for DIRECTORY."""

    _configure_logging(log_level.upper(), log_file)
    try:
        questionnaire: QuestionnaireConfig = load_config(config) if config else default_config()
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=4)

    defaults = build_defaults(questionnaire, directory)
    prompter = RichPromptBackend(console)
    try:
        answers = run_session(prompter, questionnaire, defaults, str(settings))
    except ConfigError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=4)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Questionnaire cancelled.[/yellow]")
        raise typer.Exit(code=130)

    console.print(_summary_table(answers))
    if answers_out:
        answers_out.parent.mkdir(parents=True, exist_ok=True)
        answers_out.write_text(json.dumps(answers.to_dict(), indent=2) + "\n")
        console.print(f"[green]Wrote answers to {answers_out}[/green]")


@app.command("init-config")
def init_config(path: Path = typer.Argument(..., writable=True, resolve_path=True)) -> None:
    """Write the built-in questionnaire configuration to PATH."""

    save_config(default_config(), path)
    console.print(f"[green]Wrote configuration to {path}[/green]")


if __name__ == "__main__":
    app()
