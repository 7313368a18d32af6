"""CLI entry point for sprint-tasks.

Commands:
- list (default): print the active sprint's tasks followed by open backlog issues
- create: create a task in the active sprint
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from pathlib import Path

import click

from sprint_tasks.config import Config, ConfigError, ConfigStore
from sprint_tasks.jira import (
    JiraClient,
    JiraConnectionError,
    MalformedResponseError,
    RequestFailedError,
    Sprint,
)
from sprint_tasks.logging import get_logger, setup_logging
from sprint_tasks.prompts import ConsoleInput, InputSource
from sprint_tasks.workflow import (
    AuthRetriesExhaustedError,
    IssueCreationError,
    IssueCreator,
    NoActiveSprintError,
    Session,
    TaskAggregator,
)

logger = get_logger("cli")

echo_err = partial(click.echo, err=True)


def build_client(config: Config) -> JiraClient:
    """Create a JiraClient for the current credentials."""
    return JiraClient.from_config(config)


def make_input_source() -> InputSource:
    """Input source used for every interactive value."""
    return ConsoleInput()


@dataclass
class AppContext:
    """Options shared by all commands."""

    config_path: Path | None = None


def _open_session(app: AppContext, input_source: InputSource) -> tuple[Session, ConfigStore]:
    store = ConfigStore(input_source, path=app.config_path, notify=echo_err)
    config = store.load_or_create()
    return Session(config, store, client_factory=build_client), store


def _fail(message: str) -> None:
    echo_err(message)
    sys.exit(1)


def _run(app: AppContext, command: Callable[[Session, ConfigStore, InputSource], None]) -> None:
    """Run a command inside a session, mapping failures to exit code 1."""
    input_source = make_input_source()
    try:
        session, store = _open_session(app, input_source)
        command(session, store, input_source)
    except ConfigError as e:
        _fail(f"Configuration error: {e}")
    except IssueCreationError as e:
        _fail(f"Error creating task: {e.body}")
    except (RequestFailedError, NoActiveSprintError, AuthRetriesExhaustedError) as e:
        _fail(f"Error: {e}")
    except (JiraConnectionError, MalformedResponseError) as e:
        logger.error("Request error: %s", e)
        _fail(f"Error: {e}")


def _list(session: Session, store: ConfigStore, input_source: InputSource) -> None:
    board_id = session.config.board_id

    def operation(client: JiraClient, sprint: Sprint) -> tuple[list[str], list[str]]:
        return TaskAggregator(client).render(sprint.id, board_id)

    lines, warnings = session.run(operation)
    for warning in warnings:
        echo_err(warning)
    for line in lines:
        click.echo(line)


def _create(
    session: Session,
    store: ConfigStore,
    input_source: InputSource,
    summary: str | None,
    description: str | None,
) -> None:
    def operation(client: JiraClient, sprint: Sprint) -> str:
        project_key = store.ensure_project_key(session.config)
        creator = IssueCreator(client, input_source, sprint_field=session.config.sprint_field)
        return creator.create(sprint.id, project_key, summary, description).key

    key = session.run(operation)
    click.echo(f"Successfully created task: {key}")


@click.group(invoke_without_command=True)
@click.version_option(package_name="sprint-tasks")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to config.json (default: per-user config directory)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Log debug output to stderr",
)
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """List and create Jira tasks in a board's active sprint."""
    setup_logging(level="DEBUG" if verbose else None, console=verbose)
    ctx.obj = AppContext(config_path=config_path)
    if ctx.invoked_subcommand is None:
        ctx.invoke(list_tasks)


@main.command("list")
@click.pass_obj
def list_tasks(app: AppContext) -> None:
    """Print sprint tasks, then open backlog issues."""
    _run(app, _list)


@main.command()
@click.option(
    "-s",
    "--summary",
    default=None,
    help="Task summary (prompted for if omitted)",
)
@click.option(
    "-d",
    "--description",
    default=None,
    help="Task description (optional)",
)
@click.pass_obj
def create(app: AppContext, summary: str | None, description: str | None) -> None:
    """Create a task in the active sprint."""
    _run(app, partial(_create, summary=summary, description=description))
