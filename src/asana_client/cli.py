"""CLI entry point for the Asana client."""

import typer
from rich.console import Console

from . import __version__
from .cli_commands.common import CLIState, configure_logging
from .cli_commands.listing import register_listing_commands
from .cli_commands.webhooks import register_webhook_commands


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console = Console()
        console.print(f"asana-client v{__version__}")
        raise typer.Exit(0)


app = typer.Typer(
    name="asana",
    help="""Command-line access to the Asana API.

Walks workspaces, projects and tasks, manages webhooks and verifies
captured webhook deliveries.

Quick start:
  export ASANA_TOKEN=<personal access token>
  asana workspaces
  asana projects <workspace-id>
  asana task <task-id> --stories
""",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    token: str | None = typer.Option(
        None,
        "--token",
        envvar="ASANA_TOKEN",
        help="Personal access token used to authorize access to the API",
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Show debug information"),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Show verbose output"),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Asana API client."""
    state = ctx.ensure_object(CLIState)
    state.token = token
    state.debug = debug
    state.verbose = verbose
    configure_logging(debug or verbose > 0)


# Register commands from submodules
register_listing_commands(app)  # workspaces, projects, tasks, task, add-section
register_webhook_commands(app)  # webhooks list|create|delete|verify


if __name__ == "__main__":
    app()
