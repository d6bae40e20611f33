"""Console output helpers for the CLI."""

from __future__ import annotations

from typing import Any

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def print(*objects: Any, **kwargs: Any) -> None:  # noqa: A001
    """Print through the shared rich console."""
    console.print(*objects, **kwargs)


def info(message: str) -> None:
    console.print(f"[cyan]{message}[/cyan]")


def detail(message: str) -> None:
    console.print(f"  [dim]{message}[/dim]")


def success(message: str) -> None:
    console.print(f"[green]{message}[/green]")


def warning(message: str) -> None:
    err_console.print(f"[yellow]Warning:[/yellow] {message}")


def error(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {message}")


def newline() -> None:
    console.print()
