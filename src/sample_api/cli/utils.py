"""CLI utility functions shared across commands."""

from pathlib import Path

import typer
from rich.console import Console

from sample_api.exceptions import WorkflowError
from sample_api.settings import get_settings
from sample_api.workflow import Workflow, load_workflow

console = Console()


def resolve_workflow_path(path: Path | None) -> Path:
    """Return ``path`` or the configured workflow location."""
    return path if path is not None else Path(get_settings().workflow_path)


def load_workflow_or_exit(path: Path) -> Workflow:
    """Load a workflow file, printing the error and exiting 1 on failure.

    Raises:
        typer.Exit: If the file is missing or invalid
    """
    try:
        return load_workflow(path)
    except WorkflowError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e
