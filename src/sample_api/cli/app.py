"""Main CLI application."""

import typer

from sample_api.cli.commands import health, workflow
from sample_api.services.di import register_all_services
from sample_api.services.registry import get_service_registry

app = typer.Typer(
    name="sample-api-cli",
    help="Sample API CLI - CI workflow and readiness tools",
    no_args_is_help=True,
)


@app.callback()
def main_callback():
    """Global options for all commands."""
    register_all_services(get_service_registry())


app.add_typer(workflow.app, name="workflow")
app.command(name="health")(health.health)
