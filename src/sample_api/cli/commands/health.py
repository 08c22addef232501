"""Readiness check command."""

import typer

from sample_api.cli.utils import console
from sample_api.readiness import CheckStatus
from sample_api.services.health_check_service import HealthCheckService
from sample_api.services.registry import get_service_registry


def health():
    """Run the readiness checks and report the result.

    Exits with code 1 unless the server state is operational.
    """
    console.print("[bold]Running readiness checks...[/bold]\n")

    result = get_service_registry().get(HealthCheckService).perform_health_check()

    for check in result.checks:
        color = "green" if check.status == CheckStatus.SUCCESS else "red"
        console.print(f"  [{color}]{check.status:<8}[/{color}] {check.check_name}: {check.message}")

    if result.status != "ok":
        console.print(f"\n[red]Readiness checks failed (server state: {result.server_state})[/red]")
        raise typer.Exit(1)

    console.print("\n[green]All readiness checks passed![/green]")
