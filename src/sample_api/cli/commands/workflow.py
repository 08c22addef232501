"""CI workflow commands."""

from pathlib import Path

import typer

from sample_api.cli.utils import console, load_workflow_or_exit, resolve_workflow_path
from sample_api.workflow import build_workflow, dump_workflow, required_status_checks, validate_workflow
from sample_api.workflow.io import write_workflow

app = typer.Typer(help="CI workflow operations")

PATH_ARGUMENT = typer.Argument(
    None,
    help="Workflow file (defaults to SAMPLE_API_WORKFLOW_PATH)",
    metavar="<path>",
)  # fmt: skip
OUTPUT_OPTION = typer.Option(
    None,
    "--output",
    "-o",
    help="Write the workflow to this file instead of stdout",
    metavar="<path>",
)  # fmt: skip


@app.command()
def render(output: Path | None = OUTPUT_OPTION):
    """Render the canonical CI workflow.

    Examples:
        sample-api-cli workflow render
        sample-api-cli workflow render -o .github/workflows/ci.yml
    """
    workflow = build_workflow()
    if output is None:
        typer.echo(dump_workflow(workflow), nl=False)
        return

    write_workflow(workflow, output)
    console.print(f"[green]Workflow written to {output}[/green]")


@app.command()
def check(path: Path | None = PATH_ARGUMENT):
    """Verify a workflow checks out, sets up Python, installs and tests.

    Examples:
        sample-api-cli workflow check
        sample-api-cli workflow check .github/workflows/ci.yml
    """
    path = resolve_workflow_path(path)
    console.print(f"[bold]Checking workflow {path}...[/bold]\n")

    problems = validate_workflow(load_workflow_or_exit(path))
    if problems:
        console.print("[red]Workflow check failed![/red]\n")
        for problem in problems:
            console.print(f"  - {problem}")
        raise typer.Exit(1)

    console.print("[green]Workflow is valid![/green]")


@app.command("required-checks")
def required_checks(path: Path | None = PATH_ARGUMENT):
    """List the status checks a branch protection rule should require.

    Prints one check name per line, in the form the hosting platform
    reports them (matrix jobs expand to one check per combination).
    """
    workflow = load_workflow_or_exit(resolve_workflow_path(path))
    for name in required_status_checks(workflow):
        typer.echo(name)
