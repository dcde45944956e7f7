from __future__ import annotations

"""optionette Command Line Interface."""

from pathlib import Path

import typer
import yaml
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from optionette.laws import check_laws
from optionette.samples import DEFAULT_SAMPLES, load_samples
from optionette.utils.defaults import registered_defaults
from optionette.utils.logging import configure, console

app = typer.Typer(
    name="optionette",
    help="CLI for optionette: check Optional container laws.",
    add_completion=False,
)


@app.command()
def laws(
    samples_file: Path = typer.Argument(None, help="YAML file with `values` and optional `fallback`.", exists=False),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs."),
):
    """Check every container law against sample values."""
    configure("debug" if verbose else "info")

    if samples_file is None:
        samples = DEFAULT_SAMPLES
    else:
        if not samples_file.exists():
            console.print(f"[bold red]Error: File not found: {samples_file}[/]")
            raise typer.Exit(code=1)
        if not samples_file.is_file():
            console.print(f"[bold red]Error: Not a file: {samples_file}[/]")
            raise typer.Exit(code=1)
        try:
            samples = load_samples(samples_file)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            console.print(f"[bold red]Invalid samples file {samples_file}: {e}[/]")
            raise typer.Exit(code=1)

    results = check_laws(samples.values, fallback=samples.fallback)

    table = Table(title="Optional laws")
    table.add_column("Law", style="cyan", no_wrap=True)
    table.add_column("Sample", style="magenta")
    table.add_column("Status")
    table.add_column("Detail", style="dim")
    for r in results:
        status = "[green]OK[/]" if r.passed else "[bold red]VIOLATED[/]"
        table.add_row(r.name, escape(repr(r.sample)), status, escape(r.detail))
    console.print(table)

    failed = [r for r in results if not r.passed]
    if failed:
        console.print(f"[bold red]{len(failed)} law check(s) failed.[/]")
        raise typer.Exit(code=1)
    console.print(f"[bold green]All {len(results)} law checks passed.[/]")


@app.command()
def defaults():
    """List the registered zero-value factories."""
    table = Table(title="Zero values")
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Zero value", style="green")
    for tp, factory in registered_defaults().items():
        table.add_row(tp.__name__, repr(factory()))
    console.print(table)


if __name__ == "__main__":
    app()
