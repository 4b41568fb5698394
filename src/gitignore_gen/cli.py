from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from gitignore_gen import __version__
from gitignore_gen.generator import GenerateError, generate
from gitignore_gen.remote import TemplateFetchError, list_templates

app = typer.Typer(help="Generate .gitignore files based on project analysis")
console = Console()
err_console = Console(stderr=True)


def _error(message: str) -> None:
    err_console.print(f"[bold red]Error:[/] {escape(message)}", soft_wrap=True)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    force: bool = typer.Option(False, "--force", "-f", help="Force overwrite existing .gitignore file"),
    tech: list[str] | None = typer.Option(
        None, "--tech", "-t", help="Technology to include instead of auto-detection (repeatable)"
    ),
    list_templates_: bool = typer.Option(False, "--list", "-l", help="List templates offered by the service"),
    timeout: float | None = typer.Option(None, "--timeout", help="Network timeout in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print progress details"),
) -> None:
    if ctx.invoked_subcommand is not None:
        return
    if timeout is not None and timeout <= 0:
        err_console.print("[bold red]Invalid --timeout:[/] expected > 0")
        raise typer.Exit(2)

    if list_templates_:
        try:
            names = list_templates(timeout_seconds=timeout)
        except TemplateFetchError as exc:
            _error(f"failed to list templates: {exc}")
            raise typer.Exit(1)
        console.print("Available templates:")
        for name in names:
            console.print(f"  - {escape(name)}")
        return

    try:
        root = Path.cwd()
    except OSError as exc:
        _error(f"failed to get current directory: {exc}")
        raise typer.Exit(1)

    progress = None
    if verbose:
        progress = lambda msg: console.print(f"[dim]{escape(msg)}[/dim]")  # noqa: E731

    try:
        result = generate(root, technologies=tech, force=force, timeout_seconds=timeout, progress=progress)
    except GenerateError as exc:
        _error(str(exc))
        raise typer.Exit(1)

    console.print(f"Generated .gitignore file for: {escape(result.summary())}")


@app.command("uninstall")
def uninstall() -> None:
    """Show where gitignore-gen lives so it can be removed by hand."""
    executable = Path(sys.argv[0]).resolve()
    console.print(f"To uninstall, manually delete the executable at: {escape(str(executable))}", soft_wrap=True)
    console.print("If it was installed with pip, run: pip uninstall gitignore-gen")


@app.command("version")
def version() -> None:
    console.print(f"gitignore-gen {__version__}")


if __name__ == "__main__":
    app()
