"""CLI application for deptree."""

import asyncio
import json
import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from deptree.detect import DIALECTS
from deptree.errors import DeptreeError
from deptree.extract import extract, load_props

console = Console()
err_console = Console(stderr=True)


def read_input(file_path: str) -> tuple[str, str | None]:
    """Read manifest text from a path or stdin ('-').

    Returns:
        The content and the filename to use for dialect detection
    """
    if file_path == "-":
        return sys.stdin.read(), None

    path_obj = Path(file_path)
    if not path_obj.exists():
        err_console.print(f"Error: File {file_path} not found", style="red")
        raise typer.Exit(1)
    return path_obj.read_text(encoding="utf-8-sig"), path_obj.name


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def check_dialect(dialect: str | None) -> None:
    if dialect and dialect not in DIALECTS:
        err_console.print(
            f"Error: Unknown dialect {dialect}. Choose from: {', '.join(DIALECTS)}",
            style="red",
        )
        raise typer.Exit(1)


app = typer.Typer(
    name="deptree",
    help="deptree - Extract dependency trees from .NET manifests "
    "(project.json, packages.config, .csproj)",
    add_completion=False,
)


@app.command()
def tree(
    file_path: str = typer.Argument(help="Path to manifest file (use '-' for stdin)"),
    dev: bool = typer.Option(False, "--dev", help="Include development dependencies"),
    props_path: str | None = typer.Option(
        None, "--props", help="MSBuild .props file supplying $(Name) versions"
    ),
    dialect: str | None = typer.Option(None, "--dialect", help="Force manifest dialect"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Print the dependency tree of a manifest as JSON."""
    configure_logging(verbose)
    check_dialect(dialect)

    try:
        content, filename = read_input(file_path)
        props = None
        if props_path:
            props_content, _ = read_input(props_path)
            props = asyncio.run(load_props(props_content))

        result = asyncio.run(
            extract(content, filename, dialect=dialect, include_dev=dev, props=props)
        )
        console.print_json(json.dumps(result.tree.to_dict()))

    except typer.Exit:
        raise
    except DeptreeError as e:
        err_console.print(f"Error: {e}", style="red")
        raise typer.Exit(1)


@app.command()
def frameworks(
    file_path: str = typer.Argument(help="Path to manifest file (use '-' for stdin)"),
    dialect: str | None = typer.Option(None, "--dialect", help="Force manifest dialect"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Print the target frameworks of a manifest, one per line."""
    configure_logging(verbose)
    check_dialect(dialect)

    try:
        content, filename = read_input(file_path)
        result = asyncio.run(extract(content, filename, dialect=dialect))
    except typer.Exit:
        raise
    except DeptreeError as e:
        err_console.print(f"Error: {e}", style="red")
        raise typer.Exit(1)

    if not result.target_frameworks:
        console.print("No target frameworks found")
        raise typer.Exit(0)
    for framework in result.target_frameworks:
        console.print(framework, highlight=False)


if __name__ == "__main__":
    app()
