"""Main CLI entry point for codedef."""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .config import load_config, CodedefConfig
from .definitions import find_in_file, outline_file
from .errors import CodedefError

app = typer.Typer(help="codedef - extract code definitions from source files using tree-sitter")
console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool) -> None:
    """Configure logging for a CLI run."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def _load(config_path: Optional[Path], verbose: bool) -> CodedefConfig:
    try:
        config = load_config(config_path=config_path, directory=Path.cwd())
    except (ValueError, yaml.YAMLError, OSError) as e:
        setup_logging(verbose)
        _fail(e, verbose)
    if verbose:
        config.verbose = True
    setup_logging(config.verbose)
    return config


def _fail(error: Exception, verbose: bool) -> None:
    err_console.print(f"[red]Error: {escape(str(error))}[/red]")
    cause = getattr(error, "cause", None) or error.__cause__
    if verbose and cause is not None:
        err_console.print(f"[dim]Caused by: {escape(repr(cause))}[/dim]")
    raise typer.Exit(2)


@app.command()
def find(
    file_path: Path = typer.Argument(..., help="Path to the source file"),
    line_number: int = typer.Argument(..., min=1, help="Line number (1-based) to find the enclosing definition for"),
    lang: Optional[str] = typer.Option(None, "--lang", "-l", help="Programming language (auto-detected from extension if not specified)"),
    show_type: bool = typer.Option(False, "--show-type", help="Show the type of definition found"),
    no_line_numbers: bool = typer.Option(False, "--no-line-numbers", help="Print source lines without line numbers"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to a YAML configuration file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """Print the innermost definition enclosing LINE_NUMBER in FILE_PATH."""
    config = _load(config_path, verbose)
    show_type = show_type or config.show_type
    line_numbers = config.line_numbers and not no_line_numbers
    
    try:
        result = find_in_file(file_path, line_number, lang, config.default_language)
    except (CodedefError, ValueError) as e:
        _fail(e, config.verbose)
    
    if not result.found:
        err_console.print(f"No enclosing definition found for line {line_number}")
        raise typer.Exit(1)
    
    definition = result.definition
    if show_type:
        typer.echo(f"# {definition.kind} starting at line {definition.start_line}")
    
    for number, line in definition.lines():
        typer.echo(f"{number}. {line}" if line_numbers else line)


@app.command()
def outline(
    file_path: Path = typer.Argument(..., help="Path to the source file"),
    lang: Optional[str] = typer.Option(None, "--lang", "-l", help="Programming language (auto-detected from extension if not specified)"),
    as_json: bool = typer.Option(False, "--json", help="Emit the outline as a JSON array"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to a YAML configuration file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """List every definition in FILE_PATH with a one-line signature."""
    config = _load(config_path, verbose)
    
    try:
        result = outline_file(file_path, lang, config.default_language)
    except (CodedefError, ValueError) as e:
        _fail(e, config.verbose)
    
    if result.empty:
        err_console.print(f"No definitions found in {escape(str(file_path))}")
        raise typer.Exit(1)
    
    if as_json:
        typer.echo(json.dumps([entry.to_dict() for entry in result], indent=2))
        return
    
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column(style="cyan", no_wrap=True)
    table.add_column(style="dim", no_wrap=True)
    table.add_column(no_wrap=True, overflow="ellipsis")
    for entry in result:
        table.add_row(f"{entry.start_line}-{entry.end_line}", entry.kind, Text(entry.signature))
    console.print(table)


if __name__ == "__main__":
    app()
