"""
cmdhelp CLI - Command help conversion tool

Converts Help Model documents (JSON) into:
1. Markdown command pages (plus an optional module page)
2. A MAML XML help file for the shell's built-in help engine
"""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from cmdhelp import __version__
from cmdhelp.config import Settings
from cmdhelp.exceptions import CmdHelpError
from cmdhelp.loader import load_command_help
from cmdhelp.metadata import parse_metadata_pairs
from cmdhelp.pipeline import BatchSummary, HelpGenerationPipeline

app = typer.Typer(
    name="cmdhelp",
    help="Command help conversion tool (markdown and MAML)",
    add_completion=False,
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _print_summary(summary: BatchSummary) -> None:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Command")
    table.add_column("Status")
    table.add_column("Output / Error")

    for result in summary.results:
        color = {"written": "green", "skipped": "yellow", "failed": "red"}.get(result.status, "white")
        detail = result.error if result.error else (str(result.path) if result.path else "")
        table.add_row(result.title, f"[{color}]{result.status}[/{color}]", detail)

    console.print(table)
    for path in summary.files:
        console.print(f"📄 [cyan]{path}[/cyan]")


@app.command()
def markdown(
    input_file: Path = typer.Option(..., "--input", "-i", help="Help Model JSON file"),
    output_folder: Optional[Path] = typer.Option(None, "--output-folder", "-o", help="Output folder"),
    encoding: Optional[str] = typer.Option(None, "--encoding", "-e", help="File encoding (default: utf-8)"),
    metadata: Optional[List[str]] = typer.Option(
        None,
        "--metadata",
        "-m",
        help="Extra front matter as key=value (repeatable)",
    ),
    with_module_page: bool = typer.Option(
        False,
        "--with-module-page",
        help="Also write the module index page",
    ),
    module_page_path: Optional[Path] = typer.Option(None, "--module-page-path", help="Module page file or folder"),
    help_version: Optional[str] = typer.Option(None, "--help-version", help="Help version for the module page"),
    help_info_uri: Optional[str] = typer.Option(None, "--help-info-uri", help="Download link for the module page"),
    locale: Optional[str] = typer.Option(None, "--locale", help="Module page locale (default: en-US)"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing pages"),
    num_workers: Optional[int] = typer.Option(None, "--num-workers", "-w", help="Parallel workers"),
    verbose: bool = typer.Option(False, "--verbose", help="Debug logging"),
):
    """
    Write one markdown page per command.

    Example:
        cmdhelp markdown --input widgets.json --output-folder docs \\
            --with-module-page --metadata author=docs-team
    """
    _configure_logging(verbose)
    try:
        settings = Settings.from_env(
            output_folder=output_folder,
            encoding=encoding,
            with_module_page=with_module_page or None,
            help_version=help_version,
            help_info_uri=help_info_uri,
            locale=locale,
            force=force or None,
            num_workers=num_workers,
        )
        extra_metadata = parse_metadata_pairs(metadata or [])
        commands = load_command_help(input_file)

        console.print(Panel.fit(
            "[bold cyan]Markdown help[/bold cyan]\n\n"
            f"Input: [yellow]{input_file}[/yellow]\n"
            f"Commands: [yellow]{len(commands)}[/yellow]\n"
            f"Output: [yellow]{settings.output_folder}[/yellow]",
            border_style="cyan"
        ))

        pipeline = HelpGenerationPipeline(commands, settings, extra_metadata)
        summary = asyncio.run(pipeline.generate_markdown(module_page_path))
    except (CmdHelpError, ValueError, OSError) as e:
        console.print(f"\n[red]❌ Error: {e}[/red]")
        raise typer.Exit(1)

    _print_summary(summary)
    if summary.failed:
        raise typer.Exit(1)


@app.command()
def maml(
    input_file: Path = typer.Option(..., "--input", "-i", help="Help Model JSON file"),
    output_folder: Optional[Path] = typer.Option(None, "--output-folder", "-o", help="Output folder"),
    encoding: Optional[str] = typer.Option(None, "--encoding", "-e", help="File encoding (default: utf-8)"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="File name (default: <Module>-help.xml)"),
    num_workers: Optional[int] = typer.Option(None, "--num-workers", "-w", help="Parallel workers"),
    verbose: bool = typer.Option(False, "--verbose", help="Debug logging"),
):
    """
    Write a MAML help file containing every command.

    Commands that fail to convert are reported and left out of the file.
    """
    _configure_logging(verbose)
    try:
        settings = Settings.from_env(output_folder=output_folder, encoding=encoding, num_workers=num_workers)
        commands = load_command_help(input_file)

        pipeline = HelpGenerationPipeline(commands, settings)
        summary = asyncio.run(pipeline.generate_maml(name))
    except (CmdHelpError, ValueError, OSError) as e:
        console.print(f"\n[red]❌ Error: {e}[/red]")
        raise typer.Exit(1)

    _print_summary(summary)
    if summary.failed:
        raise typer.Exit(1)


@app.command()
def version():
    """Show the version of cmdhelp."""
    console.print(f"[bold cyan]cmdhelp[/bold cyan] v{__version__}")
    console.print("Command help conversion tool")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
