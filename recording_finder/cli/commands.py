"""CLI command implementations for Recording Finder."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from recording_finder.constants import VERSION
from recording_finder.exceptions import FinderError
from recording_finder.config import ConfigGenerator
from recording_finder.menu import SelectionMenu
from recording_finder.menu.terminal import PromptToolkitKeyReader, RichMenuRenderer, RichTextPrompt
from recording_finder.workflow import FinderWorkflow
from recording_finder.cli.utils import _default_config_path, _select_loader, _load_settings

# Configure logging
logging.basicConfig(
    level=logging.WARNING,  # Default to WARNING level
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Handle version flag callback for Typer CLI.

    Args:
        value: Whether the version flag was provided
    """
    if value:
        typer.echo(f"Recording Finder v{VERSION}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")
    else:
        logging.getLogger().setLevel(logging.WARNING)


def run(
        config: Path | None = typer.Option(
            None, "--config", "-c",
            dir_okay=False, resolve_path=True,
            help="Settings file (defaults to recording_finder.yaml in the working directory)",
        ),
        verbose: bool = typer.Option(
            False, "--verbose",
            help="Enable verbose debug output"
        ),
) -> None:
    """Interactively choose roots and a search, then write the report."""

    _configure_logging(verbose)
    console = Console()

    try:
        settings = _load_settings(config)
        menu = SelectionMenu(PromptToolkitKeyReader(), RichMenuRenderer(console))
        workflow = FinderWorkflow(
            settings,
            menu=menu,
            text_prompt=RichTextPrompt(console),
            console=console,
        )
        workflow.run()
    except (FinderError, FileNotFoundError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        console.print("[yellow]Cancelled.[/yellow]")
        raise typer.Exit(code=130)


def init_config(
        output_path: Path | None = typer.Argument(
            None, dir_okay=False, resolve_path=True,
            help="Where to write the file (defaults to ./recording_finder.yaml)",
        ),
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a documented example settings file."""

    console = Console()
    target = output_path or _default_config_path()
    if target.exists() and not force:
        console.print(f"[red]Error:[/red] {escape(str(target))} already exists (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        ConfigGenerator().generate(target)
    except OSError as e:
        console.print(f"[red]Error:[/red] Could not write {escape(str(target))}: {escape(str(e))}")
        raise typer.Exit(code=1)
    console.print(f"[green]Wrote example configuration to {escape(str(target))}[/green]")


def validate_config(
        config_path: Path | None = typer.Argument(
            None, dir_okay=False, resolve_path=True,
            help="Settings file to validate (defaults to the resolved settings file)",
        ),
) -> None:
    """Validate a settings file and print the effective settings."""

    console = Console()
    try:
        loader = _select_loader(config_path)
        settings = loader.load()
    except (FinderError, FileNotFoundError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    console.print(f"[green]Configuration is valid[/green] ({escape(loader.source_description)})")
    console.print(f"  locale: {settings.locale.value}")
    console.print(f"  text strategy: {settings.text_strategy.value}")
    console.print(f"  extensions: {escape(', '.join(settings.extensions))}")
    console.print(f"  output directory: {escape(str(settings.output_dir))}")
    if settings.roots:
        console.print(f"  roots: {escape(', '.join(settings.roots))}")
