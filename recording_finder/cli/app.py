"""CLI application definition for Recording Finder."""

import typer

from recording_finder.cli.commands import run, init_config, validate_config, version_callback

app = typer.Typer(
    add_completion=False,
    help="Find audio recordings by weekday or file name text and report them.",
    no_args_is_help=True,
)


@app.callback()
def main(
        version: bool = typer.Option(
            None, "--version", "-v",
            callback=version_callback,
            is_eager=True,  # Critical: process before other options
            is_flag=True,
            help="Show version and exit."
        ),
) -> None:
    """Recording Finder command group."""


# Register commands
app.command(name="run", help="Search interactively and write a report")(run)
app.command(name="init-config", help="Generate an example configuration file")(init_config)
app.command(name="validate-config", help="Validate a configuration file")(validate_config)
