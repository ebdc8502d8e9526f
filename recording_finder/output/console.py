"""Console-based output handler for Recording Finder."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table


class ConsoleOutputHandler:
    """Rich Console-based output handler."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def print(self, message: str, **kwargs) -> None:
        """Print an informational message."""
        self.console.print(message, **kwargs)

    def info(self, message: str) -> None:
        """Print an informational message; markup in ``message`` is shown literally."""
        self.print(escape(message))

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        """Print an error message."""
        self.print(f"[red]Error:[/red] {escape(message)}")

    def print_run_summary(
        self,
        *,
        descriptor: str,
        match_count: int,
        skipped_count: int,
        report_path: Path,
        spreadsheet_path: Path | None,
    ) -> None:
        """Print a table summarising a finished search run."""
        table = Table(title=f"Search: {escape(descriptor)}", show_header=False)
        table.add_column("Item", style="cyan")
        table.add_column("Value")
        table.add_row("Matches", str(match_count))
        table.add_row("Skipped paths", str(skipped_count))
        table.add_row("Report", escape(str(report_path)))
        table.add_row("Spreadsheet", escape(str(spreadsheet_path)) if spreadsheet_path else "-")

        self.console.print()
        self.console.print(table)
        self.console.print()
