"""Report pipeline orchestration for Recording Finder."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, Optional

from pydantic import BaseModel
from rich.console import Console

from recording_finder.config.locale import WeekdayLocale
from recording_finder.exceptions import SpreadsheetConversionError
from recording_finder.output import OutputHandler, ConsoleOutputHandler
from recording_finder.report.naming import build_report_path
from recording_finder.report.rows import build_rows
from recording_finder.report.spreadsheet import SpreadsheetConverter
from recording_finder.report.writer import DelimitedReportWriter
from recording_finder.scan.models import FileRecord

logger = logging.getLogger(__name__)


class ReportOutcome(BaseModel):
    """Artifacts produced by one pipeline run."""

    report_path: Path
    spreadsheet_path: Path | None = None
    row_count: int = 0


class ReportPipeline:
    """Sort matches, write the delimited report and hand it to the spreadsheet converter.

    The report is complete once the text artifact is written; a failed
    spreadsheet conversion is reported as a warning only.
    """

    def __init__(
        self,
        output_dir: Path,
        locale: WeekdayLocale,
        *,
        writer: DelimitedReportWriter | None = None,
        converter: SpreadsheetConverter | None = None,
        clock: Callable[[], datetime] = datetime.now,
        console: Optional[Console] = None,
        output_handler: OutputHandler | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            output_dir: Directory receiving the report artifacts
            locale: Weekday locale for timestamp rendering
            writer: Delimited report writer (uses default if None)
            converter: Spreadsheet converter; no spreadsheet is produced if None
            clock: Source of the report generation time
            console: Rich console for output (optional, uses default if None)
            output_handler: Custom output handler (optional, uses console if None)
        """
        self.output_dir = output_dir
        self.locale = locale
        self.writer = writer or DelimitedReportWriter()
        self.converter = converter
        self.clock = clock
        self._output_handler = output_handler or ConsoleOutputHandler(console)

    def run(self, records: Iterable[FileRecord], roots: list[str], descriptor: str) -> ReportOutcome:
        """Write the report for ``records`` and return the produced artifacts.

        Raises:
            ReportError: If the text report cannot be written
        """
        report_path = build_report_path(self.output_dir, roots, descriptor, self.clock())
        rows = build_rows(records, self.locale)
        row_count = self.writer.write(report_path, rows)
        self._output_handler.info(f"Wrote {row_count} row(s) to {report_path}")

        outcome = ReportOutcome(report_path=report_path, row_count=row_count)
        if self.converter is None:
            return outcome

        try:
            outcome.spreadsheet_path = self.converter.convert(report_path)
        except SpreadsheetConversionError as e:
            logger.debug(f"Spreadsheet conversion failed: {e}")
            self._output_handler.warning(str(e))
        return outcome
