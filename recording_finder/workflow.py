"""Interactive search run: gather choices, scan, filter and report."""

import logging
from typing import Callable, Optional

from rich.console import Console

from recording_finder.config import FinderSettings, SearchMode
from recording_finder.exceptions import (
    NoDaySelectedError,
    NoRootsSelectedError,
    NoSearchModeSelectedError,
    NoSearchTextError,
)
from recording_finder.menu import SelectionMenu, SelectionMode, TextPrompt
from recording_finder.output import ConsoleOutputHandler
from recording_finder.report import OpenpyxlSpreadsheetConverter, ReportOutcome, ReportPipeline
from recording_finder.scan import FileCollector, available_roots
from recording_finder.search import ByDay, ByText, SearchCriterion, filter_records, get_engine

logger = logging.getLogger(__name__)

SEARCH_MODES = [SearchMode.BY_DAY, SearchMode.BY_TEXT]


class FinderWorkflow:
    """Run one complete interactive search.

    The selection menu is used for the roots (multi-select), the search mode
    and, in day mode, the weekday. Missing input aborts the run with a
    configuration error before anything is scanned or written.
    """

    def __init__(
        self,
        settings: FinderSettings,
        *,
        menu: SelectionMenu,
        text_prompt: TextPrompt,
        collector: FileCollector | None = None,
        pipeline: ReportPipeline | None = None,
        roots_provider: Callable[[], list[str]] = available_roots,
        console: Optional[Console] = None,
    ) -> None:
        self.settings = settings
        self.locale = settings.weekday_locale
        self.menu = menu
        self.text_prompt = text_prompt
        self.roots_provider = roots_provider
        self.console = console or Console()
        self._output_handler = ConsoleOutputHandler(self.console)
        self.engine = get_engine(settings.text_strategy)
        self.collector = collector or FileCollector(
            self.locale,
            extensions=settings.extensions,
            output_handler=self._output_handler,
        )
        self.pipeline = pipeline or ReportPipeline(
            settings.output_dir,
            self.locale,
            converter=OpenpyxlSpreadsheetConverter() if settings.spreadsheet else None,
            output_handler=self._output_handler,
        )

    def select_roots(self) -> list[str]:
        """Ask which roots to scan.

        Raises:
            NoRootsSelectedError: If the operator confirms with nothing selected
        """
        options = self.settings.roots or self.roots_provider()
        indices = self.menu.choose_indices("Select the roots to scan", options, SelectionMode.MULTI)
        if not indices:
            raise NoRootsSelectedError()
        return [options[index] for index in indices]

    def select_criterion(self) -> SearchCriterion:
        """Ask for the search mode and its argument.

        Raises:
            NoSearchModeSelectedError: If no search mode is chosen
            NoDaySelectedError: If day mode is chosen without a weekday
            NoSearchTextError: If text mode is chosen with blank text
        """
        labels = [mode.label for mode in SEARCH_MODES]
        indices = self.menu.choose_indices("Select the search mode", labels, SelectionMode.SINGLE)
        if not indices:
            raise NoSearchModeSelectedError()

        if SEARCH_MODES[indices[0]] is SearchMode.BY_DAY:
            days = self.menu.run(
                "Select the day of the week",
                list(self.locale.weekdays),
                SelectionMode.SINGLE,
                self.settings.default_day,
            )
            if not days:
                raise NoDaySelectedError()
            return ByDay(weekday=days[0])

        text = self.text_prompt.ask("Enter the text to search for")
        if not text or not text.strip():
            raise NoSearchTextError()
        return ByText(pattern=text)

    def run(self) -> ReportOutcome:
        """Gather the configuration interactively, then scan and report.

        Raises:
            ConfigError: If a required choice is missing
            ReportError: If the report cannot be written
        """
        roots = self.select_roots()
        criterion = self.select_criterion()
        logger.debug(f"Searching {roots} with {criterion!r} ({self.engine.strategy.value} strategy)")

        scan = self.collector.collect(roots)
        matches = filter_records(scan.records, criterion, engine=self.engine, locale=self.locale)
        outcome = self.pipeline.run(matches, roots, criterion.descriptor)

        self._output_handler.print_run_summary(
            descriptor=criterion.descriptor,
            match_count=outcome.row_count,
            skipped_count=scan.skipped_count,
            report_path=outcome.report_path,
            spreadsheet_path=outcome.spreadsheet_path,
        )
        return outcome
