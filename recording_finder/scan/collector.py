"""Recursive collection of audio recordings under the selected roots."""

import logging
import os
from datetime import datetime
from typing import Iterable, Optional

from rich.console import Console
from tqdm import tqdm

from recording_finder.config.locale import WeekdayLocale
from recording_finder.constants import AUDIO_EXTENSIONS
from recording_finder.output import OutputHandler, ConsoleOutputHandler
from recording_finder.scan.models import FileRecord, ScanIssue, ScanResult
from recording_finder.scan.weekday import derive_day

logger = logging.getLogger(__name__)


class FileCollector:
    """Enumerate audio files below one or more roots and extract their metadata.

    Roots are walked one after another. A subtree that cannot be listed, or a
    file that cannot be stat'ed, is skipped and recorded in
    ``ScanResult.errors``; the scan itself always continues. The same physical
    file reached through two roots yields two records.
    """

    def __init__(
        self,
        locale: WeekdayLocale,
        *,
        extensions: Iterable[str] = AUDIO_EXTENSIONS,
        show_progress: bool = True,
        console: Optional[Console] = None,
        output_handler: OutputHandler | None = None,
    ) -> None:
        """Initialize the collector.

        Args:
            locale: Weekday locale used to classify date-prefixed names
            extensions: File extensions to collect, compared case-insensitively
            show_progress: Whether to display a tqdm progress bar over roots
            console: Rich console for output (optional, uses default if None)
            output_handler: Custom output handler (optional, uses console if None)
        """
        self.locale = locale
        self.extensions = tuple(ext.lower() for ext in extensions)
        self.show_progress = show_progress
        self._output_handler = output_handler or ConsoleOutputHandler(console)

    def collect(self, roots: Iterable[str]) -> ScanResult:
        """Walk every root and return the collected records and skipped paths."""
        result = ScanResult()
        roots = list(roots)
        for root in tqdm(roots, desc="Scanning roots", unit="root", disable=not self.show_progress):
            self._collect_root(root, result)

        if result.errors:
            logger.debug(f"Skipped {len(result.errors)} unreadable path(s) during scan")
        self._output_handler.info(
            f"Found {len(result.records)} recording(s) under {len(roots)} root(s)."
        )
        return result

    def _collect_root(self, root: str, result: ScanResult) -> None:
        def on_error(error: OSError) -> None:
            path = error.filename or root
            logger.debug(f"Skipping unreadable subtree {path}: {error}")
            result.errors.append(ScanIssue(path=str(path), message=str(error)))

        for dirpath, _dirnames, filenames in os.walk(root, onerror=on_error):
            for filename in filenames:
                if not self.is_recording(filename):
                    continue
                full_path = os.path.join(dirpath, filename)
                try:
                    record = self.build_record(filename, full_path)
                except OSError as error:
                    logger.debug(f"Skipping unreadable file {full_path}: {error}")
                    result.errors.append(ScanIssue(path=full_path, message=str(error)))
                    continue
                result.records.append(record)

    def is_recording(self, filename: str) -> bool:
        """Return True if ``filename`` carries one of the collected extensions."""
        return os.path.splitext(filename)[1].lower() in self.extensions

    def build_record(self, filename: str, full_path: str) -> FileRecord:
        """Stat ``full_path`` and build its FileRecord.

        Raises:
            OSError: If the file cannot be stat'ed
        """
        stat = os.stat(full_path)
        # st_birthtime is only reported by some platforms
        created = getattr(stat, "st_birthtime", None) or stat.st_ctime
        return FileRecord(
            name=filename,
            full_path=full_path,
            created=_local_time(created),
            modified=_local_time(stat.st_mtime),
            accessed=_local_time(stat.st_atime),
            derived_day=derive_day(filename, self.locale),
        )


def _local_time(timestamp: float) -> datetime:
    return datetime.fromtimestamp(timestamp).astimezone()
