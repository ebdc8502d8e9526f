"""Delimited text report writer."""

import logging
from pathlib import Path
from typing import Iterable

from recording_finder.constants import REPORT_DELIMITER, REPORT_HEADER
from recording_finder.exceptions import ReportError
from recording_finder.report.rows import ReportRow

logger = logging.getLogger(__name__)


class DelimitedReportWriter:
    """Write the header and then append each row in its own scoped write.

    File names that are not valid in the file system encoding reach us as
    surrogate escapes; ``surrogateescape`` writes their original bytes back.
    """

    def __init__(self, encoding: str = "utf-8", errors: str = "surrogateescape") -> None:
        self.encoding = encoding
        self.errors = errors

    def write(self, path: Path, rows: Iterable[ReportRow]) -> int:
        """Write ``rows`` to ``path`` and return how many rows were appended.

        Raises:
            ReportError: If the directory or file cannot be written
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding=self.encoding, errors=self.errors, newline="") as f:
                f.write(REPORT_DELIMITER.join(REPORT_HEADER) + "\n")
            count = 0
            for row in rows:
                with open(path, "a", encoding=self.encoding, errors=self.errors, newline="") as f:
                    f.write(row.to_line() + "\n")
                count += 1
        except (OSError, UnicodeError) as e:
            raise ReportError(f"Could not write report {path}: {e}") from e

        logger.debug(f"Wrote {count} row(s) to {path}")
        return count
