"""Report output exceptions for Recording Finder."""

from pathlib import Path

from recording_finder.exceptions.base import FinderError


class ReportError(FinderError):
    """Raised when the delimited report artifact cannot be written.

    This exception is raised for issues such as:
    - The output directory cannot be created
    - The report file cannot be opened for appending
    """


class SpreadsheetConversionError(FinderError):
    """Raised by a spreadsheet converter when the companion file cannot be produced.

    The report pipeline downgrades this error to a warning: the delimited
    report is considered complete regardless of the conversion outcome.
    """

    def __init__(self, source: Path, reason: str) -> None:
        super().__init__(f"Could not convert {source} to a spreadsheet: {reason}")
        self.source = source
        self.reason = reason
