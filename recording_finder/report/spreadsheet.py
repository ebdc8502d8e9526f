"""Conversion of the delimited report into a spreadsheet."""

import logging
from pathlib import Path
from typing import Protocol

from openpyxl import Workbook
from openpyxl.utils.exceptions import IllegalCharacterError

from recording_finder.constants import REPORT_DELIMITER, SPREADSHEET_EXTENSION
from recording_finder.exceptions import SpreadsheetConversionError

logger = logging.getLogger(__name__)


class SpreadsheetConverter(Protocol):
    """Turns a delimited text report into a spreadsheet file."""

    def convert(self, source: Path) -> Path:
        """Convert ``source`` and return the spreadsheet path.

        Raises:
            SpreadsheetConversionError: If the spreadsheet cannot be produced
        """
        ...


class OpenpyxlSpreadsheetConverter:
    """Re-read the text report and write a sibling ``.xlsx`` workbook.

    Bytes that do not decode (names written back from surrogate escapes)
    become U+FFFD in the workbook, which only accepts valid text.
    """

    def __init__(self, sheet_title: str = "Recordings", encoding: str = "utf-8") -> None:
        self.sheet_title = sheet_title
        self.encoding = encoding

    def target_path(self, source: Path) -> Path:
        return source.with_suffix(f".{SPREADSHEET_EXTENSION}")

    def convert(self, source: Path) -> Path:
        target = self.target_path(source)
        try:
            with open(source, "r", encoding=self.encoding, errors="replace") as f:
                lines = f.read().splitlines()

            workbook = Workbook()
            sheet = workbook.active
            sheet.title = self.sheet_title
            for line in lines:
                # Rows are split the same naive way they were joined
                sheet.append(line.split(REPORT_DELIMITER))
            if lines:
                sheet.freeze_panes = "A2"
            workbook.save(target)
        except (OSError, ValueError, IllegalCharacterError) as e:
            raise SpreadsheetConversionError(source, str(e)) from e

        logger.debug(f"Converted {source} to {target}")
        return target
