"""Conversion of matching recordings into report rows."""

from typing import Iterable

from pydantic import BaseModel

from recording_finder.config.locale import WeekdayLocale
from recording_finder.constants import REPORT_DELIMITER
from recording_finder.scan.models import FileRecord
from recording_finder.scan.weekday import format_timestamp


class ReportRow(BaseModel):
    """One line of the delimited report."""

    model_config = {"frozen": True}

    day: str
    name: str
    created: str
    modified: str
    accessed: str
    path: str

    def fields(self) -> tuple[str, ...]:
        return (self.day, self.name, self.created, self.modified, self.accessed, self.path)

    def to_line(self) -> str:
        """Join the fields with commas. Embedded commas and quotes are not escaped."""
        return REPORT_DELIMITER.join(self.fields())


def sort_records(records: Iterable[FileRecord]) -> list[FileRecord]:
    """Sort ascending by creation time; ties keep discovery order."""
    return sorted(records, key=lambda record: record.created)


def build_row(record: FileRecord, locale: WeekdayLocale) -> ReportRow:
    """Project a record into a report row."""
    return ReportRow(
        day=record.derived_day,
        name=record.name,
        created=format_timestamp(record.created, locale),
        modified=format_timestamp(record.modified, locale),
        accessed=format_timestamp(record.accessed, locale),
        path=record.full_path,
    )


def build_rows(records: Iterable[FileRecord], locale: WeekdayLocale) -> list[ReportRow]:
    """Sort ``records`` and project each into a report row."""
    return [build_row(record, locale) for record in sort_records(records)]
