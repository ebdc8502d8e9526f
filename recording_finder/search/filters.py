"""Narrowing collected recordings down to the ones matching a criterion."""

from typing import Iterable

from recording_finder.config.locale import WeekdayLocale
from recording_finder.scan.models import FileRecord
from recording_finder.search.criteria import ByDay, SearchCriterion
from recording_finder.search.diacritics import DiacriticEngine


def matches_day(record: FileRecord, weekday: str, locale: WeekdayLocale) -> bool:
    """Return True if the record was created on ``weekday`` OR is named after it.

    A file created on a Tuesday but named ``2024-06-14 ...`` (a Friday)
    matches both "Tuesday" and "Friday".
    """
    return locale.weekday_name(record.created) == weekday or record.derived_day == weekday


def matches_text(record: FileRecord, pattern: str, engine: DiacriticEngine) -> bool:
    """Return True if ``pattern`` occurs in the file name OR the full path."""
    return engine.matches(pattern, record.name) or engine.matches(pattern, record.full_path)


def filter_records(
    records: Iterable[FileRecord],
    criterion: SearchCriterion,
    *,
    engine: DiacriticEngine,
    locale: WeekdayLocale,
) -> list[FileRecord]:
    """Return the records matching ``criterion`` in their discovery order.

    The input collection is not modified.
    """
    if isinstance(criterion, ByDay):
        return [record for record in records if matches_day(record, criterion.weekday, locale)]
    return [record for record in records if matches_text(record, criterion.pattern, engine)]
