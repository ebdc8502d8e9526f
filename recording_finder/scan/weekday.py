"""Weekday derivation and timestamp rendering."""

import logging
import re
from datetime import date, datetime

from recording_finder.config.locale import WeekdayLocale
from recording_finder.constants import ROW_TIMESTAMP_FORMAT, UNKNOWN_DAY

logger = logging.getLogger(__name__)

# Strict ASCII YYYY-MM-DD prefix followed by whitespace
DATE_PREFIX = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})\s")


def derive_day(file_name: str, locale: WeekdayLocale) -> str:
    """Return the weekday of the date prefix in ``file_name``.

    ``"2024-06-14 Service.mp3"`` yields the localized name of Friday. Names
    without a strict prefix, or with an impossible calendar date, yield
    ``"Unknown"``. Never raises.
    """
    match = DATE_PREFIX.match(file_name)
    if match is None:
        return UNKNOWN_DAY
    year, month, day = (int(part) for part in match.groups())
    try:
        return locale.weekday_name(date(year, month, day))
    except ValueError:
        logger.debug(f"Ignoring invalid date prefix in {file_name!r}")
        return UNKNOWN_DAY


def format_timestamp(moment: datetime, locale: WeekdayLocale) -> str:
    """Render ``moment`` as ``YYYY-MM-DDTHH:MM:SS (<weekday>)``."""
    return f"{moment.strftime(ROW_TIMESTAMP_FORMAT)} ({locale.weekday_name(moment)})"
