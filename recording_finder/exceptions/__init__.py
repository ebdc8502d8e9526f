"""Exception hierarchy for Recording Finder."""
from recording_finder.exceptions.base import FinderError, ConfigError
from recording_finder.exceptions.config import (
    ConfigValidationError,
    YAMLConfigError,
    NoRootsSelectedError,
    NoSearchModeSelectedError,
    NoDaySelectedError,
    NoSearchTextError,
)
from recording_finder.exceptions.report import ReportError, SpreadsheetConversionError

__all__ = [
    "FinderError",
    "ConfigError",
    "ConfigValidationError",
    "YAMLConfigError",
    "NoRootsSelectedError",
    "NoSearchModeSelectedError",
    "NoDaySelectedError",
    "NoSearchTextError",
    "ReportError",
    "SpreadsheetConversionError",
]
