"""Configuration package for Recording Finder."""

# Re-export enums
from recording_finder.config.enums import TextStrategy, LocaleCode, SearchMode

# Re-export models
from recording_finder.config.models import FinderSettings
from recording_finder.config.locale import WeekdayLocale, ENGLISH, LATVIAN, get_locale

# Re-export loading machinery
from recording_finder.config.loader import ConfigLoader
from recording_finder.config.generator import ConfigGenerator

# Re-export defaults
from recording_finder.config.defaults import SETTINGS

__all__ = [
    # Enums
    "TextStrategy",
    "LocaleCode",
    "SearchMode",
    # Models
    "FinderSettings",
    "WeekdayLocale",
    "ENGLISH",
    "LATVIAN",
    "get_locale",
    # Loading
    "ConfigLoader",
    "ConfigGenerator",
    # Defaults
    "SETTINGS",
]
