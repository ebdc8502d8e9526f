"""Configuration enums for Recording Finder."""

from enum import Enum


class TextStrategy(str, Enum):
    """Selectable diacritic-tolerant text matching strategies."""

    VARIANT = "variant"
    FOLD = "fold"

    def __str__(self) -> str:  # pragma: no cover - convenience for Typer display
        return self.value


class LocaleCode(str, Enum):
    """Locales with built-in weekday names."""

    EN = "en"
    LV = "lv"

    def __str__(self) -> str:  # pragma: no cover - convenience for Typer display
        return self.value


class SearchMode(str, Enum):
    """How matching recordings are chosen."""

    BY_DAY = "day"
    BY_TEXT = "text"

    @property
    def label(self) -> str:
        """Menu label shown to the operator."""
        if self is SearchMode.BY_DAY:
            return "Search by day of the week"
        return "Search by file name text"
