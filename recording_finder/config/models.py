"""Pydantic models for Recording Finder configuration."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from recording_finder.config.enums import LocaleCode, TextStrategy
from recording_finder.config.locale import WeekdayLocale, get_locale
from recording_finder.constants import AUDIO_EXTENSIONS, DEFAULT_OUTPUT_DIR_NAME


class FinderSettings(BaseModel):
    """User-editable settings for a search run."""

    locale: LocaleCode = LocaleCode.EN
    text_strategy: TextStrategy = TextStrategy.FOLD
    extensions: list[str] = Field(default_factory=lambda: list(AUDIO_EXTENSIONS))
    output_dir: Path = Field(Path(DEFAULT_OUTPUT_DIR_NAME), description="Directory for report artifacts")
    roots: list[str] | None = Field(None, description="Explicit scan roots; host roots are used when omitted")
    spreadsheet: bool = Field(True, description="Also produce an .xlsx companion file")
    default_day: int = Field(0, ge=0, le=6, description="Pre-selected weekday in the day menu (0=Monday)")

    @field_validator("locale", mode="before")
    @classmethod
    def validate_locale(cls, value) -> LocaleCode:
        if isinstance(value, str):
            try:
                return LocaleCode(value.lower())
            except ValueError:
                raise ValueError(f"Invalid locale: {value}")
        return value

    @field_validator("text_strategy", mode="before")
    @classmethod
    def validate_text_strategy(cls, value) -> TextStrategy:
        if isinstance(value, str):
            try:
                return TextStrategy(value.lower())
            except ValueError:
                raise ValueError(f"Invalid text strategy: {value}")
        return value

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, value: list[str]) -> list[str]:
        """Lowercase extensions and make sure each starts with a dot."""
        normalized = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext or ext == ".":
                raise ValueError("Extensions must not be blank")
            if not ext.startswith("."):
                ext = f".{ext}"
            if ext not in normalized:
                normalized.append(ext)
        if not normalized:
            raise ValueError("At least one extension is required")
        return normalized

    @field_validator("roots")
    @classmethod
    def drop_blank_roots(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        return [root for root in value if root.strip()]

    @property
    def weekday_locale(self) -> WeekdayLocale:
        """Return the weekday locale selected by ``locale``."""
        return get_locale(self.locale)
