"""Explicit weekday locale used for every weekday/timestamp rendering."""

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator

from recording_finder.config.enums import LocaleCode


class WeekdayLocale(BaseModel):
    """Weekday names for one locale, Monday first.

    Instances are passed explicitly to every formatting call instead of
    relying on process-wide locale state.
    """

    model_config = {"frozen": True}

    code: str
    weekdays: tuple[str, str, str, str, str, str, str] = Field(
        ..., description="Weekday names, Monday first"
    )

    @field_validator("weekdays")
    @classmethod
    def strip_names(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        names = tuple(name.strip() for name in value)
        if any(not name for name in names):
            raise ValueError("Weekday names must not be blank")
        return names

    def weekday_name(self, moment: date | datetime) -> str:
        """Return the localized weekday name of ``moment``."""
        return self.weekdays[moment.weekday()]


ENGLISH = WeekdayLocale(
    code=LocaleCode.EN.value,
    weekdays=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
)

LATVIAN = WeekdayLocale(
    code=LocaleCode.LV.value,
    weekdays=("pirmdiena", "otrdiena", "trešdiena", "ceturtdiena", "piektdiena", "sestdiena", "svētdiena"),
)

_LOCALES: dict[LocaleCode, WeekdayLocale] = {
    LocaleCode.EN: ENGLISH,
    LocaleCode.LV: LATVIAN,
}


def get_locale(code: LocaleCode | str) -> WeekdayLocale:
    """Look up the built-in weekday locale for ``code``.

    Raises:
        ValueError: If no built-in locale exists for the code
    """
    try:
        return _LOCALES[LocaleCode(code)]
    except ValueError:
        raise ValueError(f"Unsupported locale: {code}") from None
