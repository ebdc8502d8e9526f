"""Search criterion models for Recording Finder."""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator


class ByDay(BaseModel):
    """Match recordings created on, or named after, a weekday."""

    model_config = {"frozen": True}

    kind: Literal["day"] = "day"
    weekday: str = Field(..., min_length=1, description="Localized weekday name")

    @property
    def descriptor(self) -> str:
        return self.weekday


class ByText(BaseModel):
    """Match recordings whose name or path contains a text fragment."""

    model_config = {"frozen": True}

    kind: Literal["text"] = "text"
    pattern: str = Field(..., min_length=1, description="Raw search text as entered")

    @field_validator("pattern")
    @classmethod
    def reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Search text must not be blank")
        return value

    @property
    def descriptor(self) -> str:
        return self.pattern


SearchCriterion = Annotated[ByDay | ByText, Field(discriminator="kind")]
