"""Pydantic models for collected recordings."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from recording_finder.constants import UNKNOWN_DAY


class FileRecord(BaseModel):
    """Metadata of one audio file reached during a scan."""

    model_config = {"frozen": True}

    name: str = Field(..., description="File name including extension")
    full_path: str = Field(..., description="Path as reached through the scanned root")
    created: datetime
    modified: datetime
    accessed: datetime
    derived_day: str = Field(UNKNOWN_DAY, description="Weekday parsed from a YYYY-MM-DD name prefix")

    @field_validator("created", "modified", "accessed")
    @classmethod
    def require_timezone(cls, value: datetime) -> datetime:
        """Attach the local timezone to naive timestamps."""
        if value.tzinfo is None:
            return value.astimezone()
        return value


class ScanIssue(BaseModel):
    """A path that could not be read during a scan; its subtree was skipped."""

    model_config = {"frozen": True}

    path: str
    message: str


class ScanResult(BaseModel):
    """Records collected from the selected roots plus the paths that were skipped."""

    records: list[FileRecord] = Field(default_factory=list)
    errors: list[ScanIssue] = Field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.errors)
