"""Configuration loader for Recording Finder."""

import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from pydantic import ValidationError

from recording_finder.config.default_source import DefaultConfigSource
from recording_finder.config.models import FinderSettings
from recording_finder.config.yaml_source import YAMLConfigSource
from recording_finder.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


@runtime_checkable
class ConfigSource(Protocol):
    """Anything that yields raw settings plus the schema version they were written for."""

    def load(self) -> tuple[dict[str, Any], int]: ...

    @property
    def source_description(self) -> str: ...


class ConfigLoader:
    """Load and validate user-editable settings.

    Raw configuration data from a ConfigSource is validated into a
    FinderSettings model. Pydantic failures are wrapped in
    ConfigValidationError so the CLI can report them uniformly.

    Attributes:
        _settings_data: Raw settings dictionary
        _source_description: Where the data came from, for messages
    """

    def __init__(self, settings_data: dict[str, Any], *, source_description: str = "inline settings") -> None:
        self._settings_data = dict(settings_data)
        self._source_description = source_description

    @classmethod
    def from_source(cls, source: ConfigSource) -> "ConfigLoader":
        """Create a loader from any ConfigSource implementation."""
        settings_data, schema_version = source.load()
        logger.debug(f"Loaded settings schema v{schema_version} from {source.source_description}")
        return cls(settings_data, source_description=source.source_description)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "ConfigLoader":
        """Create a loader backed by a YAML configuration file."""
        return cls.from_source(YAMLConfigSource(config_path))

    @classmethod
    def from_defaults(cls) -> "ConfigLoader":
        """Create a loader backed by the built-in defaults."""
        return cls.from_source(DefaultConfigSource())

    @property
    def source_description(self) -> str:
        return self._source_description

    def load(self) -> FinderSettings:
        """Return validated settings.

        Raises:
            ConfigValidationError: If the settings data is invalid
        """
        try:
            return FinderSettings(**self._settings_data)
        except ValidationError as e:
            raise ConfigValidationError(
                f"Invalid settings in {self._source_description}: {e.error_count()} error(s)\n{e}",
                errors=e,
            ) from e
