"""Default configuration source for Recording Finder."""

from typing import Any

from recording_finder.config.defaults import SETTINGS
from recording_finder.constants import CONFIG_SCHEMA_VERSION


class DefaultConfigSource:
    """Provide built-in default configuration.

    Implements the ConfigSource protocol using the Python defaults
    defined in recording_finder/config/defaults.py.
    """

    @property
    def source_description(self) -> str:
        """Human-readable description of the config source."""
        return "built-in defaults"

    def load(self) -> tuple[dict[str, Any], int]:
        """Load the built-in default configuration.

        Returns:
            Tuple of (settings_data, schema_version)
        """
        return dict(SETTINGS), CONFIG_SCHEMA_VERSION
