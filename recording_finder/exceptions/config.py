"""Configuration-related exceptions for Recording Finder."""

from pydantic import ValidationError

from recording_finder.exceptions.base import ConfigError


class ConfigValidationError(ConfigError):
    """Raised when Pydantic validation fails for user settings.

    This exception is raised when the loaded settings fail validation due to
    incorrect data types, unknown locales or strategies, or malformed
    extension entries.
    """

    def __init__(self, message: str, *, errors: ValidationError | None = None) -> None:
        super().__init__(message)
        self.errors = errors


class YAMLConfigError(ConfigValidationError):
    """Exception raised for YAML configuration file errors.

    This includes:
    - File not found
    - YAML parsing errors
    - Invalid structure (not a mapping, wrong section types)
    - Unsupported schema version
    """
    pass


class NoRootsSelectedError(ConfigError):
    """Raised when the operator confirms the root menu without choosing a root."""

    def __init__(self) -> None:
        super().__init__("No scan roots selected; nothing to search.")


class NoSearchModeSelectedError(ConfigError):
    """Raised when the search mode menu returns no choice."""

    def __init__(self) -> None:
        super().__init__("No search mode selected.")


class NoDaySelectedError(ConfigError):
    """Raised when day search is chosen but no weekday is picked."""

    def __init__(self) -> None:
        super().__init__("No day of the week selected.")


class NoSearchTextError(ConfigError):
    """Raised when text search is chosen but the entered text is blank."""

    def __init__(self) -> None:
        super().__init__("No search text entered.")
