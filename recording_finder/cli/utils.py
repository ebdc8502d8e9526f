"""CLI utility functions for Recording Finder."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from recording_finder.config import ConfigLoader, FinderSettings
from recording_finder.constants import CONFIG_FILE_NAMES

logger = logging.getLogger(__name__)


def _sanitize_path(path: Path) -> Path:
    """Return a normalized, absolute version of ``path``."""

    return path.expanduser().resolve()


def _default_config_path() -> Path:
    """Where ``init-config`` writes when no path is given."""

    return Path.cwd() / CONFIG_FILE_NAMES[0]


def _find_config_file(config_path: Optional[Path]) -> Path | None:
    """Return the settings file to load, or None to run on built-in defaults.

    An explicit ``--config`` path must exist. Otherwise the working directory
    is searched for ``recording_finder.yaml`` and then ``recording_finder.yml``.

    Raises:
        FileNotFoundError: If an explicit config path does not exist
    """

    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        return config_path

    for name in CONFIG_FILE_NAMES:
        candidate = Path.cwd() / name
        if candidate.is_file():
            logger.debug(f"Using settings file {candidate}")
            return candidate
    return None


def _select_loader(config_path: Optional[Path]) -> ConfigLoader:
    """Pick the YAML loader for a resolved config file, or the built-in defaults.

    Raises:
        FileNotFoundError: If an explicit config path does not exist
    """

    found = _find_config_file(config_path)
    if found is None:
        return ConfigLoader.from_defaults()
    return ConfigLoader.from_yaml(found)


def _load_settings(config_path: Optional[Path]) -> FinderSettings:
    """Load settings and anchor a relative output directory at the working directory."""

    settings = _select_loader(config_path).load()
    return settings.model_copy(update={"output_dir": _sanitize_path(settings.output_dir)})
