"""Default settings for Recording Finder."""

from typing import Any

from recording_finder.constants import AUDIO_EXTENSIONS, DEFAULT_OUTPUT_DIR_NAME

# Settings used when no configuration file is found. Keys mirror FinderSettings.
SETTINGS: dict[str, Any] = {
    "locale": "en",
    "text_strategy": "fold",
    "extensions": list(AUDIO_EXTENSIONS),
    "output_dir": DEFAULT_OUTPUT_DIR_NAME,
    "spreadsheet": True,
    "default_day": 0,
}
