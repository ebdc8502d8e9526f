"""Shared constants for Recording Finder."""

VERSION = "1.0.0"

# Extension-only classification of audio recordings
AUDIO_EXTENSIONS: tuple[str, ...] = (".wav", ".mp3")

UNKNOWN_DAY = "Unknown"

REPORT_HEADER = ("Day", "FileName", "DateCreated", "DateModified", "DateLastAccessed", "Path")
REPORT_DELIMITER = ","
REPORT_EXTENSION = "txt"
SPREADSHEET_EXTENSION = "xlsx"

# yyyy-MM-dd_HH-mm-ss
REPORT_TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"
ROW_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"

DEFAULT_OUTPUT_DIR_NAME = "Output"

# Settings files looked up in the working directory, first match wins
CONFIG_FILE_NAMES: tuple[str, ...] = ("recording_finder.yaml", "recording_finder.yml")
CONFIG_SCHEMA_VERSION = 1
