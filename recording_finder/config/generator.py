"""Configuration file generator for Recording Finder."""

from pathlib import Path
from typing import Any

import yaml

from recording_finder.config.defaults import SETTINGS
from recording_finder.constants import CONFIG_SCHEMA_VERSION


# Template header with documentation
CONFIG_HEADER = """\
# Recording Finder Configuration File
# ====================================
#
#   locale:        Weekday names used in reports and menus - one of:
#                  - en: English (Monday ... Sunday)
#                  - lv: Latvian (pirmdiena ... svētdiena)
#   text_strategy: How file name text search tolerates diacritics - one of:
#                  - fold:    strip accents from query and names, then compare
#                  - variant: expand each letter into [plain/accented] classes
#   extensions:    Audio file extensions to collect (case-insensitive)
#   output_dir:    Directory receiving the .txt report and .xlsx spreadsheet
#   roots:         (optional) Explicit list of scan roots offered in the menu.
#                  When omitted, the drives/volumes of this host are offered.
#   spreadsheet:   Produce the .xlsx companion file (true/false)
#   default_day:   Weekday pre-selected in the day menu (0=Monday ... 6=Sunday)

"""


class ConfigGenerator:
    """Generate example YAML configuration files.

    This class creates well-documented configuration files based on
    the default settings or a custom settings mapping.
    """

    def __init__(self, settings: dict[str, Any] | None = None) -> None:
        self.settings = settings if settings is not None else SETTINGS

    def generate(self, output_path: Path, *, include_header: bool = True) -> None:
        """Generate a YAML configuration file.

        Args:
            output_path: Path where the config file will be written
            include_header: Whether to include documentation header

        Raises:
            OSError: If the file cannot be written
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)

        config = {'schema_version': CONFIG_SCHEMA_VERSION, **self.settings}

        yaml_content = yaml.safe_dump(
            config,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
            width=80,
        )

        with open(output_path, 'w', encoding='utf-8') as f:
            if include_header:
                f.write(CONFIG_HEADER)
            f.write(yaml_content)
