"""Report file naming for Recording Finder."""

import re
from datetime import datetime
from pathlib import Path
from typing import Iterable

from recording_finder.constants import REPORT_EXTENSION, REPORT_TIMESTAMP_FORMAT

ILLEGAL_CHARACTERS = re.compile(r'[\\/:*?"<>|]')
PATH_SEPARATORS = "\\/"


def sanitize_component(text: str) -> str:
    """Replace every character that is illegal in file names with an underscore."""
    return ILLEGAL_CHARACTERS.sub("_", text)


def format_root_names(roots: Iterable[str]) -> str:
    """Join the selected roots into one file name component.

    Leading and trailing path separators are trimmed from each root before
    joining with underscores: ``["C:\\", "/mnt/data"]`` becomes ``"C__mnt_data"``.
    """
    trimmed = [root.strip(PATH_SEPARATORS) or root for root in roots]
    return sanitize_component("_".join(trimmed))


def build_report_path(
    output_dir: Path,
    roots: Iterable[str],
    descriptor: str,
    generated_at: datetime,
    extension: str = REPORT_EXTENSION,
) -> Path:
    """Build ``<output_dir>/<rootNames> (<descriptor>) <yyyy-MM-dd_HH-mm-ss>.<extension>``.

    Args:
        output_dir: Directory receiving the report
        roots: Selected scan roots
        descriptor: Weekday name or raw search text
        generated_at: Report generation time
        extension: File extension (default: "txt")

    Returns:
        Complete report path with sanitized file name
    """
    stamp = generated_at.strftime(REPORT_TIMESTAMP_FORMAT)
    name = f"{format_root_names(roots)} ({sanitize_component(descriptor)}) {stamp}"
    return output_dir / f"{name}.{extension}"
