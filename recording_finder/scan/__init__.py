"""File collection package for Recording Finder."""

from recording_finder.scan.collector import FileCollector
from recording_finder.scan.models import FileRecord, ScanIssue, ScanResult
from recording_finder.scan.roots import available_roots
from recording_finder.scan.weekday import derive_day, format_timestamp

__all__ = [
    "FileCollector",
    "FileRecord",
    "ScanIssue",
    "ScanResult",
    "available_roots",
    "derive_day",
    "format_timestamp",
]
