"""Report generation package for Recording Finder."""

from recording_finder.report.naming import build_report_path, format_root_names, sanitize_component
from recording_finder.report.pipeline import ReportOutcome, ReportPipeline
from recording_finder.report.rows import ReportRow, build_row, build_rows, sort_records
from recording_finder.report.spreadsheet import OpenpyxlSpreadsheetConverter, SpreadsheetConverter
from recording_finder.report.writer import DelimitedReportWriter

__all__ = [
    "build_report_path",
    "format_root_names",
    "sanitize_component",
    "ReportOutcome",
    "ReportPipeline",
    "ReportRow",
    "build_row",
    "build_rows",
    "sort_records",
    "OpenpyxlSpreadsheetConverter",
    "SpreadsheetConverter",
    "DelimitedReportWriter",
]
