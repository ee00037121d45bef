"""Input/Output modules for ASO tables and reports."""

from .table_reader import TableReader
from .report_writer import ReportWriter, format_distance

__all__ = [
    "TableReader",
    "ReportWriter",
    "format_distance",
]
