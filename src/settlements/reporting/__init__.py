from .report_sink import ExcelReportSink, ReportSink, TextReportSink
from .table import COLUMNS, format_row, ranking_lines, totals_lines

__all__ = [
    "COLUMNS",
    "ExcelReportSink",
    "ReportSink",
    "TextReportSink",
    "format_row",
    "ranking_lines",
    "totals_lines",
]
