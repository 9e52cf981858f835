"""Report encoders."""

from .registry import get_encoder, get_all_encoders, register_encoder
from .base import ReportEncoder, ReportPayload
from .text_report import TextReportEncoder
from .json_report import JsonReportEncoder
from .csv_report import CsvReportEncoder
from .html_report import HtmlReportEncoder
from .pdf_report import PdfReportEncoder

__all__ = [
    "get_encoder",
    "get_all_encoders",
    "register_encoder",
    "ReportEncoder",
    "ReportPayload",
    "TextReportEncoder",
    "JsonReportEncoder",
    "CsvReportEncoder",
    "HtmlReportEncoder",
    "PdfReportEncoder",
]
