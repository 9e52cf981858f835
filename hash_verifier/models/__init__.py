"""Data models."""

from .common import ComparisonMode, FileDetails, HashAlgorithm
from .inputs import InputFile, MemoryFile, UploadedFile
from .report import Report, ReportBuilder, ReportFormat, ReportOptions
from .session import ComparisonRequest, ComparisonSession, ComparisonState

__all__ = [
    "ComparisonMode",
    "FileDetails",
    "HashAlgorithm",
    "InputFile",
    "MemoryFile",
    "UploadedFile",
    "Report",
    "ReportBuilder",
    "ReportFormat",
    "ReportOptions",
    "ComparisonRequest",
    "ComparisonSession",
    "ComparisonState",
]
