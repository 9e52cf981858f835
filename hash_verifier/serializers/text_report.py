"""Plain text report."""

from ..models.report import Report, ReportFormat, ReportOptions
from .base import ReportEncoder
from .fields import report_fields
from .registry import register_encoder


class TextReportEncoder(ReportEncoder):
    format = ReportFormat.TXT
    extension = "txt"
    media_type = "text/plain; charset=utf-8"

    def encode(self, report: Report, options: ReportOptions) -> bytes:
        blocks = []
        for key, value in report_fields(report, options).items():
            indented = "\n".join(f"  {line}" for line in str(value).split("\n"))
            blocks.append(f"{key}:\n{indented}")
        return "\n\n".join(blocks).encode("utf-8")


register_encoder(TextReportEncoder())
