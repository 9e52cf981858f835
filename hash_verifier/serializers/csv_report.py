"""CSV report: one header row and one data row."""

from ..models.report import Report, ReportFormat, ReportOptions
from .base import ReportEncoder
from .registry import register_encoder

CSV_HEADERS = (
    "Report ID",
    "Generated",
    "Title",
    "Purpose/Notes",
    "Verified By",
    "Organization",
    "Algorithm",
    "Result",
    "Source File Name",
    "Source File Size",
    "Source File Type",
    "Source Hash",
    "Comparison Identifier",
    "Comparison File Name",
    "Comparison File Size",
    "Comparison File Type",
    "Comparison Hash",
)

NOT_APPLICABLE = "N/A"


def escape_cell(value) -> str:
    text = "" if value is None else str(value)
    if "," in text or '"' in text or "\n" in text:
        return '"' + text.replace('"', '""') + '"'
    return text


class CsvReportEncoder(ReportEncoder):
    format = ReportFormat.CSV
    extension = "csv"
    media_type = "text/csv; charset=utf-8"

    def row(self, report: Report, options: ReportOptions) -> list:
        target = report.target_file
        return [
            report.report_id,
            report.generated,
            options.title_for(report),
            options.purpose_notes or "",
            options.verified_by or "",
            options.organization or "",
            report.algorithm.value,
            report.result,
            report.source_file.name,
            report.source_file.size,
            report.source_file.media_type,
            report.source_hash,
            report.target_identifier,
            target.name if target else NOT_APPLICABLE,
            target.size if target else NOT_APPLICABLE,
            target.media_type if target else NOT_APPLICABLE,
            report.target_hash,
        ]

    def encode(self, report: Report, options: ReportOptions) -> bytes:
        header = ",".join(escape_cell(h) for h in CSV_HEADERS)
        data = ",".join(escape_cell(cell) for cell in self.row(report, options))
        return f"{header}\n{data}".encode("utf-8")


register_encoder(CsvReportEncoder())
