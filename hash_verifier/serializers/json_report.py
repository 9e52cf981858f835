"""JSON report."""

import json
from typing import Any

from ..models.common import FileDetails
from ..models.report import Report, ReportFormat, ReportOptions
from .base import ReportEncoder
from .fields import optional_overrides
from .registry import register_encoder


def _file_details(details: FileDetails) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": details.name,
        "size": details.size,
        "type": details.media_type,
        "lastModified": details.last_modified.isoformat(),
    }
    if details.exif:
        data["exif"] = dict(details.exif)
    return data


class JsonReportEncoder(ReportEncoder):
    format = ReportFormat.JSON
    extension = "json"
    media_type = "application/json"

    def build(self, report: Report, options: ReportOptions) -> dict[str, Any]:
        document: dict[str, Any] = {
            "reportMetadata": {
                "Report ID": report.report_id,
                "Generated": report.generated,
                "Title": options.title_for(report),
                **optional_overrides(options),
            },
            "comparisonDetails": {
                "Algorithm": report.algorithm.value,
                "Source Hash": report.source_hash,
                "Comparison Hash": report.target_hash,
                "Result": report.result,
                "Match": report.match,
            },
            "sourceFile": _file_details(report.source_file),
        }
        if report.target_file is not None:
            document["comparisonFile"] = _file_details(report.target_file)
        return document

    def encode(self, report: Report, options: ReportOptions) -> bytes:
        return json.dumps(self.build(report, options), indent=2, ensure_ascii=False).encode("utf-8")


register_encoder(JsonReportEncoder())
