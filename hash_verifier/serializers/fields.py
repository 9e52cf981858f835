"""Labelled report fields shared by the text and HTML encoders."""

from ..models.common import FileDetails
from ..models.report import Report, ReportOptions
from ..utils.formatting import format_file_size, format_timestamp

# Keys rendered outside the "Report Details" section of the HTML document.
FILE_AND_RESULT_KEYS = (
    "Title",
    "Source File",
    "Comparison File",
    "Source Hash",
    "Comparison Hash",
    "Result",
)


def optional_overrides(options: ReportOptions) -> dict[str, str]:
    """Notes, verifier and organization, only when the user filled them in."""
    overrides = {}
    if options.purpose_notes:
        overrides["Purpose/Notes"] = options.purpose_notes
    if options.verified_by:
        overrides["Verified By"] = options.verified_by
    if options.organization:
        overrides["Organization"] = options.organization
    return overrides


def file_detail_lines(details: FileDetails, include_exif: bool = True) -> list[str]:
    lines = [
        f"Name: {details.name}",
        f"Size: {format_file_size(details.size)}",
        f"Type: {details.media_type}",
        f"Last Modified: {format_timestamp(details.last_modified)}",
    ]
    if include_exif and details.exif:
        lines.append("EXIF Data:")
        lines.extend(f"  - {key}: {value}" for key, value in details.exif.items())
    return lines


def report_fields(report: Report, options: ReportOptions) -> dict[str, str]:
    fields = {
        "Report ID": report.report_id,
        "Generated": report.generated,
        "Title": options.title_for(report),
        **optional_overrides(options),
        "Algorithm": report.algorithm.value,
        "Source File": "\n".join(file_detail_lines(report.source_file)),
    }
    if report.target_file is not None:
        fields["Comparison File"] = "\n".join(file_detail_lines(report.target_file))
    fields["Source Hash"] = report.source_hash
    fields["Comparison Hash"] = report.target_hash
    fields["Result"] = report.result
    return fields
