"""Self-contained styled HTML report."""

from html import escape

from ..models.common import FileDetails
from ..models.report import Report, ReportFormat, ReportOptions
from ..utils.formatting import format_file_size, format_timestamp
from .base import ReportEncoder
from .fields import FILE_AND_RESULT_KEYS, report_fields
from .registry import register_encoder

LOGO_DATA_URI = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAUAAAAFCAYAAACNbyblAAAAHElEQVQI12P4//8/w38GIAXDIBKE0DHxgljNBAAO9TXL0Y4OHwAAAABJRU5ErkJggg=="
)

REPORT_CONTENT_ID = "report-content"

STYLE = """
    body { font-family: 'Courier New', Courier, monospace; background-color: #0f172a; color: #cbd5e1; margin: 0; padding: 2rem; }
    .container { max-width: 800px; margin: auto; border: 1px solid #334155; padding: 2rem; border-radius: 8px; background-color: #1e293b; }
    .header { display: flex; align-items: center; border-bottom: 1px solid #334155; padding-bottom: 1rem; margin-bottom: 1rem; }
    .header img { width: 80px; height: 80px; margin-right: 1.5rem; }
    .header h1 { color: #22d3ee; margin: 0; font-size: 2em; }
    h2, h3, h4 { color: #22d3ee; border-bottom: 1px solid #475569; padding-bottom: 0.5rem; margin-top: 2rem; }
    p { margin: 0.5rem 0; }
    strong { color: #94a3b8; }
    .hash { word-break: break-all; font-size: 0.9em; background-color: #334155; padding: 0.5rem; border-radius: 4px; }
    .result { font-weight: bold; font-size: 1.2em; }
    .result.match { color: #4ade80; }
    .result.mismatch { color: #f87171; }
    .section { margin-bottom: 1.5rem; }
    .exif-data { padding-left: 1rem; border-left: 2px solid #334155; margin-top: 1rem; }
"""


def _pair(key: str, value) -> str:
    return f"<p><strong>{escape(str(key))}:</strong> {escape(str(value))}</p>"


def file_details_html(details: FileDetails) -> str:
    parts = [
        _pair("Name", details.name),
        _pair("Size", format_file_size(details.size)),
        _pair("Type", details.media_type),
        _pair("Last Modified", format_timestamp(details.last_modified)),
    ]
    if details.exif:
        parts.append('<h4>EXIF Data</h4><div class="exif-data">')
        parts.extend(_pair(key, value) for key, value in details.exif.items())
        parts.append("</div>")
    return "\n".join(parts)


def render_html(report: Report, options: ReportOptions) -> str:
    fields = report_fields(report, options)
    title = escape(fields["Title"])
    details = "\n".join(
        _pair(key, value)
        for key, value in fields.items()
        if key not in FILE_AND_RESULT_KEYS
    )
    comparison = ""
    if report.target_file is not None:
        comparison = (
            '<div class="section"><h2>Comparison File</h2>'
            f"{file_details_html(report.target_file)}</div>"
        )
    result_class = "match" if report.match else "mismatch"

    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>{STYLE}</style>
</head>
<body>
<div class="container" id="{REPORT_CONTENT_ID}">
<div class="header">
<img src="{LOGO_DATA_URI}" alt="Logo">
<h1>{title}</h1>
</div>
<div class="section">
<h2>Report Details</h2>
{details}
</div>
<div class="section">
<h2>Source File</h2>
{file_details_html(report.source_file)}
</div>
{comparison}
<div class="section">
<h2>Comparison Results</h2>
<p><strong>Source Hash:</strong></p><div class="hash">{escape(report.source_hash)}</div>
<p><strong>Comparison Hash:</strong></p><div class="hash">{escape(report.target_hash)}</div>
<p><strong>Result:</strong> <span class="result {result_class}">{escape(report.result)}</span></p>
</div>
</div>
</body>
</html>
"""


class HtmlReportEncoder(ReportEncoder):
    format = ReportFormat.HTML
    extension = "html"
    media_type = "text/html; charset=utf-8"

    def encode(self, report: Report, options: ReportOptions) -> bytes:
        return render_html(report, options).encode("utf-8")


register_encoder(HtmlReportEncoder())
