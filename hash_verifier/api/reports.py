"""Report retrieval and export endpoints."""

import base64
from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from ..errors import NoReportAvailable, SerializationError
from ..models.report import Report, ReportFormat, ReportOptions
from ..services.comparison import comparison_orchestrator
from ..services.export import report_exporter

router = APIRouter(prefix="/report", tags=["report"])


def _current_report() -> Report:
    try:
        return comparison_orchestrator.require_report()
    except NoReportAvailable as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("")
async def get_report():
    return _current_report()


# Plain ``def`` endpoints run in the threadpool; PDF rendering is slow.
@router.get("/download/{format}")
def download_report(
    format: ReportFormat,
    title: Optional[str] = None,
    notes: Optional[str] = None,
    verified_by: Optional[str] = None,
    organization: Optional[str] = None,
):
    report = _current_report()
    options = ReportOptions(
        formats=[format],
        report_title=title,
        purpose_notes=notes,
        verified_by=verified_by,
        organization=organization,
    )
    try:
        payload = report_exporter.render(report, format, options)
    except SerializationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return Response(
        content=payload.content,
        media_type=payload.media_type,
        headers={"Content-Disposition": f'attachment; filename="{payload.filename}"'},
    )


@router.post("/export")
def export_report(options: ReportOptions):
    report = _current_report()
    exports = []
    for result in report_exporter.export(report, options):
        entry = {
            "format": result.format,
            "filename": result.filename,
            "ok": result.ok,
            "error": result.error,
        }
        if result.payload is not None:
            entry["media_type"] = result.payload.media_type
            entry["size"] = len(result.payload.content)
            entry["content"] = base64.b64encode(result.payload.content).decode("ascii")
        exports.append(entry)
    return {"report_id": report.report_id, "exports": exports}
