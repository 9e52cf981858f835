"""Comparison API endpoints."""

from typing import Optional

from fastapi import APIRouter, File, Form, HTTPException, UploadFile

from ..config import settings
from ..errors import (
    ComparisonInProgress,
    DigestComputationError,
    StaleComparison,
    UnsupportedAlgorithm,
    ValidationError,
)
from ..models.common import ComparisonMode, HashAlgorithm
from ..models.inputs import UploadedFile
from ..models.session import ComparisonRequest
from ..services.comparison import comparison_orchestrator

router = APIRouter(prefix="/compare", tags=["compare"])


def _as_input(upload: Optional[UploadFile], last_modified: Optional[int]) -> Optional[UploadedFile]:
    # Browsers send an empty, unnamed part when no file was chosen.
    if upload is None or (not upload.filename and not upload.size):
        return None
    if upload.size and upload.size > settings.max_upload_size_mb * 1024 * 1024:
        raise HTTPException(status_code=413, detail=f"{upload.filename} is too large")
    return UploadedFile(upload, last_modified)


@router.post("")
async def compare(
    source: Optional[UploadFile] = File(None),
    comparison: Optional[UploadFile] = File(None),
    mode: ComparisonMode = Form(ComparisonMode.FILE_VS_FILE),
    algorithm: str = Form(settings.default_algorithm),
    expected_hash: str = Form(""),
    source_last_modified: Optional[int] = Form(None),
    comparison_last_modified: Optional[int] = Form(None),
):
    try:
        request = ComparisonRequest(
            mode=mode,
            algorithm=HashAlgorithm.parse(algorithm),
            source=_as_input(source, source_last_modified),
            comparison=_as_input(comparison, comparison_last_modified),
            expected_hash=expected_hash,
        )
        return await comparison_orchestrator.compare(request)
    except (ValidationError, UnsupportedAlgorithm) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (ComparisonInProgress, StaleComparison) as e:
        raise HTTPException(status_code=409, detail=str(e))
    except DigestComputationError as e:
        raise HTTPException(status_code=500, detail=f"An error occurred: {e}")


@router.get("/status")
async def comparison_status():
    session = comparison_orchestrator.session
    return {
        "session_id": session.id,
        "state": session.state,
        "error": session.error,
        "report_id": session.report.report_id if session.report else None,
        "updated_at": session.updated_at,
    }


@router.post("/reset")
async def reset_comparison():
    comparison_orchestrator.reset()
    return {"state": comparison_orchestrator.session.state}
