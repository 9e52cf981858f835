"""Report export: run each requested encoder in isolation."""

import logging
from typing import Optional

from pydantic import BaseModel

from ..errors import SerializationError
from ..models.report import Report, ReportFormat, ReportOptions
from ..serializers.base import ReportEncoder, ReportPayload
from ..serializers import get_encoder

logger = logging.getLogger(__name__)


class ExportResult(BaseModel):
    format: ReportFormat
    filename: str
    payload: Optional[ReportPayload] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.payload is not None


class ReportExporter:
    def __init__(self, encoders: Optional[dict[ReportFormat, ReportEncoder]] = None):
        self._encoders = encoders

    def encoder_for(self, format: ReportFormat) -> ReportEncoder:
        if self._encoders is not None:
            encoder = self._encoders.get(format)
        else:
            encoder = get_encoder(format)
        if encoder is None:
            raise SerializationError(format.value, "No encoder registered")
        return encoder

    def render(self, report: Report, format: ReportFormat, options: ReportOptions) -> ReportPayload:
        """Encode one format, raising SerializationError on any failure."""
        try:
            return self.encoder_for(format).payload(report, options)
        except SerializationError:
            raise
        except Exception as e:
            raise SerializationError(format.value, str(e) or type(e).__name__) from e

    def export(self, report: Report, options: ReportOptions) -> list[ExportResult]:
        results = []
        # Duplicate format requests collapse to one payload.
        for format in dict.fromkeys(options.formats):
            filename = f"{report.filename_stem}.{format.value}"
            try:
                payload = self.render(report, format, options)
            except SerializationError as e:
                logger.error(f"Export of report {report.report_id} as {format.value} failed: {e}")
                results.append(ExportResult(format=format, filename=filename, error=str(e)))
                continue
            results.append(ExportResult(format=format, filename=payload.filename, payload=payload))
        return results


# Singleton
report_exporter = ReportExporter()
