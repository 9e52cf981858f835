"""PDF report: the HTML report rasterized onto a single page."""

import logging
from typing import Optional

from ..config import settings
from ..errors import SerializationError
from ..models.report import Report, ReportFormat, ReportOptions
from .base import ReportEncoder
from .documents import (
    DocumentBuilder,
    DocumentRasterizer,
    MuPdfRasterizer,
    PillowPdfBuilder,
)
from .html_report import render_html
from .registry import register_encoder

logger = logging.getLogger(__name__)


class PdfReportEncoder(ReportEncoder):
    format = ReportFormat.PDF
    extension = "pdf"
    media_type = "application/pdf"

    def __init__(
        self,
        rasterizer: Optional[DocumentRasterizer] = None,
        builder: Optional[DocumentBuilder] = None,
        scale: Optional[float] = None,
    ):
        self.rasterizer = rasterizer or MuPdfRasterizer()
        self.builder = builder or PillowPdfBuilder()
        self.scale = scale or settings.pdf_render_scale

    def encode(self, report: Report, options: ReportOptions) -> bytes:
        html = render_html(report, options)
        try:
            image = self.rasterizer.rasterize(html, self.scale)
        except Exception as e:
            raise SerializationError(self.format.value, f"Rasterization failed: {e}") from e
        if image.width <= 0 or image.height <= 0:
            raise SerializationError(self.format.value, "Rasterizer produced an empty image")

        logger.debug(f"Rasterized report {report.report_id} to {image.width}x{image.height}")
        try:
            return self.builder.build(image, image.width, image.height)
        except Exception as e:
            raise SerializationError(self.format.value, f"PDF build failed: {e}") from e


register_encoder(PdfReportEncoder())
