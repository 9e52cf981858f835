"""Rasterizer and document-builder collaborators for the PDF export."""

import io
import logging
from abc import ABC, abstractmethod
from typing import Optional

import fitz
from PIL import Image
from pydantic import BaseModel

from ..config import settings

logger = logging.getLogger(__name__)


class RasterImage(BaseModel):
    width: int
    height: int
    png: bytes


class DocumentRasterizer(ABC):
    @abstractmethod
    def rasterize(self, html: str, scale: float) -> RasterImage:
        """Lay out an HTML document and return it as one PNG image."""
        ...


class DocumentBuilder(ABC):
    @abstractmethod
    def build(self, image: RasterImage, width: int, height: int) -> bytes:
        """Embed the image as a single page of the given size."""
        ...


class MuPdfRasterizer(DocumentRasterizer):
    """Uses the PyMuPDF HTML layout engine, then renders the filled area."""

    def __init__(self, page_width: Optional[int] = None, max_page_height: Optional[int] = None):
        self.page_width = page_width or settings.pdf_page_width
        self.max_page_height = max_page_height or settings.pdf_max_page_height

    def rasterize(self, html: str, scale: float) -> RasterImage:
        mediabox = fitz.Rect(0, 0, self.page_width, self.max_page_height)
        story = fitz.Story(html=html)
        more, filled = story.place(mediabox)
        if more:
            logger.warning(
                f"Report does not fit in {self.max_page_height}pt; output is truncated"
            )

        buffer = io.BytesIO()
        writer = fitz.DocumentWriter(buffer)
        device = writer.begin_page(mediabox)
        story.draw(device)
        writer.end_page()
        writer.close()

        # place() reports the filled area as a plain (x0, y0, x1, y1) tuple.
        bottom = fitz.Rect(filled).y1
        clip = fitz.Rect(0, 0, self.page_width, max(bottom, 1))
        with fitz.open(stream=buffer.getvalue(), filetype="pdf") as doc:
            pix = doc[0].get_pixmap(matrix=fitz.Matrix(scale, scale), clip=clip)
            return RasterImage(width=pix.width, height=pix.height, png=pix.tobytes("png"))


class PillowPdfBuilder(DocumentBuilder):
    """One-page PDF at 72 dpi, so one image pixel maps to one point."""

    def build(self, image: RasterImage, width: int, height: int) -> bytes:
        with Image.open(io.BytesIO(image.png)) as img:
            page = img.convert("RGB")
            if page.size != (width, height):
                page = page.resize((width, height))
            out = io.BytesIO()
            page.save(out, format="PDF", resolution=72.0)
        return out.getvalue()
