"""EXIF extraction via Pillow."""

import asyncio
import io
import logging
import re
from typing import Optional

from PIL import ExifTags, Image, UnidentifiedImageError

from ..errors import MetadataExtractionError
from ..models.inputs import InputFile
from .base import MetadataExtractor

logger = logging.getLogger(__name__)

EXIF_MEDIA_TYPES = re.compile(r"image/(jpeg|jpg|tiff|heic|heif)")

_SUB_IFDS = (
    (0x8769, ExifTags.TAGS),
    (0x8825, ExifTags.GPSTAGS),
)
# Thumbnail payload and pointers to sub-IFDs are not worth reporting.
_SKIPPED_TAGS = {0x0201, 0x0202, 0x927C, 0x8769, 0x8825, 0xA005}


def _describe(value) -> Optional[str]:
    if isinstance(value, bytes):
        text = value.decode("utf-8", errors="replace").strip("\x00 ").strip()
        if not text or not text.isprintable():
            return None
        return text
    if isinstance(value, tuple):
        parts = [_describe(v) for v in value]
        if any(p is None for p in parts):
            return None
        return ", ".join(parts)
    text = str(value).strip("\x00 ").strip()
    return text or None


class ExifExtractor(MetadataExtractor):
    name = "exif"

    async def extract(self, file: InputFile, data: bytes) -> Optional[dict[str, str]]:
        if not EXIF_MEDIA_TYPES.match(file.media_type or ""):
            return None
        return await asyncio.to_thread(self.read_tags, data)

    def read_tags(self, data: bytes) -> Optional[dict[str, str]]:
        try:
            with Image.open(io.BytesIO(data)) as img:
                exif = img.getexif()
                tags = self._collect(exif.items(), ExifTags.TAGS)
                for pointer, names in _SUB_IFDS:
                    tags.update(self._collect(exif.get_ifd(pointer).items(), names))
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
            raise MetadataExtractionError(f"Error reading EXIF data: {e}") from e

        logger.debug(f"Extracted {len(tags)} EXIF tags")
        return tags or None

    def _collect(self, items, names: dict) -> dict[str, str]:
        tags = {}
        for tag_id, value in items:
            if tag_id in _SKIPPED_TAGS:
                continue
            description = _describe(value)
            if description is None:
                continue
            tags[names.get(tag_id, f"Tag 0x{tag_id:04X}")] = description
        return tags
