"""File metadata extractors."""

from .base import MetadataExtractor
from .exif import ExifExtractor

__all__ = ["MetadataExtractor", "ExifExtractor"]
