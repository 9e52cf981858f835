"""Core shared models."""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..errors import UnsupportedAlgorithm


class HashAlgorithm(str, Enum):
    MD5 = "MD5"
    SHA1 = "SHA-1"
    SHA256 = "SHA-256"
    SHA384 = "SHA-384"
    SHA512 = "SHA-512"

    @classmethod
    def parse(cls, value: "str | HashAlgorithm") -> "HashAlgorithm":
        """Resolve user input such as ``sha256`` or ``SHA-256``."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().upper().replace("-", "").replace("_", "")
        for member in cls:
            if member.value.replace("-", "") == key:
                return member
        raise UnsupportedAlgorithm(str(value))


class ComparisonMode(str, Enum):
    FILE_VS_FILE = "file_vs_file"
    FILE_VS_HASH = "file_vs_hash"


class FileDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    size: int = Field(default=0, ge=0)
    media_type: str = ""
    last_modified: datetime
    exif: Optional[Mapping[str, str]] = None

    @field_validator("exif")
    @classmethod
    def _freeze_exif(cls, exif: Optional[Mapping[str, str]]) -> Optional[Mapping[str, str]]:
        # A private copy behind a read-only view keeps the report immutable.
        if exif is None:
            return None
        return MappingProxyType(dict(exif))

    @field_serializer("exif")
    def _dump_exif(self, exif: Optional[Mapping[str, str]]) -> Optional[dict[str, str]]:
        return dict(exif) if exif is not None else None
