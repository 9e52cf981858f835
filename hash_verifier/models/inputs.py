"""Input files handed to a comparison."""

import mimetypes
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional

from starlette.datastructures import UploadFile

from ..errors import DigestComputationError, InvalidTimestamp
from .common import FileDetails


def _from_epoch_ms(value: Optional[int]) -> datetime:
    if value is None:
        return datetime.now(tz=timezone.utc)
    try:
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidTimestamp(value) from e


class InputFile(ABC):
    """A file-like input: name, byte length, media type, mtime and contents."""

    name: str = ""
    media_type: str = ""
    last_modified: datetime

    @property
    @abstractmethod
    def size(self) -> int:
        ...

    @abstractmethod
    async def read(self) -> bytes:
        """Return the full contents, raising DigestComputationError on faults."""
        ...

    def details(self, exif: Optional[dict[str, str]] = None) -> FileDetails:
        return FileDetails(
            name=self.name,
            size=self.size,
            media_type=self.media_type,
            last_modified=self.last_modified,
            exif=exif or None,
        )


class MemoryFile(InputFile):
    def __init__(
        self,
        name: str,
        data: bytes,
        media_type: Optional[str] = None,
        last_modified: Optional[datetime] = None,
    ):
        self.name = name
        self.data = bytes(data)
        self.media_type = media_type or mimetypes.guess_type(name)[0] or ""
        self.last_modified = last_modified or datetime.now(tz=timezone.utc)

    @property
    def size(self) -> int:
        return len(self.data)

    async def read(self) -> bytes:
        return self.data


class UploadedFile(InputFile):
    """Wraps a multipart upload; contents are read once and cached."""

    def __init__(self, upload: UploadFile, last_modified_ms: Optional[int] = None):
        self._upload = upload
        self._data: Optional[bytes] = None
        self.name = upload.filename or "upload"
        self.media_type = (
            upload.content_type
            or mimetypes.guess_type(self.name)[0]
            or ""
        )
        if self.media_type == "application/octet-stream":
            self.media_type = mimetypes.guess_type(self.name)[0] or self.media_type
        self.last_modified = _from_epoch_ms(last_modified_ms)

    @property
    def size(self) -> int:
        if self._data is not None:
            return len(self._data)
        return self._upload.size or 0

    async def read(self) -> bytes:
        if self._data is None:
            try:
                await self._upload.seek(0)
                self._data = await self._upload.read()
            except (OSError, ValueError) as e:
                raise DigestComputationError(f"Could not read {self.name}: {e}", e)
        return self._data
