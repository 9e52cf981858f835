"""Abstract metadata extractor interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.inputs import InputFile


class MetadataExtractor(ABC):
    """Produces optional human-readable metadata for an input file."""

    name: str = ""

    @abstractmethod
    async def extract(self, file: InputFile, data: bytes) -> Optional[dict[str, str]]:
        """Return a tag -> value mapping, or None when there is nothing to report.

        Implementations raise MetadataExtractionError on parse failures; the
        caller treats that the same as None.
        """
        ...
