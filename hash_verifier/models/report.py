"""Report entity and export options."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
import uuid

from .common import FileDetails, HashAlgorithm

DEFAULT_TITLE = "File Hash Comparison Report"
EXPECTED_HASH_IDENTIFIER = "Expected Hash"
MATCH_LABEL = "✅ Match"
MISMATCH_LABEL = "❌ Mismatch"


def _utc_timestamp() -> str:
    now = datetime.now(tz=timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ReportFormat(str, Enum):
    TXT = "txt"
    JSON = "json"
    CSV = "csv"
    HTML = "html"
    PDF = "pdf"


class Report(BaseModel):
    model_config = ConfigDict(frozen=True)

    report_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    generated: str = Field(default_factory=_utc_timestamp)
    title: str = DEFAULT_TITLE
    algorithm: HashAlgorithm
    source_file: FileDetails
    target_file: Optional[FileDetails] = None
    source_hash: str
    target_hash: str
    target_identifier: str
    match: bool
    result: str

    @property
    def filename_stem(self) -> str:
        return f"file-hash-report-{self.report_id}"


class ReportOptions(BaseModel):
    formats: list[ReportFormat] = Field(min_length=1)
    report_title: Optional[str] = None
    purpose_notes: Optional[str] = None
    verified_by: Optional[str] = None
    organization: Optional[str] = None

    def title_for(self, report: Report) -> str:
        return self.report_title or report.title


class ReportBuilder:
    """Accumulates the pieces of a comparison and emits one frozen Report.

    Digests are lowercased here; an expected hash typed by the user is also
    trimmed, so ``match`` always reflects plain string equality of the two
    stored digests.
    """

    def __init__(self, algorithm: HashAlgorithm, title: str = DEFAULT_TITLE):
        self._algorithm = algorithm
        self._title = title
        self._source_file: Optional[FileDetails] = None
        self._source_hash: Optional[str] = None
        self._target_file: Optional[FileDetails] = None
        self._target_hash: Optional[str] = None
        self._target_identifier: Optional[str] = None

    def source(self, details: FileDetails, digest: str) -> "ReportBuilder":
        self._source_file = details
        self._source_hash = digest.lower()
        return self

    def target_file(self, details: FileDetails, digest: str) -> "ReportBuilder":
        self._target_file = details
        self._target_hash = digest.lower()
        self._target_identifier = details.name
        return self

    def expected_hash(self, value: str) -> "ReportBuilder":
        self._target_file = None
        self._target_hash = value.strip().lower()
        self._target_identifier = EXPECTED_HASH_IDENTIFIER
        return self

    def build(self) -> Report:
        if self._source_file is None or self._source_hash is None:
            raise ValueError("Report requires source file details and digest")
        if self._target_hash is None or self._target_identifier is None:
            raise ValueError("Report requires a comparison file or expected hash")

        match = self._source_hash == self._target_hash
        return Report(
            title=self._title,
            algorithm=self._algorithm,
            source_file=self._source_file,
            target_file=self._target_file,
            source_hash=self._source_hash,
            target_hash=self._target_hash,
            target_identifier=self._target_identifier,
            match=match,
            result=MATCH_LABEL if match else MISMATCH_LABEL,
        )
