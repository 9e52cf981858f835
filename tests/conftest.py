import os
import sys
from datetime import datetime, timezone

import pytest

# Add project root to sys.path for local imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from hash_verifier.config import settings
from hash_verifier.metadata.base import MetadataExtractor
from hash_verifier.models.common import FileDetails, HashAlgorithm
from hash_verifier.models.report import ReportBuilder, ReportFormat, ReportOptions

FIXED_MTIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeExtractor(MetadataExtractor):
    """Returns canned metadata keyed by file name, or raises for listed names."""

    name = "fake"

    def __init__(self, metadata=None, failing=()):
        self.metadata = metadata or {}
        self.failing = set(failing)
        self.calls = []

    async def extract(self, file, data):
        self.calls.append(file.name)
        if file.name in self.failing:
            raise RuntimeError(f"cannot parse {file.name}")
        return self.metadata.get(file.name)


@pytest.fixture(autouse=True)
def thread_isolation(monkeypatch):
    """Hash tasks run in a worker thread unless a test asks for processes."""
    monkeypatch.setattr(settings, "hash_isolation", "thread")


@pytest.fixture
def extractor_factory():
    return FakeExtractor


@pytest.fixture
def fake_extractor():
    return FakeExtractor()


@pytest.fixture
def source_details():
    return FileDetails(
        name="evidence.jpg",
        size=2048,
        media_type="image/jpeg",
        last_modified=FIXED_MTIME,
        exif={"Make": "Canon", "Model": "EOS 5D"},
    )


@pytest.fixture
def target_details():
    return FileDetails(
        name="copy.jpg",
        size=2048,
        media_type="image/jpeg",
        last_modified=FIXED_MTIME,
    )


@pytest.fixture
def file_report(source_details, target_details):
    return (
        ReportBuilder(HashAlgorithm.SHA256)
        .source(source_details, "AB" * 32)
        .target_file(target_details, "ab" * 32)
        .build()
    )


@pytest.fixture
def hash_report(source_details):
    return (
        ReportBuilder(HashAlgorithm.MD5)
        .source(source_details, "900150983cd24fb0d6963f7d28e17f72")
        .expected_hash("  DEADBEEF  ")
        .build()
    )


@pytest.fixture
def all_formats_options():
    return ReportOptions(formats=list(ReportFormat))
