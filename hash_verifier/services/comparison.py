"""Comparison workflow: validate, hash, compare, report."""

import asyncio
import logging
from typing import Optional

from ..config import settings
from ..digest.task import HashTask
from ..errors import (
    ComparisonInProgress,
    MissingComparisonFile,
    MissingExpectedHash,
    MissingSourceFile,
    NoReportAvailable,
    StaleComparison,
    ValidationError,
)
from ..metadata.base import MetadataExtractor
from ..metadata.exif import ExifExtractor
from ..models.common import ComparisonMode, HashAlgorithm
from ..models.inputs import InputFile
from ..models.report import Report, ReportBuilder
from ..models.session import ComparisonRequest, ComparisonSession, ComparisonState

logger = logging.getLogger(__name__)


class ComparisonOrchestrator:
    def __init__(
        self,
        session: Optional[ComparisonSession] = None,
        extractor: Optional[MetadataExtractor] = None,
        isolation: Optional[str] = None,
    ):
        self.session = session or ComparisonSession.create()
        self.extractor = extractor or ExifExtractor()
        self.isolation = isolation

    @property
    def report(self) -> Optional[Report]:
        return self.session.report

    def require_report(self) -> Report:
        if self.session.report is None:
            raise NoReportAvailable()
        return self.session.report

    def reset(self) -> None:
        if self.session.busy:
            logger.info("Reset while a comparison is in flight; its result will be discarded")
        self.session.reset()

    async def compare(self, request: ComparisonRequest) -> Report:
        if self.session.busy:
            raise ComparisonInProgress()

        generation = self.session.begin()
        try:
            self._validate(request)
        except ValidationError as e:
            logger.info(f"Comparison rejected: {e}")
            self.session.fail(str(e))
            raise

        self.session.advance(ComparisonState.COMPUTING)
        logger.info(
            f"Comparing {request.source.name} ({request.mode.value}, {request.algorithm.value})"
        )
        try:
            report = await self._run(request, generation)
        except StaleComparison:
            raise
        except asyncio.CancelledError:
            if self.session.is_current(generation):
                logger.info(f"Comparison #{generation} cancelled")
                self.session.reset()
            raise
        except Exception as e:
            if not self.session.is_current(generation):
                raise StaleComparison() from e
            logger.error(f"Comparison failed: {e}")
            self.session.abort(f"An error occurred: {e}")
            raise

        self.session.advance(ComparisonState.REPORTED, report=report)
        logger.info(f"Report {report.report_id}: {'match' if report.match else 'mismatch'}")
        return report

    async def _run(self, request: ComparisonRequest, generation: int) -> Report:
        source_hash, source_exif, target_hash, target_exif = await self._compute(request)

        if not self.session.is_current(generation):
            logger.info(f"Discarding result of comparison #{generation}; session was reset")
            raise StaleComparison()

        self.session.advance(ComparisonState.COMPARING)
        builder = ReportBuilder(request.algorithm).source(
            request.source.details(source_exif), source_hash,
        )
        if request.mode is ComparisonMode.FILE_VS_FILE:
            builder.target_file(request.comparison.details(target_exif), target_hash)
        else:
            builder.expected_hash(request.expected_hash)
        return builder.build()

    def _validate(self, request: ComparisonRequest) -> None:
        if request.source is None:
            raise MissingSourceFile()
        if request.mode is ComparisonMode.FILE_VS_FILE and request.comparison is None:
            raise MissingComparisonFile()
        if request.mode is ComparisonMode.FILE_VS_HASH and not request.expected_hash.strip():
            raise MissingExpectedHash()

    async def _compute(self, request: ComparisonRequest):
        """Hash and inspect both inputs concurrently.

        Returns (source digest, source exif, target digest, target exif); the
        target pair is (None, None) when checking against an expected hash.
        """
        inputs = [request.source]
        if request.mode is ComparisonMode.FILE_VS_FILE:
            inputs.append(request.comparison)

        buffers = await asyncio.gather(*(f.read() for f in inputs))

        jobs = []
        for file, data in zip(inputs, buffers):
            jobs.append(self._digest(data, request.algorithm))
            jobs.append(self._metadata(file, data))
        results = await asyncio.gather(*jobs)

        if len(results) == 2:
            return results[0], results[1], None, None
        return tuple(results)

    async def _digest(self, data: bytes, algorithm: HashAlgorithm) -> str:
        task = HashTask(data, algorithm, isolation=self.isolation or settings.hash_isolation)
        return await task.run()

    async def _metadata(self, file: InputFile, data: bytes) -> Optional[dict[str, str]]:
        try:
            return await self.extractor.extract(file, data)
        except Exception as e:
            # Metadata only enriches the report; digests decide the outcome.
            logger.warning(f"Metadata extraction failed for {file.name}: {e}")
            return None


# Singleton
comparison_orchestrator = ComparisonOrchestrator()
