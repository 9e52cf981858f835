"""Abstract report encoder interface."""

from abc import ABC, abstractmethod

from pydantic import BaseModel

from ..models.report import Report, ReportFormat, ReportOptions


class ReportPayload(BaseModel):
    format: ReportFormat
    filename: str
    media_type: str
    content: bytes


class ReportEncoder(ABC):
    """Turns a Report into the bytes of one downloadable file.

    Encoders are pure: the same report and options always give the same
    bytes, and nothing is written anywhere.
    """

    format: ReportFormat
    extension: str = ""
    media_type: str = "application/octet-stream"

    def filename(self, report: Report) -> str:
        return f"{report.filename_stem}.{self.extension}"

    @abstractmethod
    def encode(self, report: Report, options: ReportOptions) -> bytes:
        ...

    def payload(self, report: Report, options: ReportOptions) -> ReportPayload:
        return ReportPayload(
            format=self.format,
            filename=self.filename(report),
            media_type=self.media_type,
            content=self.encode(report, options),
        )
