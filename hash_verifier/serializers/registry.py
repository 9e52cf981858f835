"""Encoder auto-registration."""

from typing import Optional

from ..models.report import ReportFormat
from .base import ReportEncoder

_registry: dict[ReportFormat, ReportEncoder] = {}


def register_encoder(encoder: ReportEncoder) -> None:
    _registry[encoder.format] = encoder


def get_encoder(format: ReportFormat) -> Optional[ReportEncoder]:
    return _registry.get(format)


def get_all_encoders() -> dict[ReportFormat, ReportEncoder]:
    return dict(_registry)
