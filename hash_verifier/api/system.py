"""Capability listing endpoints."""

from fastapi import APIRouter

from ..config import settings
from ..digest.engine import DigestEngine
from ..models.common import HashAlgorithm
from ..serializers import get_all_encoders

router = APIRouter(tags=["system"])


@router.get("/algorithms")
async def list_algorithms():
    return {
        "algorithms": [a.value for a in DigestEngine.algorithms()],
        "default": HashAlgorithm.parse(settings.default_algorithm).value,
    }


@router.get("/formats")
async def list_formats():
    return {
        "formats": [
            {
                "format": fmt.value,
                "extension": encoder.extension,
                "media_type": encoder.media_type,
            }
            for fmt, encoder in get_all_encoders().items()
        ]
    }
