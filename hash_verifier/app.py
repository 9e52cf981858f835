"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .config import settings
from .api.router import api_router

# Configure logging for our modules
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(name)s: %(message)s")
logging.getLogger("hash_verifier").setLevel(logging.DEBUG)


def create_app() -> FastAPI:
    app = FastAPI(
        title="hash-verifier",
        version="0.1.0",
        description="Local file integrity verification and hash comparison reports",
    )

    app.include_router(api_router, prefix="/api")

    if settings.frontend_dir.exists():
        app.mount(
            "/",
            StaticFiles(directory=str(settings.frontend_dir), html=True),
            name="frontend",
        )

    return app
