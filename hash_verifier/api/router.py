"""Aggregate all API sub-routers."""

from fastapi import APIRouter

from . import system, compare, reports

api_router = APIRouter()

api_router.include_router(system.router)
api_router.include_router(compare.router)
api_router.include_router(reports.router)
