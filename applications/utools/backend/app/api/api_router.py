"""API router."""

from fastapi import APIRouter

from app.api.tools.network_ping import router as network_ping_router
from app.api.tools.unit_converter import router as unit_converter_router

api_router = APIRouter()
api_router.include_router(unit_converter_router, prefix="/tools/converters/unit", tags=["Unit Converter"])
api_router.include_router(network_ping_router, prefix="/tools/network/ping", tags=["Network Tools"])
