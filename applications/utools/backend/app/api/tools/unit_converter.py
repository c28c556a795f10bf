"""Unit converter endpoints."""

import logging
import math

from fastapi import APIRouter

from app.core.errors import InvalidValue, UnsupportedConversion
from app.schemas.tools import ConvertRequest, ConvertResponse, ErrorBody, UnitOut
from app.services.unit_conversion import Unit, apply_factor, lookup_factor

router = APIRouter()
logger = logging.getLogger("u-tools.api.unit")


@router.get("/units", response_model=list[UnitOut])
def list_units() -> list[UnitOut]:
    logger.info("list_units")
    return [UnitOut(code=unit.value, label=unit.label) for unit in Unit]


@router.post(
    "/convert",
    response_model=ConvertResponse,
    summary="Convert between different units of measurement",
    responses={400: {"model": ErrorBody, "description": "Invalid value or unsupported units"}},
)
def convert_units(payload: ConvertRequest) -> ConvertResponse:
    logger.info(
        "convert_units",
        extra={"value": payload.value, "from_unit": payload.from_unit, "to_unit": payload.to_unit},
    )
    if not math.isfinite(payload.value) or payload.value <= 0:
        raise InvalidValue("Value must be positive")

    lookup = lookup_factor(payload.from_unit, payload.to_unit)
    if not lookup.supported:
        raise UnsupportedConversion(
            f"Unsupported conversion from '{payload.from_unit}' to '{payload.to_unit}'"
        )
    result = apply_factor(payload.value, lookup.factor)
    if not math.isfinite(result):
        raise InvalidValue("Value is too large to convert")
    return ConvertResponse(result=result)
