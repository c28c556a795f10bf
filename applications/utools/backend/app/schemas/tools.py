"""Pydantic schemas for the tool endpoints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ConvertRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    value: float
    from_unit: str = Field(..., alias="from")
    to_unit: str = Field(..., alias="to")


class ConvertResponse(BaseModel):
    result: float


class UnitOut(BaseModel):
    code: str
    label: str


class PingRequest(BaseModel):
    host: str = Field(default="", max_length=253)
    # Accepted for compatibility; a single probe is always issued.
    count: int = 1


class PingResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    rtt_ms: int = Field(..., alias="rttMs", ge=0)
    success: bool
    host: str
    error: Optional[str] = None


class ErrorDetail(BaseModel):
    code: str
    message: str


class ErrorBody(BaseModel):
    error: ErrorDetail
