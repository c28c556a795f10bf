"""Network ping endpoints."""

import logging

from fastapi import APIRouter, Depends

from app.core.errors import InvalidHost, PingFailed
from app.schemas.tools import ErrorBody, PingRequest, PingResponse
from app.services.pinger import Pinger, get_pinger

router = APIRouter()
logger = logging.getLogger("u-tools.api.ping")


@router.post(
    "/run",
    response_model=PingResponse,
    response_model_exclude_none=True,
    summary="Ping a network host to test connectivity and measure latency",
    responses={400: {"model": ErrorBody, "description": "Empty host or ping failure"}},
)
async def run_ping(payload: PingRequest, pinger: Pinger = Depends(get_pinger)) -> PingResponse:
    host = payload.host.strip()
    if not host:
        raise InvalidHost("Host cannot be empty")

    # count is not used: one probe per request.
    logger.info("run_ping", extra={"host": host, "count": payload.count})
    try:
        reply = await pinger.send(host)
    except Exception as exc:
        logger.warning("ping_failed", extra={"host": host, "error": str(exc)})
        raise PingFailed(str(exc) or exc.__class__.__name__) from exc

    if reply.success:
        return PingResponse(rtt_ms=reply.rtt_ms, success=True, host=host)
    return PingResponse(rtt_ms=0, success=False, host=host, error=reply.status.value)
