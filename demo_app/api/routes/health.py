"""Liveness and readiness routes.

Both probes run the same database round trip; they differ only in the status
words they report.
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from ... import schemas
from ...database import DatabaseProbe
from ..dependencies import Probe

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

_FAILURE_RESPONSES = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {
        "model": schemas.ProbeFailed,
        "description": "The database could not be reached.",
    },
}


def _error_message(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


async def _run_probe(
    probe: DatabaseProbe, *, ok_status: str, failed_status: str, log_message: str
) -> JSONResponse:
    try:
        await probe.check()
    except Exception as exc:
        logger.exception(log_message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=schemas.ProbeFailed(
                status=failed_status, error=_error_message(exc)
            ).model_dump(),
        )
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=schemas.ProbeOk(status=ok_status).model_dump(),
    )


@router.get(
    "/healthz",
    response_model=schemas.ProbeOk,
    summary="Liveness probe",
    response_description="`ok` when the database answers a trivial query.",
    responses=_FAILURE_RESPONSES,
)
async def healthz(probe: Probe) -> JSONResponse:
    return await _run_probe(
        probe, ok_status="ok", failed_status="error", log_message="Health check failed"
    )


@router.get(
    "/readyz",
    response_model=schemas.ProbeOk,
    summary="Readiness probe",
    response_description="`ready` when the database answers a trivial query.",
    responses=_FAILURE_RESPONSES,
)
async def readyz(probe: Probe) -> JSONResponse:
    return await _run_probe(
        probe,
        ok_status="ready",
        failed_status="not_ready",
        log_message="Readiness check failed",
    )


__all__ = ["router"]
