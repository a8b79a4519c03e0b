"""Root informational route."""

from datetime import datetime, timezone

from fastapi import APIRouter

from ... import schemas
from ..dependencies import AppSettings

SERVICE_MESSAGE = "Platform Engineering Assessment demo app"

router = APIRouter(tags=["info"])


def utc_timestamp() -> str:
    """Current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""

    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get(
    "/",
    response_model=schemas.InfoRead,
    summary="Service information",
    response_description="Fixed message, deployment label, and server time.",
)
async def read_root(settings: AppSettings) -> schemas.InfoRead:
    return schemas.InfoRead(
        message=SERVICE_MESSAGE,
        environment=settings.app_env,
        time=utc_timestamp(),
    )


__all__ = ["router"]
