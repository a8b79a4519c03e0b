"""Database engine construction and the connectivity probe behind the health routes."""

from __future__ import annotations

import ssl

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from .config import Settings


def _insecure_ssl_context() -> ssl.SSLContext:
    """TLS context that accepts self-signed server certificates."""

    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Build the process-wide pooled async engine."""

    url = settings.sqlalchemy_url
    engine_kwargs: dict[str, object] = {}

    # The ssl keyword is understood by asyncpg only.
    if url.get_backend_name() == "postgresql" and url.get_driver_name() == "asyncpg":
        engine_kwargs["connect_args"] = {
            "ssl": _insecure_ssl_context() if settings.db_ssl else False,
        }

    return create_async_engine(url, **engine_kwargs)


class DatabaseProbe:
    """Round-trips a trivial query through the shared pool.

    Errors from the driver are not caught here; callers decide how a failure
    is reported.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    async def check(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
