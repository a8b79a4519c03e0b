"""Centralised OpenAPI/Swagger documentation helpers."""

from __future__ import annotations

from typing import Any

API_DESCRIPTION = """Demo service used by the platform engineering pipeline. It is built with FastAPI and keeps a single async SQLAlchemy connection pool to PostgreSQL.\n\n## Key capabilities\n- **Info**: fixed message, deployment label, and server time.\n- **Health**: liveness (`/healthz`) and readiness (`/readyz`) probes, both backed by a `SELECT 1` round trip.\n\n## Operational notes\n- Probe failures respond with HTTP 500 and the database error message.\n- Default server configuration listens on port 3000 (override with the `PORT` setting)."""

SERVERS = [
    {
        "url": "http://localhost:3000",
        "description": "Local development (default PORT)",
    },
]

TAGS_METADATA = [
    {
        "name": "info",
        "description": "Service identification and deployment label.",
    },
    {
        "name": "health",
        "description": "Liveness and readiness probes used by deploy environments.",
    },
]

SWAGGER_UI_PARAMETERS = {
    "docExpansion": "list",
    "defaultModelsExpandDepth": 0,
    "tryItOutEnabled": True,
}


def get_tags_metadata() -> list[dict[str, Any]]:
    """Return a copy of tag metadata to prevent accidental mutation."""

    return [tag.copy() for tag in TAGS_METADATA]


def get_swagger_ui_parameters() -> dict[str, Any]:
    """Return Swagger UI options applied to the FastAPI app."""

    return SWAGGER_UI_PARAMETERS.copy()


def get_servers() -> list[dict[str, str]]:
    """List of server entries advertised via OpenAPI."""

    return [server.copy() for server in SERVERS]
