from __future__ import annotations

from pydantic import BaseModel, Field


class InfoRead(BaseModel):
    message: str = Field(
        description="Fixed description of the service.",
        examples=["Platform Engineering Assessment demo app"],
    )
    environment: str = Field(
        description="Deployment label taken from APP_ENV.",
        examples=["local"],
    )
    time: str = Field(
        description="Current UTC time in ISO 8601 format.",
        examples=["2024-05-01T12:00:00.000Z"],
    )


class ProbeOk(BaseModel):
    """Body returned when the database round trip succeeds."""

    status: str = Field(examples=["ok"])


class ProbeFailed(BaseModel):
    """Body returned when the database round trip fails."""

    status: str = Field(examples=["error"])
    error: str = Field(
        description="Message from the underlying database error.",
        examples=["[Errno 111] Connection refused"],
    )
