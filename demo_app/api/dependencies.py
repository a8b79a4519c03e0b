"""Shared FastAPI dependencies and type aliases used across routers."""

from typing import Annotated

from fastapi import Depends, Request

from ..config import Settings
from ..database import DatabaseProbe


def get_probe(request: Request) -> DatabaseProbe:
    """Return the probe bound to the application's connection pool."""

    return request.app.state.probe


def get_app_settings(request: Request) -> Settings:
    """Return the settings the application was built with."""

    return request.app.state.settings


Probe = Annotated[DatabaseProbe, Depends(get_probe)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]

__all__ = ["AppSettings", "Probe", "get_app_settings", "get_probe"]
