"""Route packages available for import convenience."""

from . import health, info

__all__ = ["health", "info"]
