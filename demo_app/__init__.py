"""Demo HTTP service with database-backed liveness and readiness probes."""

__version__ = "0.1.0"
