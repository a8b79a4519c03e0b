"""Pre-deployment check that the required environment variables are set.

Runs once in the pipeline before the service is deployed. Reads the process
environment only; the ``.env`` file used by :mod:`demo_app.config` is not
consulted, so the check reflects what the deployed process will actually see.
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Mapping, Sequence

REQUIRED_VARS: tuple[str, ...] = ("PORT", "DB_HOST", "DB_USER", "DB_NAME", "DB_PASSWORD")


class MissingConfigError(RuntimeError):
    """Raised when one or more required environment variables are absent."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Missing env vars: {', '.join(self.missing)}")


def find_missing(environ: Mapping[str, str] | None = None) -> list[str]:
    """Return required names that are unset or empty, in declaration order."""

    env = os.environ if environ is None else environ
    return [name for name in REQUIRED_VARS if not env.get(name)]


def check_config(environ: Mapping[str, str] | None = None) -> None:
    """Raise :class:`MissingConfigError` listing every missing variable."""

    missing = find_missing(environ)
    if missing:
        raise MissingConfigError(missing)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=f"Verify that {', '.join(REQUIRED_VARS)} are set before deploying."
    )
    parser.parse_args(argv)

    try:
        check_config()
    except MissingConfigError as exc:
        print(f"Config health check failed. {exc}", file=sys.stderr)
        return 1

    print("Config health check passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
