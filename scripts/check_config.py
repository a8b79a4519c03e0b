"""Fail the pipeline when required environment variables are missing."""

from __future__ import annotations

from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from demo_app.config_check import main


if __name__ == "__main__":
    raise SystemExit(main())
