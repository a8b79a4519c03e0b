"""
Tests for the pre-deployment environment check.
"""

from __future__ import annotations

import os
import subprocess
import sys
from itertools import combinations
from pathlib import Path

import pytest

from demo_app import config_check
from demo_app.config_check import (
    REQUIRED_VARS,
    MissingConfigError,
    check_config,
    find_missing,
)

CHECK_SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "check_config.py"

FULL_ENV = {
    "PORT": "3000",
    "DB_HOST": "db.internal",
    "DB_USER": "demo",
    "DB_NAME": "demo",
    "DB_PASSWORD": "s3cret",
}

ALL_SUBSETS = [
    subset
    for size in range(len(REQUIRED_VARS) + 1)
    for subset in combinations(REQUIRED_VARS, size)
]


@pytest.fixture
def full_env(monkeypatch):
    for name, value in FULL_ENV.items():
        monkeypatch.setenv(name, value)
    return monkeypatch


@pytest.mark.parametrize("removed", ALL_SUBSETS, ids=lambda s: "+".join(s) or "none")
def test_fails_exactly_for_removed_subset(removed):
    env = {name: value for name, value in FULL_ENV.items() if name not in removed}
    assert find_missing(env) == list(removed)
    if removed:
        with pytest.raises(MissingConfigError) as excinfo:
            check_config(env)
        assert excinfo.value.missing == list(removed)
    else:
        check_config(env)


def test_empty_value_counts_as_missing():
    env = dict(FULL_ENV, DB_PASSWORD="")
    assert find_missing(env) == ["DB_PASSWORD"]


def test_optional_variables_are_not_required():
    env = {name: FULL_ENV[name] for name in REQUIRED_VARS}
    assert "DB_PORT" not in env and "DB_SSL" not in env
    assert find_missing(env) == []


def test_main_passes_with_full_environment(full_env, capsys):
    assert config_check.main([]) == 0
    captured = capsys.readouterr()
    assert captured.out.strip() == "Config health check passed."
    assert captured.err == ""


def test_main_reports_missing_db_host(full_env, capsys):
    full_env.delenv("DB_HOST")
    assert config_check.main([]) == 1
    captured = capsys.readouterr()
    assert "DB_HOST" in captured.err
    assert captured.err.strip() == "Config health check failed. Missing env vars: DB_HOST"
    assert captured.out == ""


def test_main_lists_every_missing_name_at_once(full_env, capsys):
    full_env.delenv("PORT")
    full_env.setenv("DB_NAME", "")
    assert config_check.main([]) == 1
    assert "Missing env vars: PORT, DB_NAME" in capsys.readouterr().err


def _run_check_script(env_overrides: dict[str, str]) -> subprocess.CompletedProcess:
    env = {k: v for k, v in os.environ.items() if k not in REQUIRED_VARS}
    env.update(env_overrides)
    return subprocess.run(
        [sys.executable, str(CHECK_SCRIPT)],
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )


def test_script_exits_nonzero_without_db_host():
    env = {name: value for name, value in FULL_ENV.items() if name != "DB_HOST"}
    result = _run_check_script(env)
    assert result.returncode == 1
    assert "DB_HOST" in result.stderr


def test_script_exits_zero_with_full_environment():
    result = _run_check_script(FULL_ENV)
    assert result.returncode == 0
    assert "Config health check passed." in result.stdout
