"""Tests for the task-board CLI."""
from __future__ import annotations

import logging

import pytest

import cli


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr(cli, "load_dotenv", lambda: False)
    for name in ("PORT", "TASK_BOARD_HOST", "TASK_BOARD_ID_START", "TASK_BOARD_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_check_config(capsys, monkeypatch):
    monkeypatch.setenv("PORT", "4000")

    assert cli.main(["check-config"]) == 0

    out = capsys.readouterr().out
    assert "Configuration OK" in out
    assert "port=4000" in out


def test_check_config_reports_errors(capsys, monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")

    assert cli.main(["check-config"]) == 1
    assert "PORT" in capsys.readouterr().err


def test_routes_lists_task_endpoints(capsys):
    assert cli.main(["routes"]) == 0

    out = capsys.readouterr().out
    assert "/api/tareas/{task_id}/toggle" in out
    assert "/api/estadisticas" in out
    assert "PATCH" in out


def test_serve_runs_uvicorn(monkeypatch):
    import uvicorn

    calls = {}
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.update(app=app, **kwargs))
    monkeypatch.setattr(cli, "setup_logging", lambda level: None)

    assert cli.main(["serve", "--port", "5001"]) == 0

    assert calls["app"] == "api.main:app"
    assert calls["port"] == 5001
    assert calls["host"] == "0.0.0.0"
    assert calls["log_level"] == logging.getLevelName(logging.INFO).lower()
