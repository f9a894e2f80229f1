# =============================================================================
# File: tests/test_logger.py
# Purpose: Formatters, default levels and per-environment handler setup.
# =============================================================================
import json
import logging
import re
import sys

import pytest

from mrgcar.config import Settings
from mrgcar.logger import HTTP, SERVICE_NAME, DevFormatter, JsonFormatter, resolve_level, setup_logging


def _settings(app_env="development", log_level=None):
    return Settings(
        database_url="sqlite://",
        app_env=app_env,
        log_level=log_level,
        admin_email="admin@mrgcar.com",
        admin_password=None,
    )


def _record(msg="hello %s", args=("world",), level=logging.INFO, exc_info=None, **extra):
    record = logging.LogRecord("mrgcar.test", level, __file__, 1, msg, args, exc_info)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture(autouse=True)
def _back_to_silent():
    yield
    # handlers built here point at capsys streams; drop them
    setup_logging(_settings("test"))


# ==================== LEVELS ====================
@pytest.mark.parametrize(
    "app_env,log_level,expected",
    [
        ("production", None, "INFO"),
        ("development", None, "DEBUG"),
        ("test", None, "DEBUG"),
        ("production", "warning", "WARNING"),
        ("development", "http", "HTTP"),
    ],
)
def test_resolve_level(app_env, log_level, expected):
    assert resolve_level(_settings(app_env, log_level)) == expected


def test_http_level_sits_between_debug_and_info():
    assert logging.DEBUG < HTTP < logging.INFO
    assert logging.getLevelName(HTTP) == "HTTP"


# ==================== FORMATTERS ====================
def test_json_formatter_one_object_with_extras():
    line = JsonFormatter().format(_record(request_id="abc123", status=200))
    assert "\n" not in line

    payload = json.loads(line)
    assert payload["message"] == "hello world"
    assert payload["level"] == "info"
    assert payload["logger"] == "mrgcar.test"
    assert payload["service"] == SERVICE_NAME
    assert payload["request_id"] == "abc123"
    assert payload["status"] == 200
    assert payload["timestamp"].endswith("+00:00")
    assert "stack" not in payload


def test_json_formatter_includes_stack():
    try:
        raise RuntimeError("kaboom")
    except RuntimeError:
        record = _record(level=logging.ERROR, exc_info=sys.exc_info())

    payload = json.loads(JsonFormatter().format(record))
    assert "RuntimeError: kaboom" in payload["stack"]


def test_dev_formatter_line():
    line = DevFormatter(use_colors=False).format(_record(request_id="abc123"))
    assert re.fullmatch(r'\d\d:\d\d:\d\d info: hello world \{"request_id": "abc123"\}', line)


def test_dev_formatter_without_extras_or_colors():
    line = DevFormatter(use_colors=False).format(_record(level=HTTP))
    assert re.fullmatch(r"\d\d:\d\d:\d\d http: hello world", line)
    assert "\x1b[" not in line


def test_dev_formatter_colors():
    line = DevFormatter(use_colors=True).format(_record(level=logging.ERROR))
    assert "\x1b[31merror\x1b[0m" in line


# ==================== SETUP ====================
def test_production_writes_json_lines_to_stdout(capsys):
    setup_logging(_settings("production"))
    log = logging.getLogger("mrgcar.seeds.cars")
    log.info("Seeded %d cars", 8, extra={"inserted": 8})
    log.debug("not shown at INFO")

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    payload = json.loads(lines[0])
    assert payload["message"] == "Seeded 8 cars"
    assert payload["inserted"] == 8


def test_development_writes_readable_lines(capsys):
    setup_logging(_settings("development"))
    logging.getLogger("mrgcar.routes").debug("debug shows in development")

    out = capsys.readouterr().out
    assert "debug: debug shows in development" in out
    assert not out.lstrip().startswith("{")


def test_test_env_is_silent(capsys):
    setup_logging(_settings("test"))
    logging.getLogger("mrgcar.routes").warning("nobody hears this")
    assert capsys.readouterr().out == ""


def test_test_env_logs_when_level_is_set(capsys):
    setup_logging(_settings("test", log_level="INFO"))
    log = logging.getLogger("mrgcar.routes")
    log.info("now it shows")
    log.debug("still below the level")

    out = capsys.readouterr().out
    assert "now it shows" in out
    assert "still below the level" not in out


def test_silent_logger_still_propagates(caplog):
    setup_logging(_settings("test"))
    caplog.set_level(logging.INFO, logger="mrgcar")
    logging.getLogger("mrgcar.routes").info("captured anyway")
    assert "captured anyway" in caplog.text
