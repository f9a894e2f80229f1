# =============================================================================
# File: mrgcar/middleware/request_logger.py
# Purpose: Correlation id + one start line and one finish line per request.
# =============================================================================
from __future__ import annotations

import logging
import secrets
import time

from flask import Flask, Response, g, request

from mrgcar.logger import HTTP

log = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def get_request_id() -> str:
    """Reuse the caller's ``X-Request-ID`` or mint a 16 hex chars one."""
    existing = request.headers.get(REQUEST_ID_HEADER)
    if existing:
        return existing
    return secrets.token_hex(8)


def _log_request_start() -> None:
    request_id = get_request_id()
    g.request_id = request_id
    g.request_started_at = time.perf_counter()

    meta = {
        "request_id": request_id,
        "method": request.method,
        "path": request.path,
        "ip": request.remote_addr,
    }
    if request.args:
        meta["query"] = request.args.to_dict(flat=True)

    log.log(HTTP, "REQ %s %s", request.method, request.path, extra=meta)


def _log_request_finish(response: Response) -> Response:
    request_id = g.get("request_id")
    if request_id is None:
        # start hook never ran (another before_request short-circuited first)
        return response

    response.headers[REQUEST_ID_HEADER] = request_id

    duration = round((time.perf_counter() - g.request_started_at) * 1000)
    status = response.status_code
    meta = {
        "request_id": request_id,
        "method": request.method,
        "path": request.path,
        "status": status,
        "duration": f"{duration}ms",
    }

    if status >= 500:
        level = logging.ERROR
    elif status >= 400:
        level = logging.WARNING
    else:
        level = HTTP
    log.log(level, "%s %s %s %sms", request.method, request.path, status, duration, extra=meta)
    return response


def init_request_logger(app: Flask) -> None:
    """Install the hooks. Call before any other before_request is registered."""
    app.before_request(_log_request_start)
    app.after_request(_log_request_finish)
