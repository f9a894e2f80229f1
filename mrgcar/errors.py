# =============================================================================
# File: mrgcar/errors.py
# Purpose: Render framework errors (404, 405, unhandled exceptions) in the
#          same JSON envelope as the endpoints.
# =============================================================================
from __future__ import annotations

import logging

from flask import Flask, request
from werkzeug.exceptions import HTTPException

from . import responses

log = logging.getLogger(__name__)

HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
    415: "UNSUPPORTED_MEDIA_TYPE",
}


def _handle_http_exception(exc: HTTPException):
    status = exc.code or 500
    if status >= 500:
        code = "SERVER_ERROR"
    else:
        code = HTTP_ERROR_CODES.get(status, "BAD_REQUEST")
    return responses.error(code, exc.description or exc.name, status)


def _handle_unexpected(exc: Exception):
    log.exception("Unhandled error on %s %s", request.method, request.path)
    return responses.server_error()


def register_error_handlers(app: Flask) -> None:
    app.register_error_handler(HTTPException, _handle_http_exception)
    app.register_error_handler(Exception, _handle_unexpected)
