# =============================================================================
# File: mrgcar/responses.py
# Purpose: JSON envelope helpers shared by every endpoint.
#   success -> {"ok": true, "data": ...[, "pagination": {...}]}
#   error   -> {"ok": false, "error": {"code", "message"[, "details"]}}
# =============================================================================
from __future__ import annotations

from typing import Any

from flask import jsonify


def success(data: Any, status: int = 200):
    return jsonify({"ok": True, "data": data}), status


def success_with_pagination(data: Any, pagination: dict):
    return jsonify({"ok": True, "data": data, "pagination": pagination}), 200


def error(code: str, message: str, status: int = 400, details: Any = None):
    body: dict[str, Any] = {"code": code, "message": message}
    if details:
        body["details"] = details
    return jsonify({"ok": False, "error": body}), status


# ---------------------------------------------------------------------------
# Common errors
# ---------------------------------------------------------------------------
def not_found(resource: str = "Resource"):
    return error("NOT_FOUND", f"{resource} not found", 404)


def unauthorized(message: str = "Authentication required"):
    return error("UNAUTHORIZED", message, 401)


def forbidden(message: str = "You are not allowed to do this"):
    return error("FORBIDDEN", message, 403)


def bad_request(message: str = "Invalid request"):
    return error("BAD_REQUEST", message, 400)


def conflict(message: str = "Resource already exists"):
    return error("CONFLICT", message, 409)


def server_error(message: str = "Internal server error"):
    return error("SERVER_ERROR", message, 500)


def validation_error(details: list[dict]):
    return error("VALIDATION_ERROR", "Input validation failed", 400, details)
