from __future__ import annotations

import logging
from functools import wraps
from typing import Any

from flask import jsonify, request

from ..core.exceptions import DomainError, ValidationError

log = logging.getLogger(__name__)


def json_body() -> dict[str, Any]:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise ValidationError("A JSON object body is required")
    return body


def ok(data: Any, message: str = "", status: int = 200):
    return jsonify({"success": True, "data": data, "message": message}), status


def fail(message: str, status: int = 400):
    return jsonify({"success": False, "message": message}), status


def json_errors(view):
    """DomainError -> 400, anything else is logged and -> 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as exc:
            return fail(str(exc), 400)
        except Exception:
            log.exception("Unhandled error in %s", request.path)
            return fail("Internal server error", 500)

    return wrapper
