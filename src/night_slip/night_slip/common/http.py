from __future__ import annotations

from functools import wraps

from flask import g, jsonify, request

from ..core.constants import AUTH_COOKIE_NAME
from ..core.exceptions import (
    AccessDenied,
    AuthenticationError,
    DomainError,
    Locked,
    NotFound,
    UpstreamFailure,
    ValidationError,
)

STATUS_BY_ERROR = {
    ValidationError: 400,
    AuthenticationError: 401,
    AccessDenied: 403,
    Locked: 403,
    NotFound: 404,
    UpstreamFailure: 500,
}


def json_error(message: str, status: int):
    return jsonify({"error": message}), status


def domain_error_response(e: DomainError):
    for error_type, status in STATUS_BY_ERROR.items():
        if isinstance(e, error_type):
            return json_error(str(e), status)
    return json_error(str(e), 400)


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def make_login_required(auth_service):
    """Build a decorator that resolves the cookie credential into ``g.actor``."""

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                g.actor = auth_service.resolve(request.cookies.get(AUTH_COOKIE_NAME))
            except AuthenticationError:
                return json_error("Unauthorized", 401)
            return view(*args, **kwargs)

        return wrapper

    return login_required
