from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import domain_error_response, json_body, json_error
from ..core.constants import AUTH_COOKIE_NAME
from ..core.exceptions import AuthenticationError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def login():
        token = json_body().get("token")
        try:
            actor = container.auth_service.login(token)
        except ValidationError as e:
            return domain_error_response(e)
        except AuthenticationError:
            return json_error("Invalid token", 401)

        secure = bool(app.config.get("AUTH_COOKIE_SECURE", True))
        response = jsonify({"success": True, "user": actor.to_dict()})
        response.set_cookie(
            AUTH_COOKIE_NAME,
            token,
            httponly=True,
            secure=secure,
            samesite="None" if secure else "Lax",
        )
        return response

    @app.route("/api/auth/me", methods=["GET"], endpoint="auth_me")
    def me():
        actor = container.auth_service.current(request.cookies.get(AUTH_COOKIE_NAME))
        return jsonify({"user": actor.to_dict() if actor else None})

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def logout():
        response = jsonify({"success": True})
        response.delete_cookie(AUTH_COOKIE_NAME)
        return response
