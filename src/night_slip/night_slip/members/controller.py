from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.http import domain_error_response, json_body, json_error, make_login_required
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required = make_login_required(container.auth_service)

    @app.route("/api/users", methods=["GET"], endpoint="list_users")
    @login_required
    def list_users():
        try:
            return jsonify([m.to_dict() for m in container.member_service.list_members()])
        except Exception:
            app.logger.exception("Failed to fetch users")
            return json_error("Failed to fetch users", 500)

    @app.route("/api/users", methods=["POST"], endpoint="import_users")
    @login_required
    def import_users():
        users = json_body().get("users")
        try:
            if not container.policy.is_admin(g.actor.email):
                return json_error("Forbidden", 403)
            if not isinstance(users, list):
                return json_error("Expected users array", 400)

            result = container.member_service.import_members(actor_email=g.actor.email, rows=users)
            return jsonify({"success": True, **result.to_dict()})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            app.logger.exception("Failed to save users")
            return json_error("Failed to save users", 500)

    @app.route("/api/users/<member_id>", methods=["PATCH"], endpoint="update_user")
    @login_required
    def update_user(member_id: str):
        body = json_body()
        try:
            container.member_service.update_member_field(
                actor_email=g.actor.email,
                member_id=member_id,
                field=body.get("field", ""),
                value=body.get("value", ""),
            )
            return jsonify({"success": True})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            app.logger.exception("Failed to update user %s", member_id)
            return json_error("Failed to update user", 500)

    @app.route("/api/users/<member_id>", methods=["DELETE"], endpoint="delete_user")
    @login_required
    def delete_user(member_id: str):
        try:
            container.member_service.delete_member(actor_email=g.actor.email, member_id=member_id)
            return jsonify({"success": True})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            app.logger.exception("Failed to delete user %s", member_id)
            return json_error("Failed to delete user", 500)
