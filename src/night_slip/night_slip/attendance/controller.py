from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.http import domain_error_response, json_body, json_error, make_login_required
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required = make_login_required(container.auth_service)

    @app.route("/api/dates/<date_id>/entries", methods=["GET"], endpoint="list_entries")
    @login_required
    def list_entries(date_id: str):
        try:
            entries = container.attendance_coordinator.list_entries(date_id)
            return jsonify([e.to_dict() for e in entries])
        except Exception:
            app.logger.exception("Failed to fetch entries for %s", date_id)
            return json_error("Failed to fetch entries", 500)

    @app.route("/api/dates/<date_id>/users/<member_id>", methods=["PATCH"], endpoint="update_entry")
    @login_required
    def update_entry(date_id: str, member_id: str):
        body = json_body()
        try:
            record = container.attendance_coordinator.apply_field_update(
                actor_email=g.actor.email,
                target_member_id=member_id,
                date_id=date_id,
                field=body.get("field", ""),
                value=body.get("value"),
            )
            return jsonify({"success": True, "record": record.to_dict()})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            app.logger.exception("Failed to update attendance %s/%s", date_id, member_id)
            return json_error("Failed to update attendance", 500)

    @app.route("/api/dates/<date_id>/reset", methods=["POST"], endpoint="reset_entries")
    @login_required
    def reset_entries(date_id: str):
        try:
            container.attendance_coordinator.reset(actor_email=g.actor.email, date_id=date_id)
            return jsonify({"success": True})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            app.logger.exception("Failed to reset entries for %s", date_id)
            return json_error("Failed to reset entries", 500)
