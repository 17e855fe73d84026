from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.http import domain_error_response, json_body, json_error, make_login_required
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required = make_login_required(container.auth_service)

    @app.route("/api/dates", methods=["GET"], endpoint="list_dates")
    @login_required
    def list_dates():
        try:
            return jsonify([d.to_dict() for d in container.date_service.list_dates()])
        except Exception:
            app.logger.exception("Failed to fetch dates")
            return json_error("Failed to fetch dates", 500)

    @app.route("/api/dates", methods=["POST"], endpoint="add_date")
    @login_required
    def add_date():
        try:
            created = container.date_service.add_date(
                actor_email=g.actor.email,
                date_string=json_body().get("date_string", ""),
            )
            return jsonify(created.to_dict())
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            app.logger.exception("Failed to add date")
            return json_error("Failed to add date", 500)

    @app.route("/api/dates/<date_id>", methods=["DELETE"], endpoint="delete_date")
    @login_required
    def delete_date(date_id: str):
        try:
            container.date_service.delete_date(actor_email=g.actor.email, date_id=date_id)
            return jsonify({"success": True})
        except DomainError as e:
            return domain_error_response(e)
        except Exception:
            app.logger.exception("Failed to delete date %s", date_id)
            return json_error("Failed to delete date", 500)
