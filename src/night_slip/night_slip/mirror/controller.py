from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.http import domain_error_response, json_error, make_login_required
from ..core.exceptions import AccessDenied
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required = make_login_required(container.auth_service)

    @app.route("/api/sync", methods=["POST"], endpoint="sync")
    @login_required
    def sync():
        try:
            container.sync_service.sync_now(actor_email=g.actor.email)
            return jsonify({"success": True})
        except AccessDenied as e:
            return domain_error_response(e)
        except Exception:
            app.logger.exception("Manual spreadsheet sync failed")
            return json_error("Sync failed", 500)
