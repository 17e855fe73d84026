from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .database.bootstrap import apply_schema, list_tables

from .container import Container, build_container
from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .dates.controller import register as register_dates
from .members.controller import register as register_members
from .mirror.controller import register as register_mirror


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["AUTH_COOKIE_SECURE"] = bool(getattr(settings, "AUTH_COOKIE_SECURE", True))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")

        # Helpful startup info so a wrong DB target is obvious.
        if app.config["DEBUG"]:
            print(
                "[night-slip] settings=", settings_module,
                " db=", f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
            )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            if app.config["DEBUG"]:
                print(f"[night-slip] schema ready (tables={len(list_tables(db_config))})")

        container = build_container(
            db_config=db_config,
            admin_emails=getattr(settings, "ADMIN_EMAILS", ""),
            firebase_project_id=getattr(settings, "FIREBASE_PROJECT_ID", ""),
            apps_script_url=getattr(settings, "APPS_SCRIPT_URL", None),
            mirror_timeout=float(getattr(settings, "MIRROR_TIMEOUT_SECONDS", 15)),
            mirror_workers=int(getattr(settings, "MIRROR_WORKERS", 2)),
        )

    app.extensions["night_slip"] = container

    register_auth(app, container)
    register_dates(app, container)
    register_members(app, container)
    register_attendance(app, container)
    register_mirror(app, container)

    return app
