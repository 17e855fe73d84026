"""WSGI entry point: ``flask --app app run`` or ``gunicorn app:app``."""

from src.night_slip.night_slip.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=3000, debug=bool(app.config.get("DEBUG")))
