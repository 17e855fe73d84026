import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "night-slip-dev-secret"

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "night_slip")

    # Comma-separated, matched exactly against the verified token email.
    ADMIN_EMAILS = os.environ.get("ADMIN_EMAILS", "")
    FIREBASE_PROJECT_ID = os.environ.get("FIREBASE_PROJECT_ID", "")

    APPS_SCRIPT_URL = os.environ.get("APPS_SCRIPT_URL") or None
    MIRROR_TIMEOUT_SECONDS = float(os.environ.get("MIRROR_TIMEOUT_SECONDS", "15"))
    MIRROR_WORKERS = int(os.environ.get("MIRROR_WORKERS", "2"))

    AUTO_INIT_DB = bool(int(os.environ.get("AUTO_INIT_DB", "0")))


def db_config_from(cfg=Config) -> dict:
    return {
        "host": cfg.DB_HOST,
        "port": cfg.DB_PORT,
        "user": cfg.DB_USER,
        "password": cfg.DB_PASSWORD,
        "database": cfg.DB_NAME,
    }
