import os

from config.config import Config, db_config_from

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config_from(Config)

ADMIN_EMAILS = Config.ADMIN_EMAILS
FIREBASE_PROJECT_ID = Config.FIREBASE_PROJECT_ID
APPS_SCRIPT_URL = Config.APPS_SCRIPT_URL
MIRROR_TIMEOUT_SECONDS = Config.MIRROR_TIMEOUT_SECONDS
MIRROR_WORKERS = Config.MIRROR_WORKERS

DEBUG = True

# Local dev runs over plain http, so the auth cookie cannot be Secure.
AUTH_COOKIE_SECURE = bool(int(os.getenv("AUTH_COOKIE_SECURE", "0")))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
