from config.config import Config, db_config_from

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from(Config)

ADMIN_EMAILS = "admin@example.org"
FIREBASE_PROJECT_ID = "night-slip-test"
APPS_SCRIPT_URL = None
MIRROR_TIMEOUT_SECONDS = 1
MIRROR_WORKERS = 1

DEBUG = False
TESTING = True

AUTH_COOKIE_SECURE = False

AUTO_INIT_DB = False
