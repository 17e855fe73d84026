import os

from config.config import Config, db_config_from

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config_from(Config)

ADMIN_EMAILS = Config.ADMIN_EMAILS
FIREBASE_PROJECT_ID = Config.FIREBASE_PROJECT_ID
APPS_SCRIPT_URL = Config.APPS_SCRIPT_URL
MIRROR_TIMEOUT_SECONDS = Config.MIRROR_TIMEOUT_SECONDS
MIRROR_WORKERS = Config.MIRROR_WORKERS

DEBUG = False

AUTH_COOKIE_SECURE = True

AUTO_INIT_DB = Config.AUTO_INIT_DB
