"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

AUTH_COOKIE_NAME = "auth_token"
DEFAULT_MIRROR_TIMEOUT_SECONDS = 15
DEFAULT_MIRROR_WORKERS = 2
ATTENDANCE_KEY_SEPARATOR = "_"


def attendance_key(member_id: str, date_id: str) -> str:
    return f"{member_id}{ATTENDANCE_KEY_SEPARATOR}{date_id}"
