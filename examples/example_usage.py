"""Example: use the service layer without Flask.

Prints the sheet for the newest tracked date.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.night_slip.night_slip.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        admin_emails=settings.ADMIN_EMAILS,
        firebase_project_id=settings.FIREBASE_PROJECT_ID,
        apps_script_url=None,
    )
    dates = container.date_service.list_dates()
    if not dates:
        print("No tracked dates yet.")
        return

    latest = dates[0]
    print(f"Night slip sheet for {latest.date_string}")
    for entry in container.attendance_coordinator.list_entries(latest.date_id):
        r = entry.record
        lock = "locked" if r.is_locked else ""
        print(f"  {entry.member.name:<25} {r.coming:<11} {r.applied:<12} {r.attendance_1:<8} {r.attendance_2:<8} {lock}")
    container.mirror.shutdown()


if __name__ == "__main__":
    main()
