from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceCoordinator
from .auth.identity import FirebaseIdentityVerifier
from .auth.policy import AllowListPolicy, AuthorizationPolicy
from .auth.service import AuthService
from .core.constants import DEFAULT_MIRROR_TIMEOUT_SECONDS, DEFAULT_MIRROR_WORKERS
from .database.connection import DBConfig, DatabaseConnection
from .dates.mysql_date_repository import MySQLDateRepository
from .dates.repository import DateRepository
from .dates.service import DateService
from .members.mysql_member_repository import MySQLMemberRepository
from .members.repository import MemberRepository
from .members.service import MemberService
from .mirror.apps_script import AppsScriptMirror, SpreadsheetMirror
from .mirror.dispatcher import MirrorDispatcher
from .mirror.service import SyncService
from .mirror.snapshot import SnapshotService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    members_repo: MemberRepository
    dates_repo: DateRepository
    attendance_repo: AttendanceRepository

    policy: AuthorizationPolicy
    mirror: MirrorDispatcher

    auth_service: AuthService
    member_service: MemberService
    date_service: DateService
    attendance_coordinator: AttendanceCoordinator
    sync_service: SyncService


def assemble(
    *,
    members_repo: MemberRepository,
    dates_repo: DateRepository,
    attendance_repo: AttendanceRepository,
    policy: AuthorizationPolicy,
    auth_service: AuthService,
    spreadsheet: SpreadsheetMirror,
    conn: Optional[DatabaseConnection] = None,
    mirror_executor=None,
    mirror_workers: int = DEFAULT_MIRROR_WORKERS,
) -> Container:
    """Wire services over already-built repositories and adapters."""
    snapshots = SnapshotService(dates_repo, members_repo, attendance_repo)
    mirror = MirrorDispatcher(snapshots, spreadsheet, executor=mirror_executor, max_workers=mirror_workers)

    return Container(
        conn=conn,
        members_repo=members_repo,
        dates_repo=dates_repo,
        attendance_repo=attendance_repo,
        policy=policy,
        mirror=mirror,
        auth_service=auth_service,
        member_service=MemberService(members_repo, policy, mirror),
        date_service=DateService(dates_repo, policy, mirror),
        attendance_coordinator=AttendanceCoordinator(attendance_repo, members_repo, policy, mirror),
        sync_service=SyncService(mirror, policy),
    )


def build_container(
    *,
    db_config: dict,
    admin_emails,
    firebase_project_id: str,
    apps_script_url: Optional[str],
    mirror_timeout: float = DEFAULT_MIRROR_TIMEOUT_SECONDS,
    mirror_workers: int = DEFAULT_MIRROR_WORKERS,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))
    policy = AllowListPolicy.from_setting(admin_emails)

    return assemble(
        conn=conn,
        members_repo=MySQLMemberRepository(conn),
        dates_repo=MySQLDateRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        policy=policy,
        auth_service=AuthService(FirebaseIdentityVerifier(firebase_project_id), policy),
        spreadsheet=AppsScriptMirror(apps_script_url, timeout=mirror_timeout),
        mirror_workers=mirror_workers,
    )
