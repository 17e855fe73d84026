from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Optional

from ..core.constants import DEFAULT_MIRROR_WORKERS
from .apps_script import SpreadsheetMirror
from .snapshot import SnapshotService

logger = logging.getLogger(__name__)


class MirrorDispatcher:
    """Runs the spreadsheet mirror after a committed write.

    ``dispatch`` hands the job to a worker thread and returns at once; a failed
    run is logged and dropped. ``sync_now`` runs inline and raises.
    """

    def __init__(
        self,
        snapshots: SnapshotService,
        mirror: SpreadsheetMirror,
        *,
        executor: Optional[Executor] = None,
        max_workers: int = DEFAULT_MIRROR_WORKERS,
    ):
        self._snapshots = snapshots
        self._mirror = mirror
        self._executor = executor or ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="sheet-mirror")

    def dispatch(self, reason: str) -> Future:
        return self._executor.submit(self._run, reason)

    def sync_now(self) -> None:
        self._mirror.push(self._snapshots.build())

    def shutdown(self, *, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def _run(self, reason: str) -> bool:
        try:
            self.sync_now()
        except Exception:
            logger.exception("Apps Script sync error after %s", reason)
            return False
        return True
