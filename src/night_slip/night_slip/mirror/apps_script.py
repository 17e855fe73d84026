"""Outbound spreadsheet mirror.

The spreadsheet side is a Google Apps Script web app that accepts one JSON POST
with the whole dataset and rewrites its sheets from it.
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol

import requests

from ..core.constants import DEFAULT_MIRROR_TIMEOUT_SECONDS
from ..core.exceptions import UpstreamFailure

logger = logging.getLogger(__name__)


class SpreadsheetMirror(Protocol):
    def push(self, snapshot: dict) -> None:
        raise NotImplementedError


class AppsScriptMirror:
    def __init__(
        self,
        url: Optional[str],
        *,
        timeout: float = DEFAULT_MIRROR_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._session = session or requests.Session()

    def is_configured(self) -> bool:
        return bool(self.url)

    def push(self, snapshot: dict) -> None:
        if not self.url:
            logger.debug("APPS_SCRIPT_URL not set; skipping spreadsheet mirror")
            return

        try:
            response = self._session.post(
                self.url,
                json=snapshot,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise UpstreamFailure(f"Spreadsheet mirror failed: {e}") from e

        logger.info(
            "Mirrored %d dates, %d users, %d attendance rows",
            len(snapshot.get("dates", [])),
            len(snapshot.get("users", [])),
            len(snapshot.get("attendance", [])),
        )
