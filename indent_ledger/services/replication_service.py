"""
Replication reconciler - full-snapshot sync with the cloud store.

Push sends {"action": "push", "data": <snapshot>}. Pull reads
{"data": {...}} and replaces every collection present, last write wins.
A failed pull never touches local state.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError as SchemaError

from indent_ledger.core.config import settings
from indent_ledger.core.errors import ReplicationFailure
from indent_ledger.models.replication import ReplicationReport
from indent_ledger.repositories.ledger_store import LedgerStore

logger = logging.getLogger(__name__)


class ReplicationReconciler:
    def __init__(
        self,
        store: LedgerStore,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.store = store
        self.url = settings.REPLICATION_URL if url is None else url
        self.timeout = settings.REPLICATION_TIMEOUT_SECONDS if timeout is None else timeout
        self._push_lock = asyncio.Lock()
        self._pull_lock = asyncio.Lock()

    def _require_url(self) -> str:
        if not self.url:
            raise ReplicationFailure("Replication URL is not configured")
        return self.url

    def _send(self, url: str, payload: Dict[str, Any]) -> None:
        response = requests.post(url, json=payload, timeout=self.timeout)
        response.raise_for_status()

    def _fetch(self, url: str) -> Any:
        response = requests.get(url, params={"action": "pull"}, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    async def push(self) -> ReplicationReport:
        url = self._require_url()
        async with self._push_lock:
            # Snapshot taken under the lock so two pushes never interleave
            snapshot = self.store.snapshot()
            payload = {"action": "push", "data": snapshot}
            try:
                await asyncio.to_thread(self._send, url, payload)
            except requests.RequestException as exc:
                logger.warning(f"Push to cloud store failed: {exc}")
                raise ReplicationFailure(f"Push failed: {exc}") from exc

        logger.info(f"Pushed snapshot with {len(snapshot)} collections")
        return ReplicationReport(action="push", collections=list(snapshot))

    async def pull(self) -> ReplicationReport:
        url = self._require_url()
        async with self._pull_lock:
            try:
                body = await asyncio.to_thread(self._fetch, url)
            except (requests.RequestException, ValueError) as exc:
                logger.warning(f"Pull from cloud store failed: {exc}")
                raise ReplicationFailure(f"Pull failed: {exc}") from exc

            data = body.get("data") if isinstance(body, dict) else None
            if not isinstance(data, dict):
                logger.warning("Pull response has no data object")
                raise ReplicationFailure("Pull response has no data object")

            try:
                applied = self.store.apply_snapshot(data)
            except SchemaError as exc:
                logger.warning(f"Pulled snapshot rejected: {exc.error_count()} invalid fields")
                raise ReplicationFailure(f"Pulled snapshot is invalid: {exc}") from exc

        logger.info(f"Pulled snapshot, replaced: {', '.join(applied) or 'nothing'}")
        return ReplicationReport(action="pull", collections=applied)
