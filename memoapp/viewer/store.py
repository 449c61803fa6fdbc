import logging
from typing import Protocol

import httpx

from memoapp.memos.schemas import MemoOut

logger = logging.getLogger(__name__)


class SummaryStore(Protocol):
    def save_memo_summary(self, memo_id: str, summary: str) -> MemoOut | None: ...


class ApiMemoStore:
    """Memo persistence over the /api/memos routes."""

    def __init__(self, client: httpx.Client):
        self._client = client

    def get_memo(self, memo_id: str) -> MemoOut | None:
        r = self._client.get(f"/api/memos/{memo_id}")
        if r.status_code == 404:
            return None
        r.raise_for_status()
        return MemoOut.model_validate(r.json())

    def save_memo_summary(self, memo_id: str, summary: str) -> MemoOut | None:
        r = self._client.post(f"/api/memos/{memo_id}/summary", json={"summary": summary})
        if not r.is_success:
            logger.warning("saving summary for memo %s failed: HTTP %s", memo_id, r.status_code)
            return None
        return MemoOut.model_validate(r.json())
