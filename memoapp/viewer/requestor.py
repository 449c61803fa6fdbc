from __future__ import annotations
import logging
import threading
from datetime import datetime, timezone
from typing import Callable

import httpx

from memoapp.memos.schemas import MemoOut
from .state import (
    Event,
    MemoLoaded,
    SummarizeCancelled,
    SummarizeFailed,
    SummarizeStarted,
    SummarySaved,
    SummaryState,
    SummaryUnsaved,
    transition,
)
from .store import SummaryStore

logger = logging.getLogger(__name__)

SUMMARIZE_PATH = "/api/summarize"
SUMMARY_FAILED_MESSAGE = "요약을 생성하는데 실패했습니다."
UNKNOWN_ERROR_MESSAGE = "알 수 없는 오류가 발생했습니다."


class SummaryRequestError(Exception):
    pass


class CancelToken:
    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SummaryRequestor:
    """Runs the summarize-then-persist cycle for the memo currently loaded.

    Errors never leave `summarize()`; they land in `state.error` for the view.
    """

    def __init__(
        self,
        client: httpx.Client,
        store: SummaryStore,
        on_memo_update: Callable[[MemoOut], None] | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._client = client
        self._store = store
        self._on_memo_update = on_memo_update
        self._clock = clock
        self._memo: MemoOut | None = None
        self.state = SummaryState()

    def _apply(self, event: Event) -> SummaryState:
        self.state = transition(self.state, event)
        return self.state

    def load(self, memo: MemoOut | None) -> SummaryState:
        self._memo = memo
        return self._apply(MemoLoaded(memo))

    def request_summary(self, memo: MemoOut) -> str:
        response = self._client.post(SUMMARIZE_PATH, json={"title": memo.title, "content": memo.content})
        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            data = {}
        if not response.is_success or data.get("error"):
            raise SummaryRequestError(data.get("error") or SUMMARY_FAILED_MESSAGE)
        summary = data.get("summary")
        if not isinstance(summary, str):
            raise SummaryRequestError(SUMMARY_FAILED_MESSAGE)
        return summary

    def summarize(self, cancel: CancelToken | None = None) -> SummaryState:
        memo = self._memo
        if memo is None or self.state.is_summarizing:
            return self.state
        self._apply(SummarizeStarted(memo.id))

        try:
            text = self.request_summary(memo)
            if cancel and cancel.cancelled:
                return self._apply(SummarizeCancelled(memo.id))
            record = self._store.save_memo_summary(memo.id, text)
        except Exception as e:
            logger.warning("summary for memo %s failed: %s", memo.id, e)
            return self._apply(SummarizeFailed(memo.id, str(e) or UNKNOWN_ERROR_MESSAGE))

        if cancel and cancel.cancelled:
            return self._apply(SummarizeCancelled(memo.id))
        if record is None:
            # shown now, gone after a reload
            logger.warning("summary for memo %s was not persisted", memo.id)
            return self._apply(SummaryUnsaved(memo.id, text, self._clock()))

        self._apply(SummarySaved(memo.id, record))
        if self._on_memo_update:
            self._on_memo_update(record)
        return self.state
