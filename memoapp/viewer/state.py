"""Summary display state for the memo viewer.

The viewer keeps one `SummaryState` per open memo and advances it only through
`transition(state, event)`. Events describe what happened (a memo was loaded,
the user asked for a summary, the gateway answered), so the whole summarize
cycle can be exercised without a rendering layer or a network.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum

from memoapp.memos.schemas import MemoOut


class Phase(str, Enum):
    IDLE = "idle"
    SUMMARIZING = "summarizing"
    ERROR = "error"


@dataclass(frozen=True)
class SummaryState:
    memo_id: str | None = None
    # what storage said when the memo was last loaded; a change triggers a resync
    stored_summary: str | None = None
    stored_summary_updated_at: datetime | None = None
    summary: str = ""
    summary_updated_at: datetime | None = None
    phase: Phase = Phase.IDLE
    error: str | None = None

    @property
    def is_summarizing(self) -> bool:
        return self.phase is Phase.SUMMARIZING


@dataclass(frozen=True)
class MemoLoaded:
    memo: MemoOut | None


@dataclass(frozen=True)
class SummarizeStarted:
    memo_id: str


@dataclass(frozen=True)
class SummarySaved:
    memo_id: str
    record: MemoOut


@dataclass(frozen=True)
class SummaryUnsaved:
    memo_id: str
    text: str
    at: datetime


@dataclass(frozen=True)
class SummarizeFailed:
    memo_id: str
    message: str


@dataclass(frozen=True)
class SummarizeCancelled:
    memo_id: str


Event = MemoLoaded | SummarizeStarted | SummarySaved | SummaryUnsaved | SummarizeFailed | SummarizeCancelled


def on_memo_loaded(state: SummaryState, memo: MemoOut | None) -> SummaryState:
    if memo is None:
        return state
    key = (memo.id, memo.summary, memo.summary_updated_at)
    if key == (state.memo_id, state.stored_summary, state.stored_summary_updated_at):
        return state
    return replace(
        state,
        memo_id=memo.id,
        stored_summary=memo.summary,
        stored_summary_updated_at=memo.summary_updated_at,
        summary=memo.summary or "",
        summary_updated_at=memo.summary_updated_at,
        error=None,
        # a cycle already in flight keeps its spinner
        phase=Phase.SUMMARIZING if state.is_summarizing else Phase.IDLE,
    )


def on_summarize_started(state: SummaryState, memo_id: str) -> SummaryState:
    if state.memo_id is None or state.memo_id != memo_id or state.is_summarizing:
        return state
    return replace(state, phase=Phase.SUMMARIZING, error=None)


def _finish(state: SummaryState, memo_id: str, **changes) -> SummaryState:
    if memo_id != state.memo_id:
        # result for a memo that is no longer shown: only stop the spinner
        return replace(state, phase=Phase.IDLE) if state.is_summarizing else state
    return replace(state, **changes)


def transition(state: SummaryState, event: Event) -> SummaryState:
    if isinstance(event, MemoLoaded):
        return on_memo_loaded(state, event.memo)
    if isinstance(event, SummarizeStarted):
        return on_summarize_started(state, event.memo_id)
    if isinstance(event, SummarySaved):
        return _finish(
            state, event.memo_id,
            summary=event.record.summary or "",
            summary_updated_at=event.record.summary_updated_at,
            phase=Phase.IDLE,
        )
    if isinstance(event, SummaryUnsaved):
        return _finish(state, event.memo_id, summary=event.text, summary_updated_at=event.at, phase=Phase.IDLE)
    if isinstance(event, SummarizeFailed):
        return _finish(state, event.memo_id, error=event.message, phase=Phase.ERROR)
    if isinstance(event, SummarizeCancelled):
        return _finish(state, event.memo_id, phase=Phase.IDLE)
    raise TypeError(f"unknown viewer event: {event!r}")
