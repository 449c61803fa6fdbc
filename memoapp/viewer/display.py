from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from memoapp.memos.schemas import MEMO_CATEGORIES, MemoCategory, MemoOut
from memoapp.shared.config import settings
from .state import SummaryState

CATEGORY_COLORS = {
    MemoCategory.PERSONAL: "blue",
    MemoCategory.WORK: "green",
    MemoCategory.STUDY: "purple",
    MemoCategory.IDEA: "yellow",
    MemoCategory.OTHER: "gray",
}
DEFAULT_CATEGORY_COLOR = CATEGORY_COLORS[MemoCategory.OTHER]

SUMMARIZE_LABEL = "AI 요약"
RESUMMARIZE_LABEL = "AI 요약 다시 생성"
SUMMARIZING_LABEL = "요약 중..."


def category_color(category: str) -> str:
    try:
        return CATEGORY_COLORS[MemoCategory(category)]
    except ValueError:
        return DEFAULT_CATEGORY_COLOR


def category_label(category: str) -> str:
    return MEMO_CATEGORIES.get(category, category)


def format_date(value: datetime | str, tz: str | None = None) -> str:
    """Korean long date, e.g. `2024년 1월 2일 오후 03:04`. Naive values are UTC."""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    local = value.astimezone(ZoneInfo(tz or settings.DISPLAY_TZ))
    meridiem = "오전" if local.hour < 12 else "오후"
    hour = local.hour % 12 or 12
    return f"{local.year}년 {local.month}월 {local.day}일 {meridiem} {hour:02d}:{local.minute:02d}"


def summarize_button_label(state: SummaryState) -> str:
    if state.is_summarizing:
        return SUMMARIZING_LABEL
    return RESUMMARIZE_LABEL if state.summary else SUMMARIZE_LABEL


@dataclass
class MemoView:
    title: str
    category_label: str
    category_color: str
    updated_label: str
    content: str
    summarize_label: str
    summarize_disabled: bool
    created_label: str
    last_modified_label: str | None = None
    summary: str | None = None
    summary_date: str | None = None
    error: str | None = None
    tags: list[str] = field(default_factory=list)


def build_view(memo: MemoOut, state: SummaryState, tz: str | None = None) -> MemoView:
    view = MemoView(
        title=memo.title,
        category_label=category_label(memo.category),
        category_color=category_color(memo.category),
        updated_label=f"수정: {format_date(memo.updated_at, tz)}",
        content=memo.content,
        summarize_label=summarize_button_label(state),
        summarize_disabled=state.is_summarizing,
        created_label=f"생성: {format_date(memo.created_at, tz)}",
        error=state.error,
        tags=[f"#{t}" for t in memo.tags],
    )
    if memo.created_at != memo.updated_at:
        view.last_modified_label = f"마지막 수정: {format_date(memo.updated_at, tz)}"
    if state.summary:
        view.summary = state.summary
        if state.summary_updated_at:
            view.summary_date = format_date(state.summary_updated_at, tz)
    return view
