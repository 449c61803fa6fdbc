from datetime import datetime, timezone

import pytest

from memoapp.viewer.display import build_view, category_color, category_label, format_date
from memoapp.viewer.state import MemoLoaded, SummarizeStarted, SummaryState, transition
from helpers import T0, T1, memo_out


@pytest.mark.parametrize("value,expected", [
    (T0, "2024년 1월 2일 오후 03:04"),
    ("2024-01-02T06:04:00Z", "2024년 1월 2일 오후 03:04"),
    (datetime(2024, 1, 2, 6, 4), "2024년 1월 2일 오후 03:04"),
    (datetime(2024, 1, 1, 15, 0, tzinfo=timezone.utc), "2024년 1월 2일 오전 12:00"),
    (datetime(2024, 1, 2, 3, 5, tzinfo=timezone.utc), "2024년 1월 2일 오후 12:05"),
])
def test_format_date_seoul(value, expected):
    assert format_date(value, "Asia/Seoul") == expected


def test_format_date_other_zone():
    assert format_date(T0, "UTC") == "2024년 1월 2일 오전 06:04"


@pytest.mark.parametrize("category,color,label", [
    ("personal", "blue", "개인"),
    ("work", "green", "업무"),
    ("study", "purple", "학습"),
    ("idea", "yellow", "아이디어"),
    ("other", "gray", "기타"),
    ("music", "gray", "music"),
])
def test_category_mapping_is_total(category, color, label):
    assert category_color(category) == color
    assert category_label(category) == label


def test_view_without_summary():
    memo = memo_out(tags=["집", "주말"])
    view = build_view(memo, transition(SummaryState(), MemoLoaded(memo)), tz="Asia/Seoul")
    assert view.summary is None and view.summary_date is None
    assert view.summarize_label == "AI 요약" and not view.summarize_disabled
    assert view.tags == ["#집", "#주말"]
    assert view.updated_label == "수정: 2024년 1월 2일 오후 03:04"
    assert view.created_label == "생성: 2024년 1월 2일 오후 03:04"
    assert view.last_modified_label is None
    assert (view.category_label, view.category_color) == ("개인", "blue")


def test_view_with_summary_and_edit():
    memo = memo_out(summary="- 요약", summary_updated_at=T1, updated_at=T1)
    state = transition(SummaryState(), MemoLoaded(memo))
    view = build_view(memo, state, tz="UTC")
    assert view.summary == "- 요약"
    assert view.summary_date == "2024년 3월 5일 오전 01:30"
    assert view.summarize_label == "AI 요약 다시 생성"
    assert view.last_modified_label == "마지막 수정: 2024년 3월 5일 오전 01:30"


def test_view_while_summarizing():
    memo = memo_out()
    state = transition(transition(SummaryState(), MemoLoaded(memo)), SummarizeStarted(memo.id))
    view = build_view(memo, state)
    assert view.summarize_label == "요약 중..." and view.summarize_disabled
