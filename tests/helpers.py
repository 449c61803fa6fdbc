from datetime import datetime, timezone

from memoapp.memos.schemas import MemoOut

T0 = datetime(2024, 1, 2, 6, 4, tzinfo=timezone.utc)
T1 = datetime(2024, 3, 5, 1, 30, tzinfo=timezone.utc)
T2 = datetime(2024, 3, 6, 9, 0, tzinfo=timezone.utc)


def memo_out(**fields) -> MemoOut:
    data = {
        "id": "a" * 32,
        "title": "장보기",
        "content": "- 우유\n- 계란",
        "category": "personal",
        "tags": ["집"],
        "summary": None,
        "summary_updated_at": None,
        "created_at": T0,
        "updated_at": T0,
    }
    data.update(fields)
    return MemoOut(**data)
