import logging
from datetime import datetime, timezone
from sqlalchemy.orm import Session
from sqlalchemy import select, desc
from memoapp.memos.models import Memo
from memoapp.memos.schemas import MemoCreate

logger = logging.getLogger(__name__)

def _clean_tags(tags: list[str]) -> list[str]:
    return [t.strip() for t in tags if t and t.strip()]

def create_memo(db: Session, payload: MemoCreate) -> Memo:
    now = datetime.now(timezone.utc)
    memo = Memo(
        title=payload.title.strip(),
        content=payload.content,
        category=payload.category.value,
        created_at=now,
        updated_at=now,
    )
    memo.tags = _clean_tags(payload.tags)
    db.add(memo)
    db.commit()
    db.refresh(memo)
    logger.info("memo %s created", memo.id)
    return memo

def get_memo(db: Session, memo_id: str) -> Memo | None:
    return db.get(Memo, memo_id)

def list_memos(db: Session, category: str | None = None, tag: str | None = None, limit: int = 50) -> list[Memo]:
    stmt = select(Memo)
    if category:
        stmt = stmt.where(Memo.category == category)
    stmt = stmt.order_by(desc(Memo.created_at))
    rows = db.scalars(stmt).all()
    if tag:
        rows = [m for m in rows if tag in m.tags]
    return list(rows[:min(limit, 100)])

def save_memo_summary(db: Session, memo_id: str, summary: str) -> Memo | None:
    """Store an AI summary on the memo. `updated_at` is left alone: a summary is not an edit."""
    memo = db.get(Memo, memo_id)
    if not memo:
        logger.warning("summary save for unknown memo %s", memo_id)
        return None
    memo.summary = summary
    memo.summary_updated_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(memo)
    return memo
