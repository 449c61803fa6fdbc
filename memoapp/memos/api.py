from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from memoapp.shared.db import get_db
from memoapp.memos.schemas import MemoCategory, MemoCreate, MemoList, MemoOut, SummarySave
from memoapp.memos.service import create_memo, get_memo, list_memos, save_memo_summary

router = APIRouter(prefix="/api/memos", tags=["Memos"])

@router.post("", response_model=MemoOut, status_code=201)
def api_create_memo(payload: MemoCreate, db: Session = Depends(get_db)):
    return create_memo(db, payload)

@router.get("", response_model=MemoList)
def api_list_memos(
    category: MemoCategory | None = None,
    tag: str | None = None,
    limit: int = Query(50, ge=1, le=100),
    db: Session = Depends(get_db),
):
    items = list_memos(db, category=category.value if category else None, tag=tag, limit=limit)
    return {"items": items}

@router.get("/{memo_id}", response_model=MemoOut)
def api_get_memo(memo_id: str, db: Session = Depends(get_db)):
    memo = get_memo(db, memo_id)
    if not memo:
        raise HTTPException(404, "Memo not found")
    return memo

@router.post("/{memo_id}/summary", response_model=MemoOut)
def api_save_summary(memo_id: str, payload: SummarySave, db: Session = Depends(get_db)):
    memo = save_memo_summary(db, memo_id, payload.summary)
    if not memo:
        raise HTTPException(404, "Memo not found")
    return memo
