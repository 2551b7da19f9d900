# app/memos/api.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.shared.db import get_db
from app.shared.http import err
from app.memos.errors import MemoNotFoundError, MemoOperationError
from app.memos.schemas import ALL_CATEGORIES, Memo, MemoCount, MemoIn, MemoList, SeedResult
from app.memos import service

router = APIRouter(prefix="/memos", tags=["Memos"])


def _failed(e: MemoOperationError):
    return err(str(e), code=e.code, status=500)


@router.get("", response_model=MemoList)
def list_memos(
    category: str = Query(ALL_CATEGORIES, description="Category to filter on, or 'all'"),
    q: str = Query("", description="Substring to look for in title or content"),
    db: Session = Depends(get_db),
):
    try:
        if q:
            items = service.search_memos(db, q)
            if category != ALL_CATEGORIES:
                items = [m for m in items if m.category == category]
        else:
            items = service.list_memos_by_category(db, category)
    except MemoOperationError as e:
        return _failed(e)
    return {"items": items, "count": len(items)}


@router.get("/count", response_model=MemoCount)
def count_memos(db: Session = Depends(get_db)):
    try:
        return {"count": service.count_memos(db)}
    except MemoOperationError as e:
        return _failed(e)


@router.post("/seed", response_model=SeedResult)
def seed_memos(db: Session = Depends(get_db)):
    try:
        return {"seeded": service.seed_sample_data(db)}
    except MemoOperationError as e:
        return _failed(e)


@router.get("/{memo_id}", response_model=Memo)
def get_memo(memo_id: str, db: Session = Depends(get_db)):
    try:
        memo = service.get_memo(db, memo_id)
    except MemoOperationError as e:
        return _failed(e)
    if not memo:
        raise HTTPException(404, "Memo not found")
    return memo


@router.post("", response_model=Memo, status_code=201)
def create_memo(payload: MemoIn, db: Session = Depends(get_db)):
    try:
        return service.create_memo(db, payload)
    except MemoOperationError as e:
        return _failed(e)


@router.put("/{memo_id}", response_model=Memo)
def update_memo(memo_id: str, payload: MemoIn, db: Session = Depends(get_db)):
    try:
        return service.update_memo(db, memo_id, payload)
    except MemoNotFoundError:
        raise HTTPException(404, "Memo not found")
    except MemoOperationError as e:
        return _failed(e)


@router.delete("/{memo_id}", status_code=204)
def delete_memo(memo_id: str, db: Session = Depends(get_db)):
    try:
        service.delete_memo(db, memo_id)
    except MemoOperationError as e:
        return _failed(e)


@router.delete("", status_code=204)
def clear_memos(db: Session = Depends(get_db)):
    try:
        service.clear_memos(db)
    except MemoOperationError as e:
        return _failed(e)
