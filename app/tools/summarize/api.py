# app/tools/summarize/api.py
from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session
from app.shared.http import ok, err
from app.shared.db import get_db
from app.memos.errors import MemoOperationError
from .service import (
    SummaryConfigError,
    SummaryError,
    SummaryInputError,
    summarize_content,
    summarize_memo,
)

router = APIRouter(prefix="/tools/summarize", tags=["Tools: Summarize"])

class SummarizeIn(BaseModel):
    content: str | None = None

class SummarizeMemoIn(BaseModel):
    memo_id: str

@router.post("")
def api_summarize(inb: SummarizeIn):
    try:
        return ok({"summary": summarize_content(inb.content or "")})
    except SummaryInputError as e:
        return err(str(e), code="invalid_input", status=400)
    except SummaryConfigError as e:
        return err(str(e), code="not_configured", status=500)
    except SummaryError as e:
        return err(str(e), code="summary_failed", status=500)

@router.post("/memo")
def api_summarize_memo(inb: SummarizeMemoIn, db: Session = Depends(get_db)):
    try:
        out = summarize_memo(db, inb.memo_id)
    except MemoOperationError as e:
        return err(str(e), code=e.code, status=500)
    except SummaryInputError as e:
        return err(str(e), code="invalid_input", status=400)
    except SummaryConfigError as e:
        return err(str(e), code="not_configured", status=500)
    except SummaryError as e:
        return err(str(e), code="summary_failed", status=500)
    if out is None:
        return err("Memo not found", code="not_found", status=404, details=inb.memo_id)
    return ok(out)
