from __future__ import annotations
import logging

from google import genai
from sqlalchemy.orm import Session

from app.memos.service import get_memo
from app.shared.config import settings

log = logging.getLogger(__name__)

PROMPT = (
    "Summarize the following memo concisely and clearly. "
    "Keep only the key points, in 2-3 sentences:\n\n{content}"
)


class SummaryError(Exception):
    """The summarization call failed."""


class SummaryInputError(SummaryError):
    pass


class SummaryConfigError(SummaryError):
    pass


def _client() -> genai.Client:
    if not settings.GEMINI_API_KEY:
        raise SummaryConfigError("GEMINI_API_KEY is not set")
    return genai.Client(api_key=settings.GEMINI_API_KEY)


def summarize_content(content: str) -> str:
    if not content or not isinstance(content, str):
        raise SummaryInputError("memo content is required")

    client = _client()
    try:
        response = client.models.generate_content(
            model=settings.GEMINI_MODEL,
            contents=PROMPT.format(content=content),
        )
    except Exception as e:
        log.error("error generating summary: %s", e)
        raise SummaryError("summary generation failed") from e

    summary = (response.text or "").strip()
    if not summary:
        log.error("error generating summary: empty response from %s", settings.GEMINI_MODEL)
        raise SummaryError("summary generation failed")
    return summary


def summarize_memo(db: Session, memo_id: str) -> dict | None:
    memo = get_memo(db, memo_id)
    if not memo:
        return None
    return {"memo_id": memo.id, "summary": summarize_content(memo.content)}
