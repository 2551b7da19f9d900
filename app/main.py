import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.shared.config import settings
from app.shared.db import SessionLocal, init_db
from app.shared.logs import configure_logging

# Routers Import
from app.memos.api import router as memos_router
from app.memos.service import seed_sample_data
from app.tools.summarize.api import router as summarize_router

configure_logging(settings.LOG_LEVEL)
log = logging.getLogger(__name__)

TAGS_METADATA = [
    {"name": "Memos", "description": "Create, list, search, edit and delete memos"},
    {"name": "Tools: Summarize", "description": "AI summary of a memo's content"},
    {"name": "Health", "description": "Service health"},
]

app = FastAPI(
    title="Memo Notes",
    version="0.1.0",
    description="Personal memos with categories, tags, search and AI summaries.",
    openapi_tags=TAGS_METADATA,
)

# ---- DEV-ONLY error handler (helps you see real errors in Swagger) ----
if settings.ENV == "dev":
    @app.exception_handler(Exception)
    async def _dev_ex_handler(request: Request, exc: Exception):
        log.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

# ----------------------------------------------------------------------


@app.on_event("startup")
def _init_db():
    init_db()
    if settings.SEED_ON_STARTUP:
        with SessionLocal() as db:
            if seed_sample_data(db):
                log.info("store was empty, sample memos added")

@app.get("/healthz", tags=["Health"])
def healthz():
    return {"ok": True}

# Routers
app.include_router(memos_router)
app.include_router(summarize_router)
