from pathlib import Path
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool

from app.shared.config import settings

# Local SQLite DB under ./storage/ unless DATABASE_URL says otherwise
ROOT = Path(__file__).resolve().parents[2]   # project root
STORAGE_DIR = ROOT / "storage"


def _database_url() -> str:
    if settings.DATABASE_URL:
        return settings.DATABASE_URL
    STORAGE_DIR.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{(STORAGE_DIR / 'memos.db').as_posix()}"


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {}
    kwargs = {"connect_args": {"check_same_thread": False}}
    # in-memory sqlite: every connection must see the same database
    if url == "sqlite://" or ":memory:" in url:
        kwargs["poolclass"] = StaticPool
    return kwargs


DB_URL = _database_url()

# one engine per process, lives as long as the process
engine = create_engine(DB_URL, **_engine_kwargs(DB_URL))

if DB_URL.startswith("sqlite"):
    @event.listens_for(engine, "connect")
    def _unicode_lower(dbapi_conn, _record):
        # sqlite's builtin lower() only folds ASCII; ilike goes through it
        dbapi_conn.create_function("lower", 1, lambda s: s.lower() if s is not None else None, deterministic=True)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

class Base(DeclarativeBase):
    pass

# FastAPI dep
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    # import models so they register with Base.metadata
    from app.memos import models  # noqa: F401
    Base.metadata.create_all(bind=engine)
