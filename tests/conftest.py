import os

# must be set before app.shared.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["ENV"] = "test"
os.environ.pop("GEMINI_API_KEY", None)

import pytest
from fastapi.testclient import TestClient

from app.shared.db import Base, SessionLocal, engine, init_db
from app.main import app
from app.memos.controller import MemoViewController
from app.memos.schemas import MemoFormData


@pytest.fixture(autouse=True)
def fresh_db():
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def controller():
    return MemoViewController(SessionLocal)


@pytest.fixture
def drop_tables():
    """Call to make every following storage query fail."""
    def _drop():
        Base.metadata.drop_all(bind=engine)
    return _drop


@pytest.fixture
def make_form():
    def _make(title="Note", content="", category="personal", tags=None) -> MemoFormData:
        return MemoFormData(title=title, content=content, category=category, tags=tags or [])
    return _make
