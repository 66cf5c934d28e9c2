"""
Shared pytest fixtures — in‑memory SQLite + FastAPI TestClient.
"""
import os
import tempfile

# Configuration is read at import time, so it has to be in place first
_DATA_DIR = tempfile.mkdtemp(prefix="moonfilm-test-")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SUPABASE_URL"] = "https://test-project.supabase.co"
os.environ["SUPABASE_ANON_KEY"] = "test-anon-key"
os.environ["DATA_DIR"] = _DATA_DIR
os.environ["DRAFTS_DIR"] = os.path.join(_DATA_DIR, "drafts")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

import moonfilm.models  # noqa: E402,F401
from moonfilm.database import Base, SessionLocal, engine  # noqa: E402
from moonfilm.deps import get_drafts, require_admin  # noqa: E402
from moonfilm.main import app  # noqa: E402
from moonfilm.quote.drafts import DraftStorage  # noqa: E402
from moonfilm.realtime import feed as change_feed, watch_sessions  # noqa: E402
from moonfilm.schemas import AuthUser  # noqa: E402

watch_sessions(SessionLocal)

ADMIN = AuthUser(id="admin-1", email="admin@moonfilmwork.test", role="authenticated")


@pytest.fixture(autouse=True)
def _reset_tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def feed():
    return change_feed


@pytest.fixture()
def session_factory():
    return SessionLocal


@pytest.fixture()
def drafts(tmp_path):
    return DraftStorage(tmp_path / "drafts")


@pytest.fixture()
def anon_client(drafts):
    app.dependency_overrides[get_drafts] = lambda: drafts
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def client(drafts):
    app.dependency_overrides[get_drafts] = lambda: drafts
    app.dependency_overrides[require_admin] = lambda: ADMIN
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
