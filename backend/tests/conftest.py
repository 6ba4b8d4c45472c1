import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.config import settings
from app.database import Base, get_db
from app.main import app
from app.models.user import User
from app.services.revalidation import page_cache

TEST_DB_URL = "sqlite:///./test_atelier_cms.db"

ADMIN_EMAIL = "admin@test.com"
EDITOR_EMAIL = "editor@test.com"
TEST_PASSWORD = "test-password-1"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    page_cache.clear()
    yield
    page_cache.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch):
    root = tmp_path / "uploads"
    root.mkdir()
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(root))
    return root


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed_users(db):
    users = {
        "admin": User(email=ADMIN_EMAIL, name="Admin", role="admin", is_active=True),
        "editor": User(email=EDITOR_EMAIL, name="Editor", role="editor", is_active=True),
    }
    for u in users.values():
        u.set_password(TEST_PASSWORD)
        db.add(u)
    db.commit()
    for u in users.values():
        db.refresh(u)
    return users


def get_token(client, email: str, password: str = TEST_PASSWORD) -> str:
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


def auth_headers(client, email: str = ADMIN_EMAIL, password: str = TEST_PASSWORD) -> dict:
    return {"Authorization": f"Bearer {get_token(client, email, password)}"}
