import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from wordblog.config import Settings, get_settings
from wordblog.database import Base, enable_sqlite_foreign_keys, get_db
from wordblog.main import app
from wordblog.services.ai_client import get_generation_client
from wordblog.services.auth_service import create_access_token

TEST_DB_URL = "sqlite:///./test_wordblog.db"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
enable_sqlite_foreign_keys(engine)
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

test_settings = Settings(
    DATABASE_URL=TEST_DB_URL,
    OPENROUTER_API_KEY="test-openrouter-key",
    SUPABASE_JWT_SECRET="test-jwt-secret",
    AUTH_MODE="jwt",
)

OWNER_ID = "7d9f6d2c-1b1e-4c1a-9a55-0c8f3f1f2a01"
OTHER_ID = "1c0b5a3e-9f7e-4d7b-8a2e-5f1e2d3c4b02"

FREEDOM_ARTICLE = """# Why Freedom Still Surprises Us

## Introduction
Freedom is a word we use every day.

## Where It Started
Some history.

## What It Costs
Some trade-offs.

## How We Practice It
Some examples.

## Conclusion
Some takeaways.
"""


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db
app.dependency_overrides[get_settings] = lambda: test_settings


class FakeGenerator:
    def __init__(self, text: str = FREEDOM_ARTICLE, error: Exception = None):
        self.text = text
        self.error = error
        self.calls = []

    def generate(self, word: str) -> str:
        self.calls.append(word)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def fake_generator():
    generator = FakeGenerator()
    app.dependency_overrides[get_generation_client] = lambda: generator
    yield generator
    app.dependency_overrides.pop(get_generation_client, None)


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


def get_token(user_id: str = OWNER_ID, email: str = "owner@example.com") -> str:
    return create_access_token(test_settings, user_id, email)


def auth_headers(user_id: str = OWNER_ID, email: str = "owner@example.com") -> dict:
    return {"Authorization": f"Bearer {get_token(user_id, email)}"}
