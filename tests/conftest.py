import os

# must be set before memoapp.shared.db builds its engine
os.environ.setdefault("MEMO_DB_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from memoapp.main import app
from memoapp.shared.db import Base, engine
from memoapp.summarize.api import get_provider_factory


class FakeProvider:
    """Stands in for GeminiProvider; records keys and prompts it receives."""

    def __init__(self, reply="- 핵심 요약", error=None):
        self.reply = reply
        self.error = error
        self.keys = []
        self.prompts = []

    def __call__(self, api_key):
        self.keys.append(api_key)
        return self

    async def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.reply


@pytest.fixture
def provider():
    fake = FakeProvider()
    app.dependency_overrides[get_provider_factory] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_provider_factory, None)


@pytest.fixture
def client(monkeypatch, provider):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    Base.metadata.drop_all(bind=engine)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_memo(client):
    def _make(**fields):
        body = {"title": "회의 메모", "content": "# 안건\n- 예산 검토", "category": "work", "tags": ["회의"]}
        body.update(fields)
        r = client.post("/api/memos", json=body)
        assert r.status_code == 201, r.text
        return r.json()
    return _make
