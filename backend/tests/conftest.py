from pathlib import Path
import sys

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

sys.path.append(str(Path(__file__).resolve().parents[1]))

from skill_bridge.api.deps import get_db, get_requester
from skill_bridge.core.database import Base
from skill_bridge.core.ratelimit import ai_rate_limiter, auth_login_rate_limiter
from skill_bridge.main import app
from skill_bridge.models import entities  # noqa: F401
from skill_bridge.services.requester import AssessmentRequester
from skill_bridge.services.session import session_registry

STRONG_PASSWORD = "Str0ng!Pass"


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    yield factory
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def internal_handler():
    """Replies of the internal generation handlers as seen by the requester; unavailable by default."""
    state = {"assessment": None, "analysis": None, "calls": []}

    def handle(request: httpx.Request) -> httpx.Response:
        state["calls"].append(request.url.path)
        key = "assessment" if request.url.path.endswith("/generate/assessment") else "analysis"
        if state[key] is None:
            return httpx.Response(503, json={"error": "unavailable"})
        return httpx.Response(200, json={key: state[key]})

    state["handle"] = handle
    return state


@pytest.fixture
def client(session_factory, internal_handler):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    def _get_requester():
        http = httpx.Client(transport=httpx.MockTransport(internal_handler["handle"]))
        requester = AssessmentRequester(client=http, base_url="http://internal/api")
        try:
            yield requester
        finally:
            http.close()

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_requester] = _get_requester
    ai_rate_limiter.reset()
    auth_login_rate_limiter.reset()
    session_registry.clear()
    yield TestClient(app)
    app.dependency_overrides.clear()
    session_registry.clear()


@pytest.fixture
def register(client):
    def _register(username: str = "student1", **extra) -> dict:
        response = client.post(
            "/auth/register",
            json={"username": username, "password": STRONG_PASSWORD, **extra},
        )
        assert response.status_code == 200, response.text
        payload = response.json()
        return {"payload": payload, "headers": {"X-Auth-Token": payload["auth_token"]}}

    return _register


@pytest.fixture
def profiled_user(client, register):
    def _profiled(username: str = "student1", interests=None) -> dict:
        account = register(username)
        response = client.put(
            "/user/profile",
            headers=account["headers"],
            json={
                "display_name": "Asha",
                "age": 19,
                "course": "graduation-pursuing",
                "stream": "bca",
                "interests": interests if interests is not None else ["Arts & Creative Design"],
                "location": "Pune",
            },
        )
        assert response.status_code == 200, response.text
        return account

    return _profiled


def gemini_reply(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


@pytest.fixture
def gemini(client, monkeypatch):
    """Stand-in for the upstream generateContent endpoint used by the generation handlers."""
    from skill_bridge.api.deps import get_generation_client
    from skill_bridge.core.config import settings

    monkeypatch.setattr(settings, "gemini_api_key", "test-key")
    state = {"reply": lambda request: httpx.Response(200, json=gemini_reply("{}")), "requests": []}

    def handle(request: httpx.Request) -> httpx.Response:
        state["requests"].append(request)
        return state["reply"](request)

    http = httpx.Client(transport=httpx.MockTransport(handle))
    app.dependency_overrides[get_generation_client] = lambda: http
    yield state
    http.close()
