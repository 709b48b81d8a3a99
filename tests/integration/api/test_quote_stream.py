"""Integration tests for the quote list WebSocket stream

Runs the app under starlette's TestClient so HTTP requests and the
WebSocket share one event loop, like a single server process.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from sqlmodel import Session, SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from starlette.testclient import TestClient
from starlette.websockets import WebSocketDisconnect

from config import ApplicationConfig
from src.api.app import create_app
from src.depends import get_session
from src.domain.company import Company
from src.domain.user import User


@pytest.fixture
def seeded_ids(tmp_path):
    """Schema and tenants written through a plain synchronous engine"""
    path = tmp_path / "quotes_stream.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    SQLModel.metadata.create_all(sync_engine)

    with Session(sync_engine) as session:
        kpmg = Company(name="KPMG")
        pwc = Company(name="PwC")
        session.add(kpmg)
        session.add(pwc)
        session.flush()
        accountant = User(company_id=kpmg.id, email="accountant@kpmg.com")
        colleague = User(company_id=kpmg.id, email="manager@kpmg.com")
        eavesdropper = User(company_id=pwc.id, email="eavesdropper@pwc.com")
        session.add_all([accountant, colleague, eavesdropper])
        session.commit()
        ids = {
            "db_url": f"sqlite+aiosqlite:///{path}",
            "kpmg": kpmg.id,
            "accountant": accountant.id,
            "colleague": colleague.id,
            "eavesdropper": eavesdropper.id,
        }

    sync_engine.dispose()
    return ids


@pytest.fixture
def stream_client(seeded_ids):
    app = create_app(ApplicationConfig)
    # NullPool: connections are opened on the TestClient's own event loop
    engine = create_async_engine(seeded_ids["db_url"], poolclass=NullPool)
    factory = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)

    async def override_get_session():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session

    with TestClient(app) as client:
        yield client


def as_user(user_id):
    return {"X-User-Id": str(user_id)}


class TestQuoteStream:
    def test_colleague_sees_quote_list_changes(self, stream_client, seeded_ids):
        with stream_client.websocket_connect(
            "/quotes/stream", headers=as_user(seeded_ids["colleague"])
        ) as ws:
            response = stream_client.post(
                "/quotes", json={"name": "First quote"}, headers=as_user(seeded_ids["accountant"])
            )
            quote_id = response.json()["id"]

            created = ws.receive_json()
            assert created["event"] == "created"
            assert created["quote_id"] == quote_id
            assert created["quote"]["name"] == "First quote"

            stream_client.patch(
                f"/quotes/{quote_id}", json={"name": "Renamed"}, headers=as_user(seeded_ids["accountant"])
            )
            updated = ws.receive_json()
            assert updated["event"] == "updated"
            assert updated["quote"]["name"] == "Renamed"

            stream_client.delete(f"/quotes/{quote_id}", headers=as_user(seeded_ids["accountant"]))
            assert ws.receive_json() == {"event": "destroyed", "quote_id": quote_id}

    def test_subscription_released_on_disconnect(self, stream_client, seeded_ids):
        broadcaster = stream_client.app.state.broadcaster

        with stream_client.websocket_connect(
            "/quotes/stream", headers=as_user(seeded_ids["colleague"])
        ):
            assert broadcaster.subscriber_count(seeded_ids["kpmg"]) == 1

        assert broadcaster.subscriber_count(seeded_ids["kpmg"]) == 0

    def test_other_company_stream_stays_quiet(self, stream_client, seeded_ids):
        with stream_client.websocket_connect(
            "/quotes/stream", headers=as_user(seeded_ids["eavesdropper"])
        ) as outsider, stream_client.websocket_connect(
            "/quotes/stream", headers=as_user(seeded_ids["colleague"])
        ) as insider:
            stream_client.post(
                "/quotes", json={"name": "Secret"}, headers=as_user(seeded_ids["accountant"])
            )
            stream_client.post(
                "/quotes", json={"name": "Public"}, headers=as_user(seeded_ids["eavesdropper"])
            )

            assert insider.receive_json()["quote"]["name"] == "Secret"
            # The first thing the outsider sees is its own company's quote
            assert outsider.receive_json()["quote"]["name"] == "Public"

    def test_stream_requires_actor(self, stream_client):
        with pytest.raises(WebSocketDisconnect):
            with stream_client.websocket_connect("/quotes/stream"):
                pass
