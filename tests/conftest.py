"""
Shared fixtures.

Unit tests run the whole aiohttp application with the accessors replaced by
AsyncMock objects, so no database is needed. Integration tests build their
own application against ``TEST_DATABASE_URL``.
"""

import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest

from moderation_api.moderations.accessor import ModerationAccessor
from moderation_api.moderations.moderation_dataclasses import Moderation, Statistics
from moderation_api.players.accessor import PlayerAccessor
from moderation_api.players.player_dataclasses import Player
from moderation_api.store.database import Database
from moderation_api.system.accessor import SystemAccessor
from moderation_api.web.app import setup_app
from moderation_api.web.config import Config


ISSUED_AT = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def config():
    config = Config()
    config.database.ssl = "disable"
    return config


@pytest.fixture
def app(config, monkeypatch):
    monkeypatch.setattr(Database, "connect", AsyncMock())
    monkeypatch.setattr(Database, "disconnect", AsyncMock())

    application = setup_app(config=config)
    application.store.players = AsyncMock(spec=PlayerAccessor)
    application.store.moderations = AsyncMock(spec=ModerationAccessor)
    application.store.system = AsyncMock(spec=SystemAccessor)
    return application


@pytest.fixture
def store(app):
    return app.store


@pytest.fixture
async def client(app, aiohttp_client):
    return await aiohttp_client(app)


@pytest.fixture
def player():
    return Player(user_id=123456789012345678, username="griefer",
                  join_date=ISSUED_AT, last_seen=ISSUED_AT)


def make_moderation(**overrides) -> Moderation:
    values = dict(
        id=uuid.uuid4(),
        user_id=123456789012345678,
        moderator_id=42,
        moderator_name="mod",
        type="ban",
        reason="griefing",
        evidence=["https://example.com/1.png"],
        duration_seconds=3600,
        issued_at=ISSUED_AT,
        expires_at=ISSUED_AT + timedelta(hours=1),
        is_active=True,
        acknowledged=False,
        discord_message_id=None,
        player_username="griefer",
    )
    values.update(overrides)
    return Moderation(**values)


@pytest.fixture
def moderation():
    return make_moderation()


@pytest.fixture
def statistics():
    return Statistics(total_moderations=6, total_bans=3, total_warnings=2, total_kicks=1,
                      active_moderations=4, active_bans=2, active_warnings=2,
                      this_week_moderations=5)


@pytest.fixture
def moderation_factory():
    return make_moderation
