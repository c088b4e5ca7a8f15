import asyncio
import logging
import os
from typing import Awaitable, Callable, Optional, TypeVar

from dotenv import load_dotenv

from moderation_api.base.errors import StoreError
from moderation_api.store import Store
from moderation_api.web.app import setup_app

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.realpath(__file__))), "etc", "config.yaml"
)


def config_path() -> str:
    load_dotenv()
    return os.getenv("CONFIG_PATH", DEFAULT_CONFIG_PATH)


async def with_store(operation: Callable[[Store], Awaitable[T]],
                     path: Optional[str] = None) -> T:
    app = setup_app(config_path=path or config_path())
    await app.database.connect()
    try:
        return await operation(app.store)
    finally:
        await app.database.disconnect()


def run_init_db() -> None:
    try:
        asyncio.run(with_store(lambda store: store.system.init_schema()))
    except StoreError as e:
        raise SystemExit(f"Database initialization error: {e.message}")
    print("Database initialized successfully")


def run_cleanup() -> None:
    try:
        count = asyncio.run(with_store(lambda store: store.moderations.cleanup_expired()))
    except StoreError as e:
        raise SystemExit(f"Cleanup error: {e.message}")
    print(f"Marked {count} expired moderations as inactive")
