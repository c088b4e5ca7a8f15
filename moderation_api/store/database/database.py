import logging
import ssl
from typing import TYPE_CHECKING, Optional

from sqlalchemy import func, select
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    create_async_engine,
)
from sqlalchemy.orm import sessionmaker

from moderation_api.base.errors import STORE_ERRORS, store_error_message

if TYPE_CHECKING:
    from moderation_api.web.app import Application

logger = logging.getLogger(__name__)

DRIVER_NAME = "postgresql+asyncpg"


class Database:
    def __init__(self, app: "Application"):
        self.app = app
        self._engine: Optional[AsyncEngine] = None
        self.session: Optional[sessionmaker] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected")
        return self._engine

    @staticmethod
    def _build_url_to_connect(
        username: str,
        password: str,
        database: str,
        host: str = "localhost",
        port: int = 5432,
    ) -> str:
        return f"{DRIVER_NAME}://{username}:{password}@{host}:{port}/{database}"

    @staticmethod
    def _normalize_url(url: str) -> str:
        # postgres:// urls from hosting providers carry libpq-only query
        # options (sslmode and friends) that asyncpg rejects
        return make_url(url).set(drivername=DRIVER_NAME, query={}) \
            .render_as_string(hide_password=False)

    def _build_connect_args(self) -> dict:
        config = self.app.config.database
        connect_args = {
            "command_timeout": config.statement_timeout,
            "server_settings": {
                "statement_timeout": str(int(config.statement_timeout * 1000)),
            },
        }

        if config.ssl == "disable":
            connect_args["ssl"] = False
        elif config.ssl == "insecure":
            context = ssl.create_default_context()
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
            connect_args["ssl"] = context
        elif config.ssl == "verify":
            connect_args["ssl"] = ssl.create_default_context()
        else:
            raise ValueError(f"Unknown ssl mode: {config.ssl}")

        return connect_args

    def url_to_connect(self) -> str:
        config = self.app.config.database
        if config.url:
            return self._normalize_url(config.url)
        return self._build_url_to_connect(
            username=config.user,
            password=config.password,
            database=config.database,
            host=config.host,
            port=config.port,
        )

    async def connect(self, *args, **kwargs) -> None:
        self._engine = create_async_engine(
            self.url_to_connect(),
            echo=self.app.config.database.echo,
            future=True,
            connect_args=self._build_connect_args(),
        )
        self.session = sessionmaker(
            self._engine,
            expire_on_commit=False,
            future=True,
            class_=AsyncSession,
        )
        await self.ping()

    async def ping(self) -> bool:
        try:
            async with self.engine.connect() as connection:
                await connection.execute(select(func.now()))
        except STORE_ERRORS as e:
            logger.warning("Database connection failed: %s", store_error_message(e))
            return False

        logger.info("Database connected successfully")
        return True

    async def disconnect(self, *args, **kwargs) -> None:
        if self._engine:
            await self._engine.dispose()
            self._engine = None
