from typing import Optional

from aiohttp.web import (
    Application as AiohttpApplication,
    Request as AiohttpRequest,
    View as AiohttpView,
)
from aiohttp_apispec import setup_aiohttp_apispec

from moderation_api.store import Store, setup_store
from moderation_api.store.database import Database
from moderation_api.web.config import Config, setup_config
from moderation_api.web.logger import setup_logging
from moderation_api.web.mw import setup_middlewares
from moderation_api.web.routes import setup_routes


class Application(AiohttpApplication):
    config: Optional[Config] = None
    store: Optional[Store] = None
    database: Optional[Database] = None


class Request(AiohttpRequest):
    @property
    def app(self) -> Application:
        return super().app


class View(AiohttpView):
    @property
    def request(self) -> Request:
        return super().request

    @property
    def config(self) -> Config:
        return self.request.app.config

    @property
    def store(self) -> Store:
        return self.request.app.store

    @property
    def data(self) -> dict:
        return self.request.get("data", {})


def setup_app(config_path: Optional[str] = None, config: Optional[Config] = None) -> Application:
    app = Application()

    setup_config(app, config_path=config_path, config=config)
    setup_logging(app)
    setup_routes(app)
    setup_aiohttp_apispec(
        app,
        title="Moderation API",
        url="/docs/json",
        swagger_path="/docs",
    )
    setup_middlewares(app)
    setup_store(app)

    return app
