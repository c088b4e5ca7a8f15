from typing import TYPE_CHECKING

from moderation_api.system.views import HealthView, InitDatabaseView, QueryView

if TYPE_CHECKING:
    from moderation_api.web.app import Application


def setup_routes(app: "Application"):
    app.router.add_view("/health", HealthView)
    app.router.add_view("/init", InitDatabaseView)
    app.router.add_view("/query", QueryView)
