from typing import TYPE_CHECKING

from moderation_api.moderations.views import (ActiveModerationsView,
                                              CleanupModerationsView,
                                              ModerationCreateView,
                                              StatisticsView)

if TYPE_CHECKING:
    from moderation_api.web.app import Application


def setup_routes(app: "Application"):
    app.router.add_view("/moderations", ModerationCreateView)
    app.router.add_view("/moderations/cleanup", CleanupModerationsView)
    app.router.add_view("/moderations/active/{user_id}/{type}", ActiveModerationsView)
    app.router.add_view("/statistics", StatisticsView)
