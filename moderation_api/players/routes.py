from typing import TYPE_CHECKING

from moderation_api.players.views import PlayerUpsertView, PlayerModerationsView

if TYPE_CHECKING:
    from moderation_api.web.app import Application


def setup_routes(app: "Application"):
    app.router.add_view("/players", PlayerUpsertView)
    app.router.add_view("/players/{user_id}/moderations", PlayerModerationsView)
