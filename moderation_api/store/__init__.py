from typing import TYPE_CHECKING

from moderation_api.store.database import Database

if TYPE_CHECKING:
    from moderation_api.web.app import Application


class Store:
    def __init__(self, app: "Application", *args, **kwargs):
        from moderation_api.players.accessor import PlayerAccessor
        from moderation_api.moderations.accessor import ModerationAccessor
        from moderation_api.system.accessor import SystemAccessor

        self.players = PlayerAccessor(app)
        self.moderations = ModerationAccessor(app)
        self.system = SystemAccessor(app)


def setup_store(app: "Application"):
    app.database = Database(app)
    app.on_startup.append(app.database.connect)
    app.on_cleanup.append(app.database.disconnect)
    app.store = Store(app)
