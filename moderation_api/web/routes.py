from aiohttp.web_app import Application


def setup_routes(app: Application):
    from moderation_api.system.routes import setup_routes as setup_system_routes
    from moderation_api.players.routes import setup_routes as setup_player_routes
    from moderation_api.moderations.routes import setup_routes as setup_moderation_routes

    setup_system_routes(app)
    setup_player_routes(app)
    setup_moderation_routes(app)
