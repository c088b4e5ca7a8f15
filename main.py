from aiohttp.web import run_app as run_web_app

from moderation_api.commands import config_path
from moderation_api.web.app import setup_app


def main():
    application = setup_app(config_path=config_path())
    run_web_app(
        application,
        host=application.config.server.host,
        port=application.config.server.port,
    )


if __name__ == "__main__":
    main()
