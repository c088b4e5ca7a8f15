import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from moderation_api.web.app import Application

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler = None


def setup_logging(app: "Application") -> None:
    global _handler
    root = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(_handler)

    root.setLevel(app.config.server.log_level.upper())
    app.logger = logging.getLogger("moderation_api")
