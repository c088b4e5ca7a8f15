import functools
from typing import TYPE_CHECKING

from moderation_api.base.errors import STORE_ERRORS, StoreError

if TYPE_CHECKING:
    from moderation_api.web.app import Application


def translate_store_errors(method):
    @functools.wraps(method)
    async def wrapper(*args, **kwargs):
        try:
            return await method(*args, **kwargs)
        except STORE_ERRORS as e:
            raise StoreError.from_exception(e) from e

    return wrapper


class BaseAccessor:
    def __init__(self, app: "Application", *args, **kwargs):
        self.app = app
