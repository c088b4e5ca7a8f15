import asyncio
import json
import logging
from typing import TYPE_CHECKING

from aiohttp import web
from aiohttp.abc import Request
from aiohttp.web_exceptions import HTTPException, HTTPUnprocessableEntity
from aiohttp_apispec import validation_middleware

from moderation_api.base.errors import ApiError, StoreError
from moderation_api.web.utils import error_json_response

if TYPE_CHECKING:
    from .app import Application

logger = logging.getLogger(__name__)

# replaced by the JSON error body
SKIPPED_HEADERS = {"content-type", "content-length"}

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def _validation_details(exc: HTTPUnprocessableEntity):
    try:
        return json.loads(exc.text)
    except (TypeError, ValueError):
        return exc.text


@web.middleware
async def cors_mw(request: Request, handler):
    if request.method == "OPTIONS" and "Access-Control-Request-Method" in request.headers:
        response = web.Response(status=204)
    else:
        response = await handler(request)
    response.headers.update(CORS_HEADERS)
    return response


@web.middleware
async def ex_mw(request: Request, handler):
    try:
        return await handler(request)
    except ApiError as e:
        logger.error("%s %s failed: %s", request.method, request.path, e.message)
        return error_json_response(http_status=e.status, message=e.message, details=e.data)
    except HTTPUnprocessableEntity as e:
        logger.warning("%s %s rejected: %s", request.method, request.path, e.text)
        return error_json_response(http_status=400, message="Invalid request data",
                                   details=_validation_details(e))
    except HTTPException as e:
        if e.status < 400:
            raise
        headers = {name: value for name, value in e.headers.items()
                   if name.lower() not in SKIPPED_HEADERS}
        return error_json_response(http_status=e.status, message=e.reason, headers=headers)
    except Exception as e:
        logger.exception("%s %s crashed", request.method, request.path)
        return error_json_response(http_status=500, message=str(e))


@web.middleware
async def timeout_mw(request: Request, handler):
    timeout = request.app.config.server.request_timeout
    try:
        return await asyncio.wait_for(handler(request), timeout=timeout)
    except asyncio.TimeoutError as e:
        raise StoreError("Request timed out") from e


def setup_middlewares(app: "Application") -> None:
    app.middlewares.append(cors_mw)
    app.middlewares.append(ex_mw)
    app.middlewares.append(timeout_mw)
    app.middlewares.append(validation_middleware)
