import json
from datetime import date, datetime, time, timedelta, timezone
from functools import partial
from typing import Any, Mapping, Optional

from aiohttp.web import Response, json_response as aiohttp_json_response


def _default(value: Any) -> Any:
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, (bytes, memoryview)):
        return bytes(value).hex()
    # UUID, Decimal and driver-specific types
    return str(value)


dumps = partial(json.dumps, default=_default)


def utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def json_response(data: Any = None, status: int = 200, **extra: Any) -> Response:
    payload = {"success": True}
    if data is not None:
        payload["data"] = data
    payload.update(extra)
    return aiohttp_json_response(payload, status=status, dumps=dumps)


def message_response(message: str) -> Response:
    return json_response(message=message)


def error_json_response(http_status: int, message: str, details: Optional[Any] = None,
                        headers: Optional[Mapping[str, str]] = None) -> Response:
    payload = {"success": False, "error": message}
    if details:
        payload["details"] = details
    return aiohttp_json_response(payload, status=http_status, headers=headers, dumps=dumps)
