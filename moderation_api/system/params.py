"""Coercion of JSON query parameters to the types postgres inferred for them.

asyncpg encodes arguments in binary form and insists on matching Python
types, while callers of the passthrough endpoint send whatever JSON gives
them (``"123"`` for a bigint, ``5`` for a varchar).
"""

import json
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Sequence
from uuid import UUID

INTEGER_TYPES = {"int2", "int4", "int8", "oid"}
FLOAT_TYPES = {"float4", "float8"}
TEXT_TYPES = {"text", "varchar", "bpchar", "char", "name"}
JSON_TYPES = {"json", "jsonb"}
TIMESTAMP_TYPES = {"timestamp", "timestamptz"}
TRUE_STRINGS = {"t", "true", "y", "yes", "on", "1"}


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def coerce_param(type_name: str, value: Any) -> Any:
    if value is None:
        return None

    if type_name in INTEGER_TYPES and not isinstance(value, int):
        return int(value)
    if type_name in FLOAT_TYPES and not isinstance(value, float):
        return float(value)
    if type_name == "numeric" and not isinstance(value, Decimal):
        return Decimal(str(value))
    if type_name == "bool" and not isinstance(value, bool):
        return str(value).strip().lower() in TRUE_STRINGS
    if type_name in TEXT_TYPES and not isinstance(value, str):
        return _to_text(value)
    if type_name in JSON_TYPES and not isinstance(value, str):
        return json.dumps(value)
    if type_name == "uuid" and isinstance(value, str):
        return UUID(value)
    if type_name in TIMESTAMP_TYPES and isinstance(value, str):
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    if type_name == "date" and isinstance(value, str):
        return date.fromisoformat(value)
    if type_name.startswith("_") and isinstance(value, list):
        return [coerce_param(type_name[1:], item) for item in value]

    return value


def coerce_params(parameter_types: Sequence[Any], params: Sequence[Any]) -> list:
    """Coerce ``params`` positionally; ``parameter_types`` are asyncpg ``Type`` records."""
    return [
        coerce_param(parameter_type.name, value)
        for parameter_type, value in zip(parameter_types, params)
    ] + list(params[len(parameter_types):])
