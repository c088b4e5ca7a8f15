"""
Passthrough query execution against a fake asyncpg connection, and the
coercion of JSON parameters to the types postgres inferred.
"""

from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
from asyncpg.exceptions import PostgresSyntaxError

from moderation_api.base.errors import StoreError
from moderation_api.system.accessor import SystemAccessor
from moderation_api.system.params import coerce_param, coerce_params


class FakeConnection:
    def __init__(self, driver_connection):
        self.driver_connection = driver_connection

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    async def get_raw_connection(self):
        return SimpleNamespace(driver_connection=self.driver_connection)


def pg_type(name):
    return SimpleNamespace(name=name)


@pytest.fixture
def driver_connection():
    return AsyncMock()


@pytest.fixture
def accessor(driver_connection):
    engine = SimpleNamespace(connect=lambda: FakeConnection(driver_connection))
    app = SimpleNamespace(database=SimpleNamespace(engine=engine))
    return SystemAccessor(app)


def prepared(parameter_types=(), records=(), status="SELECT 0"):
    statement = MagicMock()
    statement.get_parameters.return_value = tuple(pg_type(name) for name in parameter_types)
    statement.fetch = AsyncMock(return_value=list(records))
    statement.get_statusmsg.return_value = status
    return statement


class TestExecuteRaw:
    async def test_rows_and_count(self, accessor, driver_connection):
        driver_connection.prepare.return_value = prepared(
            ["int8"], records=[{"user_id": 1, "username": "alice"}], status="SELECT 1"
        )

        result = await accessor.execute_raw("SELECT * FROM players WHERE user_id = $1", [1])
        assert result.rows == [{"user_id": 1, "username": "alice"}]
        assert result.row_count == 1

    async def test_multi_statement_script_runs_unprepared(self, accessor, driver_connection):
        script = "CREATE TABLE a (x int); CREATE TABLE b (x int)"
        driver_connection.prepare.side_effect = PostgresSyntaxError(
            "cannot insert multiple commands into a prepared statement"
        )
        driver_connection.execute.return_value = "CREATE TABLE"

        result = await accessor.execute_raw(script, [])
        assert result.rows == []
        assert result.row_count is None
        driver_connection.execute.assert_awaited_once_with(script)

    async def test_multi_statement_script_with_params_fails(self, accessor, driver_connection):
        driver_connection.prepare.side_effect = PostgresSyntaxError(
            "cannot insert multiple commands into a prepared statement"
        )

        with pytest.raises(StoreError) as info:
            await accessor.execute_raw("SELECT $1; SELECT 2", [1])
        assert "multiple commands" in info.value.message
        driver_connection.execute.assert_not_called()

    async def test_other_syntax_errors_are_store_errors(self, accessor, driver_connection):
        driver_connection.prepare.side_effect = PostgresSyntaxError('syntax error at or near "SELEC"')

        with pytest.raises(StoreError) as info:
            await accessor.execute_raw("SELEC 1", [])
        assert info.value.message == 'syntax error at or near "SELEC"'
        driver_connection.execute.assert_not_called()

    async def test_string_parameter_for_bigint(self, accessor, driver_connection):
        statement = prepared(["int8", "varchar"], status="UPDATE 1")
        driver_connection.prepare.return_value = statement

        result = await accessor.execute_raw(
            "UPDATE players SET username = $2 WHERE user_id = $1", ["123", 5]
        )
        statement.fetch.assert_awaited_once_with(123, "5")
        assert result.row_count == 1

    async def test_unconvertible_parameter(self, accessor, driver_connection):
        driver_connection.prepare.return_value = prepared(["int8"])

        with pytest.raises(StoreError) as info:
            await accessor.execute_raw("SELECT $1::bigint", ["abc"])
        assert "invalid input for query argument" in info.value.message


class TestCoerceParam:
    @pytest.mark.parametrize("type_name, value, expected", [
        ("int8", "123456789012345678", 123456789012345678),
        ("int4", 7, 7),
        ("float8", "1.5", 1.5),
        ("numeric", 2, Decimal("2")),
        ("bool", "true", True),
        ("bool", "f", False),
        ("text", 5, "5"),
        ("varchar", True, "true"),
        ("jsonb", {"a": 1}, '{"a": 1}'),
        ("_text", ["a", 1], ["a", "1"]),
        ("_int8", ["1", 2], [1, 2]),
    ])
    def test_coercion(self, type_name, value, expected):
        assert coerce_param(type_name, value) == expected

    def test_none_stays_none(self):
        assert coerce_param("int8", None) is None

    def test_uuid(self):
        value = "3f2504e0-4f89-11d3-9a0c-0305e82c3301"
        assert coerce_param("uuid", value) == UUID(value)

    def test_timestamp_with_zulu_suffix(self):
        assert coerce_param("timestamptz", "2024-05-01T12:00:00Z") == \
            datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    def test_unknown_type_is_untouched(self):
        value = object()
        assert coerce_param("point", value) is value

    def test_positional(self):
        assert coerce_params([pg_type("int8"), pg_type("text")], ["1", 2]) == [1, "2"]

    def test_surplus_params_are_passed_on(self):
        assert coerce_params([pg_type("int8")], ["1", "extra"]) == [1, "extra"]
