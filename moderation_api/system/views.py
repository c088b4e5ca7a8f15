from aiohttp.web import json_response as aiohttp_json_response
from aiohttp_apispec import docs, request_schema, response_schema

from moderation_api.base.errors import ForbiddenError, UsageError
from moderation_api.web.app import View
from moderation_api.web.schemes import MessageResponseSchema
from moderation_api.web.utils import json_response, message_response, utc_timestamp
from moderation_api.system.schemes import (HealthResponseSchema,
                                           QueryRequestSchema,
                                           QueryResponseSchema)


class HealthView(View):
    @docs(tags=["system"], summary="Health check", description="Does not touch the database")
    @response_schema(HealthResponseSchema, 200)
    async def get(self):
        return aiohttp_json_response({"status": "OK", "timestamp": utc_timestamp()})


class InitDatabaseView(View):
    @docs(tags=["system"], summary="Initialize database",
          description="Creates tables and indexes that do not exist yet")
    @response_schema(MessageResponseSchema, 200)
    async def post(self):
        await self.store.system.init_schema()
        return message_response("Database initialized successfully")


class QueryView(View):
    @docs(tags=["system"], summary="Execute raw SQL",
          description="Runs an arbitrary statement with $1..$n parameters. "
                      "Disabled unless query.enabled is set")
    @request_schema(QueryRequestSchema)
    @response_schema(QueryResponseSchema, 200)
    async def post(self):
        if not self.config.query.enabled:
            raise ForbiddenError("Query endpoint is disabled")

        query = self.data.get("query")
        if not query:
            raise UsageError("Query is required")

        result = await self.store.system.execute_raw(query, self.data.get("params") or [])
        return json_response(data=result.rows, rowCount=result.row_count)
