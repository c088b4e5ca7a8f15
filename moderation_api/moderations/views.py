from aiohttp_apispec import docs, match_info_schema, request_schema, response_schema

from moderation_api.web.app import View
from moderation_api.web.schemes import MessageResponseSchema
from moderation_api.web.utils import json_response, message_response
from moderation_api.moderations.moderation_dataclasses import NewModeration
from moderation_api.moderations.schemes import (ActiveModerationsSchema,
                                                ListModerationsResponseSchema,
                                                ModerationRequestSchema,
                                                ModerationResponseSchema,
                                                ModerationSchema,
                                                StatisticsResponseSchema,
                                                StatisticsSchema)


class ModerationCreateView(View):
    @docs(tags=["moderations"], summary="Create moderation",
          description="Records a ban, warning or kick; expires_at is set when duration_seconds > 0")
    @request_schema(ModerationRequestSchema)
    @response_schema(ModerationResponseSchema, 200)
    async def post(self):
        moderation = await self.store.moderations.create_moderation(
            NewModeration(
                user_id=self.data["user_id"],
                moderator_id=self.data["moderator_id"],
                moderator_name=self.data["moderator_name"],
                type=self.data["type"],
                reason=self.data["reason"],
                evidence=self.data.get("evidence"),
                duration_seconds=self.data.get("duration_seconds") or 0,
            )
        )
        return json_response(data=ModerationSchema().dump(moderation))


class ActiveModerationsView(View):
    @docs(tags=["moderations"], summary="Get active moderations",
          description="Moderations of the given type whose is_active flag is still set")
    @match_info_schema(ActiveModerationsSchema)
    @response_schema(ListModerationsResponseSchema, 200)
    async def get(self):
        moderations = await self.store.moderations.get_active_moderations(
            self.data["user_id"], self.data["type"]
        )
        return json_response(data=ModerationSchema(many=True).dump(moderations))


class CleanupModerationsView(View):
    @docs(tags=["moderations"], summary="Deactivate expired moderations")
    @response_schema(MessageResponseSchema, 200)
    async def post(self):
        count = await self.store.moderations.cleanup_expired()
        return message_response(f"Marked {count} expired moderations as inactive")


class StatisticsView(View):
    @docs(tags=["moderations"], summary="Get moderation statistics")
    @response_schema(StatisticsResponseSchema, 200)
    async def get(self):
        statistics = await self.store.moderations.get_statistics()
        return json_response(data=StatisticsSchema().dump(statistics))
