from aiohttp_apispec import docs, match_info_schema, request_schema, response_schema

from moderation_api.web.app import View
from moderation_api.web.utils import json_response
from moderation_api.players.schemes import (PlayerRequestSchema,
                                            PlayerResponseSchema,
                                            PlayerSchema,
                                            PlayerUserIdSchema)
from moderation_api.moderations.schemes import ModerationSchema, ListModerationsResponseSchema


class PlayerUpsertView(View):
    @docs(tags=["players"], summary="Create or update player",
          description="Inserts the player or refreshes username and last_seen")
    @request_schema(PlayerRequestSchema)
    @response_schema(PlayerResponseSchema, 200)
    async def post(self):
        player = await self.store.players.upsert_player(self.data["user_id"],
                                                        self.data["username"])
        return json_response(data=PlayerSchema().dump(player))


class PlayerModerationsView(View):
    @docs(tags=["players"], summary="Get player moderations",
          description="All moderations of the player, most recent first")
    @match_info_schema(PlayerUserIdSchema)
    @response_schema(ListModerationsResponseSchema, 200)
    async def get(self):
        moderations = await self.store.moderations.get_player_moderations(self.data["user_id"])
        return json_response(data=ModerationSchema(many=True).dump(moderations))
