from marshmallow import EXCLUDE, Schema, fields

from moderation_api.web.schemes import OkResponseSchema


class ModerationSchema(Schema):
    id = fields.UUID()
    user_id = fields.Int()
    moderator_id = fields.Int()
    moderator_name = fields.Str()
    type = fields.Str()
    reason = fields.Str()
    evidence = fields.List(fields.Str(), allow_none=True)
    duration_seconds = fields.Int(allow_none=True)
    issued_at = fields.DateTime()
    expires_at = fields.DateTime(allow_none=True)
    is_active = fields.Bool()
    acknowledged = fields.Bool()
    discord_message_id = fields.Str(allow_none=True)
    player_username = fields.Str(allow_none=True)


class ModerationRequestSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    user_id = fields.Int(required=True)
    moderator_id = fields.Int(required=True)
    moderator_name = fields.Str(required=True)
    # membership in ban/warning/kick is enforced by the table check constraint
    type = fields.Str(required=True)
    reason = fields.Str(required=True)
    evidence = fields.List(fields.Str(), load_default=None, allow_none=True)
    duration_seconds = fields.Int(load_default=0, allow_none=True)


class ActiveModerationsSchema(Schema):
    user_id = fields.Int(required=True)
    type = fields.Str(required=True)


class StatisticsSchema(Schema):
    total_moderations = fields.Int()
    total_bans = fields.Int()
    total_warnings = fields.Int()
    total_kicks = fields.Int()
    active_moderations = fields.Int()
    active_bans = fields.Int()
    active_warnings = fields.Int()
    this_week_moderations = fields.Int()


class ModerationResponseSchema(OkResponseSchema):
    data = fields.Nested(ModerationSchema)


class ListModerationsResponseSchema(OkResponseSchema):
    data = fields.Nested(ModerationSchema, many=True)


class StatisticsResponseSchema(OkResponseSchema):
    data = fields.Nested(StatisticsSchema)
