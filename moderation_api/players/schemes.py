from marshmallow import EXCLUDE, Schema, fields

from moderation_api.web.schemes import OkResponseSchema


class PlayerSchema(Schema):
    user_id = fields.Int()
    username = fields.Str()
    join_date = fields.DateTime()
    last_seen = fields.DateTime()


class PlayerRequestSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    user_id = fields.Int(required=True)
    username = fields.Str(required=True)


class PlayerUserIdSchema(Schema):
    user_id = fields.Int(required=True)


class PlayerResponseSchema(OkResponseSchema):
    data = fields.Nested(PlayerSchema)
