from marshmallow import Schema, fields


class OkResponseSchema(Schema):
    success = fields.Bool()
    data = fields.Dict()


class MessageResponseSchema(Schema):
    success = fields.Bool()
    message = fields.Str()
