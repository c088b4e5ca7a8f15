from marshmallow import EXCLUDE, Schema, fields


class HealthResponseSchema(Schema):
    status = fields.Str()
    timestamp = fields.Str()


class QueryRequestSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    query = fields.Str(load_default=None, allow_none=True)
    params = fields.List(fields.Raw(allow_none=True), load_default=list, allow_none=True)


class QueryResponseSchema(Schema):
    success = fields.Bool()
    data = fields.List(fields.Dict())
    rowCount = fields.Int(allow_none=True)
