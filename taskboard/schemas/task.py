"""Task-related Marshmallow schemas."""

from datetime import timezone

from marshmallow import EXCLUDE, Schema, fields, validate

from taskboard.extensions import ma


_name_rules = [
    validate.Length(min=1, max=255),
    validate.Regexp(r"\s*\S", error="Name must not be blank."),
]


class StrictBool(fields.Boolean):
    """Boolean accepting only JSON true/false; 1, "1" and "true" are invalid."""

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, bool):
            raise self.make_error("invalid", input=value)
        return value


class UTCDateTime(fields.DateTime):
    """ISO timestamp that always carries an offset.

    SQLite hands back naive values for timezone-aware columns; they are
    stored in UTC, so the offset is attached on the way out.
    """

    def _serialize(self, value, attr, obj, **kwargs):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return super()._serialize(value, attr, obj, **kwargs)


class TaskSchema(ma.Schema):
    """Schema for task serialization."""

    id = fields.Int(dump_only=True)
    name = fields.Str(required=True)
    completed = fields.Bool()
    created_at = UTCDateTime(dump_only=True, format="iso", data_key="createdAt")
    updated_at = UTCDateTime(dump_only=True, format="iso", data_key="updatedAt")


class TaskCreateSchema(Schema):
    """Schema for task creation validation.

    Store-managed fields (id, timestamps) are not client-settable and are
    dropped from the payload rather than rejected.
    """

    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=_name_rules)
    completed = StrictBool(load_default=False)


class TaskUpdateSchema(Schema):
    """Schema for partial task updates."""

    class Meta:
        unknown = EXCLUDE

    name = fields.Str(validate=_name_rules)
    completed = StrictBool()
