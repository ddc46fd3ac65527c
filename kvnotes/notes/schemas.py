from marshmallow import EXCLUDE, Schema, fields, validate

VIEWS = ("active", "trash")
UPDATE_ACTIONS = ("update", "restore")
DELETE_ACTIONS = ("trash", "permanent")

class _Lenient(Schema):
    class Meta:
        unknown = EXCLUDE

class NoteIn(_Lenient):
    title = fields.String(required=True, validate=validate.Length(min=1))
    content = fields.String(required=True, validate=validate.Length(min=1))

class PurgeIn(_Lenient):
    password = fields.String(required=True, load_only=True)

# --- query string (?view=, ?key=, ?action=)
class ListArgs(_Lenient):
    view = fields.String(load_default="active", validate=validate.OneOf(VIEWS))
    key = fields.String(load_default=None, validate=validate.Length(min=1))

class UpdateArgs(_Lenient):
    key = fields.String(required=True, validate=validate.Length(min=1))
    action = fields.String(load_default="update", validate=validate.OneOf(UPDATE_ACTIONS))

class DeleteArgs(_Lenient):
    key = fields.String(required=True, validate=validate.Length(min=1))
    action = fields.String(load_default="trash", validate=validate.OneOf(DELETE_ACTIONS))

class NoteValue(Schema):
    title = fields.String(required=True)
    content = fields.String(required=True)
    in_trash = fields.Boolean(required=True)

class NoteOut(Schema):
    key = fields.String(required=True)
    value = fields.Method("get_value")

    def get_value(self, note):
        return NoteValue().dump(note.value())
