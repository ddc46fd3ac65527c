# kvnotes/docs/spec.py
from apispec import APISpec
from apispec.ext.marshmallow import MarshmallowPlugin
from marshmallow import Schema, fields

from kvnotes.notes.schemas import NoteIn, NoteValue, PurgeIn, VIEWS, UPDATE_ACTIONS, DELETE_ACTIONS

class NoteOutDoc(Schema):
    key = fields.String(required=True)
    value = fields.Nested(NoteValue, required=True)

class SuccessSchema(Schema):
    success = fields.Boolean()
    key = fields.String()
    message = fields.String()

class ErrorBody(Schema):
    code = fields.String()
    message = fields.String()
    details = fields.Dict()

class ErrorSchema(Schema):
    error = fields.Nested(ErrorBody)

def _ref(name: str):
    return {"$ref": f"#/components/schemas/{name}"}

def _json(name: str):
    return {"application/json": {"schema": _ref(name)}}

def _query(name, required=False, enum=None):
    schema = {"type": "string"}
    if enum:
        schema["enum"] = list(enum)
    return {"in": "query", "name": name, "required": required, "schema": schema}

def _err(description):
    return {"description": description, "content": _json("Error")}

def build_spec():
    spec = APISpec(
        title="kvnotes API",
        version="1.0.0",
        openapi_version="3.0.3",
        info={"description": "Single-user notes over a key-value store"},
        plugins=[MarshmallowPlugin()],
    )

    # Mot de passe partagé envoyé en Bearer
    spec.components.security_scheme("bearerAuth", {"type": "http", "scheme": "bearer"})

    spec.components.schema("NoteIn", schema=NoteIn)
    spec.components.schema("NoteOut", schema=NoteOutDoc)
    spec.components.schema("Purge", schema=PurgeIn)
    spec.components.schema("Success", schema=SuccessSchema)
    spec.components.schema("Error", schema=ErrorSchema)

    secured = [{"bearerAuth": []}]
    unauthorized = _err("Missing or invalid bearer")

    spec.path(
        path="/api/notes",
        operations={
            "get": {
                "summary": "List notes of a view (most recent first), or fetch one by key",
                "security": secured,
                "parameters": [_query("view", enum=VIEWS), _query("key")],
                "responses": {
                    "200": {"description": "Array of NoteOut, or one NoteOut when key is given"},
                    "400": _err("Invalid view"),
                    "401": unauthorized,
                    "404": _err("Unknown key"),
                },
            },
            "post": {
                "summary": "Create note",
                "security": secured,
                "requestBody": {"required": True, "content": _json("NoteIn")},
                "responses": {
                    "200": {"description": "Created", "content": _json("Success")},
                    "400": _err("Missing title or content"),
                    "401": unauthorized,
                },
            },
            "put": {
                "summary": "Update (also un-trashes) or restore a note",
                "security": secured,
                "parameters": [_query("key", required=True), _query("action", enum=UPDATE_ACTIONS)],
                "requestBody": {"required": False, "content": _json("NoteIn")},
                "responses": {
                    "200": {"description": "OK", "content": _json("Success")},
                    "400": _err("Invalid action or body"),
                    "401": unauthorized,
                    "404": _err("Unknown key"),
                },
            },
            "delete": {
                "summary": "Move to trash, or delete permanently (password required)",
                "security": secured,
                "parameters": [_query("key", required=True), _query("action", enum=DELETE_ACTIONS)],
                "requestBody": {"required": False, "content": _json("Purge")},
                "responses": {
                    "200": {"description": "OK", "content": _json("Success")},
                    "400": _err("Invalid action or missing password"),
                    "401": unauthorized,
                    "403": _err("Incorrect password"),
                    "404": _err("Unknown key"),
                },
            },
        },
    )

    return spec.to_dict()
