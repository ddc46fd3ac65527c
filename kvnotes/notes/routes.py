from flask import Blueprint, request, jsonify

from kvnotes.common.utils import success
from kvnotes.extensions import get_repository
from kvnotes.notes.schemas import (
    DeleteArgs, ListArgs, NoteIn, NoteOut, PurgeIn, UpdateArgs,
)

bp = Blueprint("notes", __name__)

note_in = NoteIn()
purge_in = PurgeIn()
list_args = ListArgs()
update_args = UpdateArgs()
delete_args = DeleteArgs()
note_out = NoteOut()
note_out_many = NoteOut(many=True)

def _json_body() -> dict:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}

@bp.get("/notes")
def list_notes():
    args = list_args.load(request.args.to_dict())
    repo = get_repository()
    if args["key"]:
        return jsonify(note_out.dump(repo.get(args["key"]))), 200
    return jsonify(note_out_many.dump(repo.list(args["view"]))), 200

@bp.post("/notes")
def create_note():
    payload = _json_body()
    data = note_in.load(payload)
    key = get_repository().create(data["title"], data["content"])
    return success(key=key)

@bp.put("/notes")
def update_note():
    args = update_args.load(request.args.to_dict())
    repo = get_repository()

    if args["action"] == "restore":
        repo.restore(args["key"])
        return success()

    # le repository vérifie l'existence (404) avant le corps (400)
    payload = _json_body()
    repo.update(args["key"], payload.get("title"), payload.get("content"))
    return success()

@bp.delete("/notes")
def delete_note():
    args = delete_args.load(request.args.to_dict())
    repo = get_repository()

    if args["action"] == "trash":
        repo.trash(args["key"])
        return success(message="Moved to trash")

    payload = _json_body()
    data = purge_in.load(payload)
    repo.purge(args["key"], data["password"])
    return success(message="Permanently deleted")
