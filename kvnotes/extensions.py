from flask import current_app
from flask_cors import CORS

from kvnotes.notes.repository import NoteRepository, NotesSettings, timestamp_key

cors = CORS()

EXTENSION_KEY = "kvnotes"

def init_notes(app, settings: NotesSettings, key_factory=timestamp_key) -> None:
    app.extensions[EXTENSION_KEY] = {"settings": settings, "key_factory": key_factory}

def get_settings() -> NotesSettings:
    return current_app.extensions[EXTENSION_KEY]["settings"]

def get_repository() -> NoteRepository:
    ext = current_app.extensions[EXTENSION_KEY]
    return NoteRepository(ext["settings"], key_factory=ext["key_factory"])
