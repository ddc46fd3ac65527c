"""
Note Repository.

Translates note operations (create, list by view, update, trash,
restore, purge) into key-value store calls. Owns the key scheme: a note's
key is its creation timestamp, so sorting keys sorts notes by age.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from kvnotes.common.credentials import verify_secret
from kvnotes.common.errors import AuthError, ConfigurationError, NotFoundError, ValidationError
from kvnotes.notes.models import Note, decode_note
from kvnotes.notes.schemas import VIEWS
from kvnotes.store.base import KeyValueStore

log = logging.getLogger("kvnotes.notes")


def timestamp_key() -> str:
    """Current UTC time as ``2024-01-01T00:00:00.000Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class NotesSettings:
    """Store handle and shared secret, resolved once at startup."""

    store: KeyValueStore | None
    secret: str | None

    def check(self) -> None:
        if self.store is None:
            raise ConfigurationError("Note store is not configured (NOTE_STORE_URL).")
        if not self.secret:
            raise ConfigurationError("Shared secret is not configured (AUTH_PASS).")


class NoteRepository:
    """
    Repository for notes.

    Every mutation is one read (where needed) plus one write or delete;
    no locking, the last write wins.
    """

    def __init__(
        self,
        settings: NotesSettings,
        key_factory: Callable[[], str] = timestamp_key,
    ) -> None:
        settings.check()
        self.store = settings.store
        self._secret = settings.secret
        self.key_factory = key_factory

    # --- lecture

    def get(self, key: str) -> Note:
        raw = self.store.get(key)
        if raw is None:
            raise NotFoundError("Note not found.", details={"key": key})
        return decode_note(key, raw)

    def list(self, view: str = "active") -> list[Note]:
        """
        List the notes of one view, most recent first.

        Args:
            view: "active" or "trash"

        Returns:
            Notes whose in_trash flag matches the view, sorted by key descending
        """
        if view not in VIEWS:
            raise ValidationError("Invalid view.", details={"view": view})
        want_trash = view == "trash"

        notes = []
        for key in self.store.list_keys():
            raw = self.store.get(key)
            if raw is None:
                # supprimée entre list_keys() et get()
                continue
            note = decode_note(key, raw)
            if note.in_trash == want_trash:
                notes.append(note)

        notes.sort(key=lambda n: n.key, reverse=True)
        return notes

    # --- écriture

    def create(self, title: str, content: str) -> str:
        _require_text(title, content)
        key = self.key_factory()
        note = Note(key=key, title=title, content=content, in_trash=False)
        self.store.put(key, note.to_json())
        log.info("note_created", extra={"key": key})
        return key

    def update(self, key: str, title: str, content: str) -> None:
        """Overwrite title and content. Also moves a trashed note back to active."""
        note = self.get(key)
        _require_text(title, content)
        note.title = title
        note.content = content
        note.in_trash = False
        self.store.put(key, note.to_json())
        log.info("note_updated", extra={"key": key})

    def trash(self, key: str) -> None:
        self._set_trash(key, True)
        log.info("note_trashed", extra={"key": key})

    def restore(self, key: str) -> None:
        self._set_trash(key, False)
        log.info("note_restored", extra={"key": key})

    def purge(self, key: str, supplied_secret: str | None) -> None:
        """Delete a note for good. Requires the password a second time."""
        if not verify_secret(supplied_secret, self._secret):
            log.warning("note_purge_denied", extra={"key": key})
            raise AuthError("Incorrect password. Deletion failed.", 403, "forbidden")
        self.store.delete(key)
        log.info("note_purged", extra={"key": key})

    def _set_trash(self, key: str, in_trash: bool) -> None:
        note = self.get(key)
        note.in_trash = in_trash
        self.store.put(key, note.to_json())


def _require_text(title, content) -> None:
    missing = [name for name, v in (("title", title), ("content", content)) if not isinstance(v, str) or not v]
    if missing:
        raise ValidationError(
            "Title and content are required.",
            details={name: ["Missing data for required field."] for name in missing},
        )
