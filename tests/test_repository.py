# tests/test_repository.py
import json
from datetime import datetime

import pytest

from kvnotes.common.errors import AuthError, ConfigurationError, NotFoundError, ValidationError
from kvnotes.notes.models import LEGACY_TITLE, decode_note
from kvnotes.notes.repository import NoteRepository, NotesSettings, timestamp_key
from kvnotes.store import MemoryStore

def test_create_validates_and_returns_timestamp_key():
    repo = NoteRepository(NotesSettings(store=MemoryStore(), secret="s"))
    with pytest.raises(ValidationError):
        repo.create("", "x")
    with pytest.raises(ValidationError):
        repo.create("x", "")

    key = repo.create("T", "C")
    assert key.endswith("Z")
    parsed = datetime.fromisoformat(key.replace("Z", "+00:00"))
    assert parsed.tzinfo is not None
    assert json.loads(repo.store.get(key)) == {"title": "T", "content": "C", "in_trash": False}

def test_timestamp_key_format():
    key = timestamp_key()
    # 2024-01-01T00:00:00.000Z
    assert len(key) == 24
    assert key[10] == "T" and key[19] == "."

def test_list_filters_and_orders(repo):
    k1 = repo.create("A", "a")
    k2 = repo.create("B", "b")
    k3 = repo.create("C", "c")
    repo.trash(k2)

    assert [n.key for n in repo.list("active")] == [k3, k1]
    assert [n.key for n in repo.list("trash")] == [k2]
    with pytest.raises(ValidationError):
        repo.list("archived")

def test_list_orders_iso_keys_descending(store, repo):
    store.put("2024-01-01T00:00:00.000Z", json.dumps({"title": "old", "content": "x", "in_trash": False}))
    store.put("2024-01-02T00:00:00.000Z", json.dumps({"title": "new", "content": "y", "in_trash": False}))
    assert [n.key for n in repo.list()] == ["2024-01-02T00:00:00.000Z", "2024-01-01T00:00:00.000Z"]

def test_trash_restore_keeps_content(repo):
    key = repo.create("Title", "body\n\twith tabs ")
    repo.trash(key)
    assert repo.get(key).in_trash is True
    repo.restore(key)
    note = repo.get(key)
    assert (note.title, note.content, note.in_trash) == ("Title", "body\n\twith tabs ", False)

def test_update_untrashes(repo):
    key = repo.create("T", "C")
    repo.trash(key)
    repo.update(key, "T2", "C2")
    assert [n.key for n in repo.list("active")] == [key]
    assert repo.list("trash") == []

def test_missing_key_raises_not_found(repo):
    for op in (repo.get, repo.trash, repo.restore):
        with pytest.raises(NotFoundError):
            op("nope")
    with pytest.raises(NotFoundError):
        repo.update("nope", "T", "C")

def test_purge_requires_matching_secret(repo):
    key = repo.create("T", "C")
    with pytest.raises(AuthError) as exc:
        repo.purge(key, "wrong")
    assert exc.value.status_code == 403
    with pytest.raises(AuthError):
        repo.purge(key, None)
    assert repo.get(key).title == "T"

    repo.purge(key, "test-pass")
    with pytest.raises(NotFoundError):
        repo.get(key)
    assert repo.list("active") == [] and repo.list("trash") == []

def test_list_skips_keys_deleted_mid_listing(store, repo):
    key = repo.create("T", "C")

    class Vanishing(MemoryStore):
        def list_keys(self):
            return ["gone"] + super().list_keys()

    vanishing = Vanishing({key: store.get(key)})
    other = NoteRepository(NotesSettings(store=vanishing, secret="s"))
    assert [n.key for n in other.list()] == [key]

def test_missing_configuration():
    with pytest.raises(ConfigurationError):
        NoteRepository(NotesSettings(store=None, secret="s"))
    with pytest.raises(ConfigurationError):
        NoteRepository(NotesSettings(store=MemoryStore(), secret=""))

@pytest.mark.parametrize("raw, expected", [
    ("just a string", (LEGACY_TITLE, "just a string", False)),
    ('"quoted"', (LEGACY_TITLE, "quoted", False)),
    ("42", (LEGACY_TITLE, "42", False)),
    ("null", (LEGACY_TITLE, "null", False)),
    ('{"title": "T", "content": "C"}', ("T", "C", False)),
    ('{"title": "T", "content": "C", "in_trash": "yes"}', ("T", "C", False)),
    ('{"title": "T", "content": "C", "in_trash": true}', ("T", "C", True)),
    ("", (LEGACY_TITLE, "", False)),
])
def test_decode_note_coerces_legacy_values(raw, expected):
    note = decode_note("k", raw)
    assert (note.title, note.content, note.in_trash) == expected

def test_update_validates_title_and_content(repo):
    key = repo.create("T", "C")
    for title, content in (("", "C2"), ("T2", ""), (None, "C2"), ("T2", 3)):
        with pytest.raises(ValidationError):
            repo.update(key, title, content)
    note = repo.get(key)
    assert (note.title, note.content) == ("T", "C")

def test_update_unknown_key_is_not_found_before_validation(repo):
    with pytest.raises(NotFoundError):
        repo.update("nope", "", None)

def test_purge_absent_key_checks_password_first(repo):
    with pytest.raises(AuthError):
        repo.purge("1999-01-01T00:00:00.000Z", "wrong")
    # mot de passe correct: suppression idempotente, pas d'erreur
    repo.purge("1999-01-01T00:00:00.000Z", "test-pass")
