# tests/conftest.py
import os, sys
import itertools
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault("APP_ENV", "test")

from kvnotes import create_app
from kvnotes.config import TestConfig
from kvnotes.notes.repository import NoteRepository, NotesSettings
from kvnotes.store import MemoryStore

SECRET = TestConfig.AUTH_PASS

def make_key_factory(start_day=1):
    """Clés ISO déterministes et croissantes: 2024-01-01T00:00:00.000Z, ...01.000Z, ..."""
    counter = itertools.count()
    def _next():
        n = next(counter)
        return f"2024-01-{start_day:02d}T00:{n // 60:02d}:{n % 60:02d}.000Z"
    return _next

@pytest.fixture()
def store():
    return MemoryStore()

@pytest.fixture()
def app(store):
    app = create_app(TestConfig, store=store, key_factory=make_key_factory())
    app.config.update(TESTING=True)
    yield app

@pytest.fixture()
def client(app):
    return app.test_client()

@pytest.fixture()
def auth_headers():
    return {"Authorization": f"Bearer {SECRET}"}

@pytest.fixture()
def repo(store):
    return NoteRepository(NotesSettings(store=store, secret=SECRET), key_factory=make_key_factory())
