import json
from dataclasses import dataclass

LEGACY_TITLE = "Untitled (Old Note)"

class DecodeError(ValueError):
    """Stored value is not valid JSON. Always recovered by coercion."""

@dataclass
class Note:
    key: str
    title: str
    content: str
    in_trash: bool = False

    def value(self) -> dict:
        return {"title": self.title, "content": self.content, "in_trash": self.in_trash}

    def to_json(self) -> str:
        return json.dumps(self.value(), ensure_ascii=False)

def _parse(raw: str):
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise DecodeError(str(exc)) from exc

def decode_note(key: str, raw: str) -> Note:
    """Decode a stored value, coercing legacy records (plain strings, missing in_trash)."""
    try:
        value = _parse(raw)
    except DecodeError:
        return Note(key=key, title=LEGACY_TITLE, content=raw or "")

    if not isinstance(value, dict):
        content = value if isinstance(value, str) else raw
        return Note(key=key, title=LEGACY_TITLE, content=content)

    return Note(
        key=key,
        title=str(value.get("title") or LEGACY_TITLE),
        content=str(value.get("content") or ""),
        # seul le booléen JSON true compte comme "à la corbeille"
        in_trash=value.get("in_trash") is True,
    )
