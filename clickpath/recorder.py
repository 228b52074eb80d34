"""Recorded click sequences and their JSON file format.

A click path is stored as a single object::

    {"clicks": [{"Click": [10, 20]}, {"Wait": 50}, {"Click": [30, 40]}]}

Each event is a one-key object whose key is the event type.
"""
import json
from dataclasses import dataclass, field
from typing import List, Union

from .errors import ClickPathNotFoundError, MalformedClickPathError, StorageWriteError


@dataclass(frozen=True)
class Click:
    x: int
    y: int


@dataclass(frozen=True)
class Wait:
    duration_ms: int

    def __post_init__(self):
        if self.duration_ms < 0:
            raise ValueError(f"Wait duration must be >= 0, got {self.duration_ms}")


ClickEvent = Union[Click, Wait]


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def event_to_dict(event):
    if isinstance(event, Click):
        return {"Click": [event.x, event.y]}
    if isinstance(event, Wait):
        return {"Wait": event.duration_ms}
    raise TypeError(f"Unknown click event: {event!r}")


def event_from_dict(data, index=None):
    if not isinstance(data, dict) or len(data) != 1:
        raise MalformedClickPathError("expected an object with a single event type", index)

    (tag, payload), = data.items()

    if tag == "Click":
        if not isinstance(payload, list) or len(payload) != 2 or not all(_is_int(v) for v in payload):
            raise MalformedClickPathError("Click needs two integer coordinates", index)
        return Click(payload[0], payload[1])

    if tag == "Wait":
        if not _is_int(payload) or payload < 0:
            raise MalformedClickPathError("Wait needs a non-negative integer duration", index)
        return Wait(payload)

    raise MalformedClickPathError(f"unknown event type {tag!r}", index)


@dataclass
class ClickPath:
    clicks: List[ClickEvent] = field(default_factory=list)

    def add_click(self, x, y):
        self.clicks.append(Click(x, y))

    def add_wait(self, duration_ms):
        self.clicks.append(Wait(duration_ms))

    def is_empty(self):
        return not self.clicks

    def __len__(self):
        return len(self.clicks)

    def to_dict(self):
        return {"clicks": [event_to_dict(e) for e in self.clicks]}

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict) or not isinstance(data.get("clicks"), list):
            raise MalformedClickPathError("expected an object with a 'clicks' list")
        return cls([event_from_dict(e, i) for i, e in enumerate(data["clicks"])])

    def dumps(self):
        return json.dumps(self.to_dict())

    @classmethod
    def loads(cls, text):
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedClickPathError(f"invalid JSON: {e}") from e
        return cls.from_dict(data)


# ===============================
# FILE
# ===============================
def save_click_path(path, file_path):
    try:
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(path.dumps())
    except OSError as e:
        raise StorageWriteError(f"Failed to write {file_path}: {e}") from e


def load_click_path(file_path):
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError as e:
        raise ClickPathNotFoundError(file_path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedClickPathError(f"Failed to read {file_path}: {e}") from e
    return ClickPath.loads(text)
