"""Shared fixtures: an in-memory stand-in for the Firestore store."""

from __future__ import annotations

from pathlib import Path

import pytest

from pickem import Event, Match, User

FIXTURE_DIR = Path(__file__).parent / "fixtures"


class InMemoryStore:
    """Implements the store methods the jobs use, backed by dicts."""

    def __init__(self, events: list[Event] | None = None, users: list[User] | None = None) -> None:
        self.events: dict[str, Event] = {e.id: e for e in events or []}
        self.users: dict[str, User] = {u.id: u for u in users or []}
        self.images: dict[str, dict[str, str]] = {}
        self.uploads: list[tuple[Path, str, dict[str, str]]] = []
        self.fail_deletes: set[str] = set()
        self.fail_uploads: set[str] = set()
        self.fail_posters: set[str] = set()
        self.posters: dict[str, tuple[str, str]] = {}
        self.delete_calls: list[str] = []

    def list_events(self) -> list[Event]:
        return list(self.events.values())

    def get_event(self, event_id: str) -> Event | None:
        return self.events.get(event_id)

    def delete_event(self, event_id: str) -> None:
        self.delete_calls.append(event_id)
        if event_id in self.fail_deletes:
            raise RuntimeError("deadline exceeded")
        self.events.pop(event_id, None)

    def upsert_event(self, event: Event) -> None:
        self.events[event.id] = event

    def save_scraped_event(self, event: Event) -> bool:
        existing = self.events.get(event.id)
        if existing is not None and existing.manually_edited:
            return False
        self.upsert_event(event)
        return True

    def set_event_poster(self, event_id: str, poster_url: str, source: str) -> None:
        if event_id in self.fail_posters:
            raise RuntimeError("write rejected")
        self.posters[event_id] = (poster_url, source)
        self.events[event_id].poster_url = poster_url

    def list_admins(self) -> list[User]:
        return [u for u in self.users.values() if u.is_admin]

    def set_user_admin(self, user_id: str, is_admin: bool) -> None:
        user = self.users.setdefault(user_id, User(id=user_id))
        user.is_admin = is_admin

    def save_image_url(self, kind: str, identifier: str, url: str) -> None:
        self.images.setdefault(kind, {})[identifier] = url

    def upload_image(self, local_path: Path, storage_path: str, metadata: dict[str, str]) -> str:
        if local_path.name in self.fail_uploads:
            raise RuntimeError("permission denied")
        self.uploads.append((local_path, storage_path, metadata))
        return f"https://storage.test/{storage_path}"


def make_event(
    event_id: str,
    name: str,
    matches: int = 0,
    source: str = "cagematch",
    manually_edited: bool = False,
    **kwargs,
) -> Event:
    card = [Match(id=i, p1=f"Wrestler {i}A", p2=f"Wrestler {i}B") for i in range(1, matches + 1)]
    return Event(
        id=event_id,
        name=name,
        matches=card,
        source=source,
        manually_edited=manually_edited,
        **kwargs,
    )


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


def read_fixture(name: str) -> str:
    return (FIXTURE_DIR / name).read_text(encoding="utf-8")
