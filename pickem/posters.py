"""Event poster lookup through the Wikipedia API."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Protocol

import requests

from pickem import Event
from pickem.dates import parse_event_date
from pickem.scraper import USER_AGENT

WIKIPEDIA_API = "https://en.wikipedia.org/w/api.php"
POSTER_SOURCE = "wikipedia"
POSTER_SIZE = 1000
MAX_EVENTS_PER_RUN = 10
REQUEST_DELAY = 1  # seconds between lookups

API_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "application/json",
}


class PosterStore(Protocol):
    def set_event_poster(self, event_id: str, poster_url: str, source: str) -> None: ...


@dataclass
class PosterResult:
    candidates: int = 0
    updated: int = 0
    not_found: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def remaining(self) -> int:
        return self.candidates - self.updated


def fetch_json(params: dict[str, str | int]) -> object:
    response = requests.get(WIKIPEDIA_API, params=params, headers=API_HEADERS, timeout=30)
    response.raise_for_status()
    return response.json()


def search_term(event_name: str) -> str:
    """Event name without a trailing year: "Royal Rumble 2026" -> "Royal Rumble"."""
    return re.sub(r"\s*\b(19|20)\d{2}\s*$", "", event_name).strip()


def parse_search_title(data: object) -> str | None:
    """First page title from an opensearch response ``[term, titles, descriptions, urls]``."""
    if not isinstance(data, list) or len(data) < 4:
        return None
    titles, urls = data[1], data[3]
    if not titles or not urls:
        return None
    return titles[0]


def parse_page_thumbnail(data: object) -> str | None:
    if not isinstance(data, dict):
        return None
    pages = (data.get("query") or {}).get("pages") or {}
    for page in pages.values():
        source = (page.get("thumbnail") or {}).get("source")
        if source:
            return source
    return None


def find_poster(event_name: str) -> str | None:
    """Search Wikipedia for the event and return its lead image URL.

    Posters are optional, so lookup failures are printed and return None.
    """
    term = search_term(event_name)
    print(f"  Searching Wikipedia for: \"{term}\"")
    try:
        title = parse_search_title(fetch_json({
            "action": "opensearch",
            "format": "json",
            "search": term,
            "limit": 3,
        }))
        if title is None:
            print("  No Wikipedia page found")
            return None

        print(f"  Found Wikipedia page: \"{title}\"")
        poster = parse_page_thumbnail(fetch_json({
            "action": "query",
            "format": "json",
            "titles": title,
            "prop": "pageimages",
            "pithumbsize": POSTER_SIZE,
        }))
    except (requests.RequestException, ValueError) as e:
        print(f"  ERROR: Wikipedia lookup failed: {e}")
        return None

    if poster is None:
        print("  Warning: no poster image on page")
    return poster


def events_missing_posters(events: list[Event]) -> list[Event]:
    """PPVs without a poster, most recent first. Manually edited events are left alone."""
    missing = [e for e in events if e.is_ppv and not e.poster_url and not e.manually_edited]
    return sorted(missing, key=lambda e: parse_event_date(e.date) or date.min, reverse=True)


def update_posters(
    store: PosterStore,
    events: list[Event],
    find: Callable[[str], str | None] = find_poster,
    limit: int = MAX_EVENTS_PER_RUN,
    delay: float = REQUEST_DELAY,
) -> PosterResult:
    """Look up and save posters for up to ``limit`` events missing one."""
    candidates = events_missing_posters(events)
    result = PosterResult(candidates=len(candidates))
    print(f"Found {len(candidates)} PPV events without posters")

    for i, event in enumerate(candidates[:limit]):
        if i > 0:
            time.sleep(delay)

        print(f"\n{i + 1}. {event.name} ({event.date or 'no date'})")
        poster = find(event.name)
        if not poster:
            result.not_found += 1
            continue

        try:
            store.set_event_poster(event.id, poster, POSTER_SOURCE)
        except Exception as e:
            error_msg = f"Failed to save poster for {event.name}: {e}"
            print(f"  ERROR: {error_msg}")
            result.errors.append(error_msg)
            continue
        print("  Saved poster to Firestore")
        result.updated += 1

    return result
