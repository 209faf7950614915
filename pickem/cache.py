"""Event snapshot caching for fallback on scrape failures."""

from __future__ import annotations

import json
from pathlib import Path

from pickem import Event


def save_events_snapshot(cache_dir: Path, name: str, events: list[Event]) -> Path:
    """Write events as JSON documents to ``<cache_dir>/<name>.json``."""
    cache_dir.mkdir(parents=True, exist_ok=True)
    cache_file = cache_dir / f"{name}.json"
    payload = [e.to_doc() for e in events]
    cache_file.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return cache_file


def load_events_snapshot(cache_dir: Path, name: str) -> list[Event] | None:
    """Load cached events. Returns None if no usable cache exists."""
    cache_file = cache_dir / f"{name}.json"
    if not cache_file.exists():
        return None
    try:
        payload = json.loads(cache_file.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        return None
    if not isinstance(payload, list):
        return None
    return [Event.from_doc(doc["id"], doc) for doc in payload if isinstance(doc, dict) and doc.get("id")]
