"""Scheduled scrape endpoint, triggered daily by the hosting platform's cron."""

from __future__ import annotations

from datetime import datetime, timezone
from functools import lru_cache

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from pickem.config import ConfigError, load_settings
from pickem.scraper import EVENTS_URL, fetch_html, parse_major_events
from pickem.store import FirestoreStore

MAX_EVENTS_SAVED = 20
MAX_EVENTS_RETURNED = 10

app = FastAPI()


@lru_cache(maxsize=1)
def get_store() -> FirestoreStore | None:
    """The shared store, or None when no service account is configured."""
    settings = load_settings()
    try:
        return FirestoreStore.from_service_account(settings.service_account_path)
    except ConfigError as e:
        print(f"Firestore not configured ({e}); scraped events will not be saved")
        return None


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@app.api_route("/api/scrape-wrestling-data", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
def scrape_wrestling_data(request: Request, store: FirestoreStore | None = Depends(get_store)):
    if request.method not in ("GET", "POST"):
        return JSONResponse(status_code=405, content={"error": "Method not allowed"})

    print("Starting scheduled wrestling data scrape...")
    try:
        events = parse_major_events(fetch_html(EVENTS_URL))
    except Exception as exc:
        print(f"ERROR: Scraping failed: {exc}")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": str(exc), "timestamp": _timestamp()},
        )

    print(f"Found {len(events)} events from major promotions")

    saved = 0
    if store is not None:
        for event in events[:MAX_EVENTS_SAVED]:
            try:
                if store.save_scraped_event(event):
                    saved += 1
                else:
                    print(f"  Skipping {event.name} - manually edited")
            except Exception as exc:
                print(f"  ERROR: Failed to save {event.name}: {exc}")
        print(f"Saved {saved} events to Firestore")

    return {
        "success": True,
        "timestamp": _timestamp(),
        "eventsFound": len(events),
        "eventsSaved": saved,
        "events": [e.to_doc() for e in events[:MAX_EVENTS_RETURNED]],
    }
