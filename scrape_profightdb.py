#!/usr/bin/env python3
"""
Wrestling Pick'em — ProFightDB Scraper

Scrapes premium events with full match cards and results from ProFightDB
and saves them to Firestore, skipping any event an admin has edited by
hand. These records win ties in remove_duplicate_events.py.

Usage:
    python scrape_profightdb.py
"""

from __future__ import annotations

import sys
import time

import requests

from pickem import Event
from pickem.cache import load_events_snapshot, save_events_snapshot
from pickem.config import load_settings
from pickem.notify import report_job_errors
from pickem.profightdb import (
    LISTING_PAGES,
    attach_wrestler_images,
    fetch_wrestler_image,
    listing_url,
    parse_card_listing,
    parse_match_card,
    wrestler_slugs,
)
from pickem.scraper import REQUEST_DELAY, fetch_html
from pickem.store import open_store

MAX_CARDS_PER_RUN = 20


def scrape_listing(errors: list[str]) -> list[Event]:
    events: list[Event] = []
    seen: set[str] = set()
    for page in range(1, LISTING_PAGES + 1):
        url = listing_url(page)
        print(f"Fetching page {page}: {url}")
        try:
            html = fetch_html(url)
        except requests.RequestException as e:
            error_msg = f"Failed to fetch listing page {page}: {e}"
            print(f"  ERROR: {error_msg}")
            errors.append(error_msg)
            time.sleep(REQUEST_DELAY)
            continue
        time.sleep(REQUEST_DELAY)

        for event in parse_card_listing(html):
            if event.id not in seen:
                seen.add(event.id)
                events.append(event)
        print(f"  Found {len(events)} total events so far...")
    return events


def scrape_card(event: Event) -> Event:
    """Fetch an event's match card and wrestler photos."""
    html = fetch_html(event.profightdb_url)
    time.sleep(REQUEST_DELAY)
    matches = parse_match_card(html)
    print(f"  Found {len(matches)} matches for {event.name}")
    if not matches:
        return event

    slugs = wrestler_slugs(matches)
    images: dict[str, str] = {}
    for slug in slugs:
        url = fetch_wrestler_image(slug)
        time.sleep(REQUEST_DELAY / 2)
        if url:
            images[slug] = url
    print(f"  Fetched {len(images)}/{len(slugs)} wrestler images")
    attach_wrestler_images(matches, images)

    event.matches = matches
    return event


def main() -> int:
    settings = load_settings()
    store = open_store(settings.service_account_path)
    errors: list[str] = []

    print("\nScraping PPV events from ProFightDB...")
    events = scrape_listing(errors)
    if events:
        save_events_snapshot(settings.cache_dir, "profightdb-listing", events)
    else:
        events = load_events_snapshot(settings.cache_dir, "profightdb-listing") or []
        if events:
            print(f"  Using {len(events)} cached events instead")
    print(f"\nScraped {len(events)} unique PPV events")

    detailed: list[Event] = []
    for event in events[:MAX_CARDS_PER_RUN]:
        print(f"\nScraping details for {event.name}...")
        try:
            event = scrape_card(event)
        except requests.RequestException as e:
            error_msg = f"Failed to fetch card for {event.name}: {e}"
            print(f"  ERROR: {error_msg}")
            errors.append(error_msg)
        detailed.append(event)

        if store is None or not event.promo_id:
            continue
        try:
            if store.save_scraped_event(event):
                print(f"  Saved {event.name} to Firestore")
            else:
                print(f"  Skipping {event.name} - manually edited by admin")
        except Exception as e:
            error_msg = f"Failed to save {event.name}: {e}"
            print(f"  ERROR: {error_msg}")
            errors.append(error_msg)

    out_path = save_events_snapshot(settings.data_dir, "profightdb-events", detailed)
    print(f"\nSaved {len(detailed)} events to {out_path}")

    code = report_job_errors("ProFightDB scrape", errors)
    if code == 0:
        print("\nDone - ProFightDB scraping complete")
    return code


if __name__ == "__main__":
    sys.exit(main())
