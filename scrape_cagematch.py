#!/usr/bin/env python3
"""
Wrestling Pick'em — Cagematch Scraper

Scrapes recent events from major promotions on Cagematch, merges in the
announced PPVs from known_ppvs.json, fetches match cards, and saves the
events to Firestore (when a service account is configured) and to JSON
files under data/.

Usage:
    python scrape_cagematch.py
"""

from __future__ import annotations

import sys
import time
from pathlib import Path

import requests

from pickem import Event
from pickem.cache import load_events_snapshot, save_events_snapshot
from pickem.config import load_known_ppvs, load_settings
from pickem.notify import report_job_errors
from pickem.scraper import REQUEST_DELAY, scrape_event_card, scrape_recent_events
from pickem.store import FirestoreStore, open_store

MAX_CARDS_PER_RUN = 20
MAX_WRESTLER_IMAGES = 50


def select_events_to_scrape(known: list[Event], recent: list[Event]) -> list[Event]:
    """Announced PPVs first, then recent events, deduplicated by id."""
    selected: list[Event] = []
    seen: set[str] = set()
    for event in known[:15] + recent[:10]:
        if event.id not in seen:
            seen.add(event.id)
            selected.append(event)
    return selected[:MAX_CARDS_PER_RUN]


def save_images(store: FirestoreStore, events: list[Event]) -> int:
    """Record banner and wrestler image URLs found on the scraped cards."""
    saved = 0
    for event in events:
        if event.banner_url:
            store.save_image_url("events", f"{event.id}_banner", event.banner_url)

    wrestlers: dict[str, dict] = {}
    for event in events:
        for match in event.matches:
            for member in match.p1_members + match.p2_members:
                if member.get("cagematchId") and member.get("image"):
                    wrestlers[member["cagematchId"]] = member

    for member in list(wrestlers.values())[:MAX_WRESTLER_IMAGES]:
        store.save_image_url("wrestlers", member["name"], member["image"])
        saved += 1
    return saved


def main() -> int:
    settings = load_settings()
    store = open_store(settings.service_account_path)
    if store is None:
        print("  Saving to JSON files only")

    errors: list[str] = []

    print("\nFetching recent events from Cagematch...")
    try:
        recent = scrape_recent_events()
        print(f"  Found {len(recent)} events from major promotions")
        save_events_snapshot(settings.cache_dir, "cagematch-recent", recent)
    except requests.RequestException as e:
        error_msg = f"Failed to fetch recent events: {e}"
        print(f"  ERROR: {error_msg}")
        errors.append(error_msg)
        recent = load_events_snapshot(settings.cache_dir, "cagematch-recent") or []
        if recent:
            print(f"  Using {len(recent)} cached events instead")

    known: list[Event] = []
    if Path("known_ppvs.json").exists():
        known = load_known_ppvs()
        print(f"\n{len(known)} announced PPVs in the next 3 months")
        for ppv in known:
            print(f"  {ppv.promotion_name}: {ppv.name} ({ppv.date})")
    else:
        print("\n  Warning: known_ppvs.json not found, scraping recent events only")

    to_scrape = select_events_to_scrape(known, recent)
    print(f"\nScraping match cards for {len(to_scrape)} events...")

    detailed: list[Event] = []
    for i, event in enumerate(to_scrape):
        if i > 0:
            time.sleep(REQUEST_DELAY)

        if event.cagematch_event_id:
            print(f"\nScraping details for {event.name}...")
            try:
                event = scrape_event_card(event)
                print(f"  Found {event.match_count} matches, venue: {event.venue or 'N/A'}")
            except requests.RequestException as e:
                error_msg = f"Failed to fetch card for {event.name}: {e}"
                print(f"  ERROR: {error_msg}")
                errors.append(error_msg)
        detailed.append(event)

        if store is None:
            continue
        try:
            if store.save_scraped_event(event):
                print(f"  Saved {event.name} to Firestore")
            else:
                print(f"  Skipping {event.name} - manually edited")
        except Exception as e:
            error_msg = f"Failed to save {event.name}: {e}"
            print(f"  ERROR: {error_msg}")
            errors.append(error_msg)

    out_path = save_events_snapshot(settings.data_dir, "events-with-details", detailed)
    print(f"\nSaved {len(detailed)} events with details to {out_path}")

    if store is not None:
        try:
            count = save_images(store, detailed)
            print(f"Saved {count} wrestler images to Firestore")
        except Exception as e:
            errors.append(f"Failed to save images: {e}")

    code = report_job_errors("Cagematch scrape", errors)
    if code == 0:
        print("\nDone - scraping complete")
    return code


if __name__ == "__main__":
    sys.exit(main())
