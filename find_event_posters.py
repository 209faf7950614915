#!/usr/bin/env python3
"""
Wrestling Pick'em — Find Event Posters

Looks up a poster image on Wikipedia for PPVs that have none and saves it
as the event's posterUrl. Manually edited events are skipped; admins can
set their posters in the Admin Panel.

Usage:
    python find_event_posters.py
"""

from __future__ import annotations

import sys

from pickem.config import load_settings
from pickem.notify import report_job_errors
from pickem.posters import update_posters
from pickem.store import open_store


def main() -> int:
    store = open_store(load_settings().service_account_path)
    if store is None:
        return 1

    try:
        events = store.list_events()
    except Exception as e:
        print(f"ERROR: Failed to load events: {e}")
        return 1

    print("\nFinding and updating event posters...\n")
    result = update_posters(store, events)

    print("\n" + "=" * 80)
    print("\nSummary:")
    print(f"  Updated: {result.updated}")
    print(f"  No poster found: {result.not_found}")
    print(f"  Still without posters: {result.remaining}")
    return report_job_errors("Poster lookup", result.errors)


if __name__ == "__main__":
    sys.exit(main())
