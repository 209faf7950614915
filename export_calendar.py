#!/usr/bin/env python3
"""
Wrestling Pick'em — PPV Calendar Export

Writes every stored PPV to an ICS calendar file that fans can subscribe to.

Usage:
    python export_calendar.py
"""

from __future__ import annotations

import sys
from pathlib import Path

from pickem.calendar_gen import create_ppv_calendar, validate_ics
from pickem.config import load_settings
from pickem.store import open_store

OUTPUT_PATH = Path("public/ppvs.ics")


def main() -> int:
    store = open_store(load_settings().service_account_path)
    if store is None:
        return 1

    try:
        events = store.list_events()
    except Exception as e:
        print(f"ERROR: Failed to load events: {e}")
        return 1

    cal = create_ppv_calendar(events)
    ics_data = cal.to_ical()
    if not validate_ics(ics_data):
        print("ERROR: Generated ICS failed validation")
        return 1

    OUTPUT_PATH.parent.mkdir(parents=True, exist_ok=True)
    OUTPUT_PATH.write_bytes(ics_data)
    print(f"Generated {OUTPUT_PATH} ({len(cal.subcomponents)} PPVs)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
