#!/usr/bin/env python3
"""
Wrestling Pick'em — Remove Empty Event

Deletes a single event, but only when it has no matches. Used to drop a
card-less copy once a complete copy from another source exists.

Usage:
    python remove_empty_event.py <event-id>
    python remove_empty_event.py cagematch-426904
"""

from __future__ import annotations

import sys

from pickem.config import load_settings
from pickem.reconcile import remove_event_if_empty
from pickem.store import open_store

MESSAGES = {
    "deleted": "Deleted {id} (no matches)",
    "missing": "{id} already removed or not found",
    "has_matches": "{id} has matches, not deleting",
    "protected": "{id} was manually edited, not deleting",
}


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: python remove_empty_event.py <event-id>")
        return 1
    event_id = args[0]

    store = open_store(load_settings().service_account_path)
    if store is None:
        return 1

    try:
        outcome = remove_event_if_empty(store, event_id)
    except Exception as e:
        print(f"ERROR: {e}")
        return 1

    print(MESSAGES[outcome].format(id=event_id))
    return 0


if __name__ == "__main__":
    sys.exit(main())
