#!/usr/bin/env python3
"""
Wrestling Pick'em — Remove Duplicate Events

Groups stored events by normalized name and deletes every copy except the
most complete one (most matches, ProFightDB preferred on ties). Manually
edited events are never deleted. Safe to re-run.

Usage:
    python remove_duplicate_events.py
"""

from __future__ import annotations

import sys

from pickem.config import load_settings
from pickem.notify import report_job_errors
from pickem.reconcile import remove_duplicate_events
from pickem.store import open_store


def main() -> int:
    store = open_store(load_settings().service_account_path)
    if store is None:
        return 1

    print("\nFinding and removing duplicate events...\n")
    try:
        result = remove_duplicate_events(store)
    except Exception as e:
        print(f"ERROR: Failed to remove duplicates: {e}")
        return 1

    print("\n" + "=" * 80)
    print(f"\nSummary: {result.deleted} duplicate events removed, {result.protected} protected")
    return report_job_errors("Duplicate removal", result.errors)


if __name__ == "__main__":
    sys.exit(main())
