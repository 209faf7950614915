#!/usr/bin/env python3
"""
Wrestling Pick'em — Cleanup Weekly Shows

Deletes stored events that are weekly TV episodes or tapings rather than
premium events. Manually edited events are kept.

Usage:
    python cleanup_weekly_shows.py
"""

from __future__ import annotations

import sys

from pickem.config import load_settings
from pickem.notify import report_job_errors
from pickem.reconcile import cleanup_weekly_shows
from pickem.store import open_store


def main() -> int:
    store = open_store(load_settings().service_account_path)
    if store is None:
        return 1

    print("\nCleaning up weekly shows...\n")
    try:
        result = cleanup_weekly_shows(store)
    except Exception as e:
        print(f"ERROR: Cleanup failed: {e}")
        return 1

    print("\n" + "=" * 80)
    print("\nCleanup Summary:")
    print(f"  Total weekly shows found: {result.found}")
    print(f"  Deleted: {result.deleted}")
    print(f"  Protected (skipped): {result.protected}")
    print(f"  Remaining PPVs: {result.remaining_ppvs}")
    return report_job_errors("Weekly show cleanup", result.errors)


if __name__ == "__main__":
    sys.exit(main())
