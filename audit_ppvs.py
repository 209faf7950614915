#!/usr/bin/env python3
"""
Wrestling Pick'em — PPV Audit

Lists PPVs from the last six months and the next three, split by whether
their match card has been filled in.

Usage:
    python audit_ppvs.py
"""

from __future__ import annotations

import sys

from pickem.audit import audit_ppvs, format_audit_report
from pickem.config import load_settings
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

    print(f"\nFound {len(events)} total events in Firestore\n")
    print(format_audit_report(audit_ppvs(events)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
