#!/usr/bin/env python3
"""
Wrestling Pick'em — Set Admin

Grants or revokes admin access for the account registered to an email
address, then lists the current admins.

Usage:
    python set_admin.py <email> <grant|revoke>
    python set_admin.py admin@example.com grant
"""

from __future__ import annotations

import sys

from firebase_admin import auth
from firebase_admin import exceptions as firebase_exceptions

from pickem.admin import ACTIONS, describe_admins, set_admin
from pickem.config import load_settings
from pickem.store import open_store


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2 or args[1] not in ACTIONS:
        print("Usage: python set_admin.py <email> <grant|revoke>")
        print("Example: python set_admin.py admin@example.com grant")
        return 1
    email, action = args

    store = open_store(load_settings().service_account_path)
    if store is None:
        return 1

    try:
        user_record = set_admin(store, auth, email, action)
    except auth.UserNotFoundError:
        print(f"ERROR: No user found with email {email}")
        print("Make sure the user has signed up in the app first")
        return 1
    except firebase_exceptions.FirebaseError as e:
        print(f"ERROR: {e}")
        return 1

    verb = "Granted" if action == "grant" else "Revoked"
    print(f"{verb} admin access for {email} (uid: {user_record.uid})")

    admins = describe_admins(store, auth)
    print(f"\nCurrent admins ({len(admins)}):")
    for line in admins:
        print(f"  - {line}")
    if not admins:
        print("  (None)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
