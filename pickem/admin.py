"""Granting and revoking admin access for pick'em users."""

from __future__ import annotations

from typing import Any, Protocol

from firebase_admin import exceptions

from pickem import User

ACTIONS = ("grant", "revoke")


class UserStore(Protocol):
    def set_user_admin(self, user_id: str, is_admin: bool) -> None: ...

    def list_admins(self) -> list[User]: ...


def set_admin(store: UserStore, auth: Any, email: str, action: str) -> Any:
    """Set or clear the isAdmin flag for the account registered to ``email``.

    ``auth`` is the firebase_admin.auth module (or a stand-in with
    ``get_user_by_email``). Returns the resolved auth user record.
    """
    if action not in ACTIONS:
        raise ValueError(f"action must be one of {ACTIONS}, got {action!r}")

    user_record = auth.get_user_by_email(email)
    store.set_user_admin(user_record.uid, action == "grant")
    return user_record


def describe_admins(store: UserStore, auth: Any) -> list[str]:
    """One line per current admin, preferring the auth email over the profile id."""
    lines = []
    for user in store.list_admins():
        try:
            auth_user = auth.get_user(user.id)
            email = auth_user.email
            name = user.display_name or auth_user.display_name or "No name"
        except exceptions.FirebaseError:
            email = user.id
            name = user.display_name or "Unknown"
        lines.append(f"{email} ({name})")
    return lines
