"""Firestore-backed storage for events, users, and image URLs.

All documents live under ``artifacts/{app_id}/public/data/<collection>``,
the layout the web app reads from. A store is constructed with an explicit
client and app id so several stores (or test doubles) can coexist.
"""

from __future__ import annotations

import mimetypes
from datetime import datetime, timezone
from pathlib import Path
from typing import Any
from urllib.parse import quote

import firebase_admin
from firebase_admin import credentials, firestore, storage

from pickem import Event, User
from pickem.config import ConfigError, load_service_account


class FirestoreStore:
    def __init__(self, db: Any, app_id: str, bucket: Any = None) -> None:
        self.db = db
        self.app_id = app_id
        self.bucket = bucket

    @classmethod
    def from_service_account(cls, path: Path) -> FirestoreStore:
        """Initialize firebase-admin from a key file. Raises ConfigError if the file is unusable."""
        account = load_service_account(path)
        project_id = account["project_id"]
        try:
            app = firebase_admin.initialize_app(
                credentials.Certificate(str(path)),
                {
                    "projectId": project_id,
                    "storageBucket": f"{project_id}.firebasestorage.app",
                },
            )
        except ValueError as e:
            # firebase-admin reports bad key contents as ValueError
            raise ConfigError(f"{path} is not a usable service account: {e}") from e
        return cls(firestore.client(app), project_id, storage.bucket(app=app))

    def collection(self, name: str):
        return (
            self.db.collection("artifacts")
            .document(self.app_id)
            .collection("public")
            .document("data")
            .collection(name)
        )

    # --- Events ---

    def list_events(self) -> list[Event]:
        return [Event.from_doc(doc.id, doc.to_dict() or {}) for doc in self.collection("events").stream()]

    def get_event(self, event_id: str) -> Event | None:
        doc = self.collection("events").document(event_id).get()
        if not doc.exists:
            return None
        return Event.from_doc(doc.id, doc.to_dict() or {})

    def upsert_event(self, event: Event) -> None:
        now = _now_iso()
        data = event.to_doc()
        data["updatedAt"] = now
        data["scrapedAt"] = now
        self.collection("events").document(event.id).set(data, merge=True)

    def save_scraped_event(self, event: Event) -> bool:
        """Upsert a scraped event unless the stored copy was edited by hand."""
        existing = self.get_event(event.id)
        if existing is not None and existing.manually_edited:
            return False
        self.upsert_event(event)
        return True

    def set_event_poster(self, event_id: str, poster_url: str, source: str) -> None:
        now = _now_iso()
        self.collection("events").document(event_id).set(
            {
                "posterUrl": poster_url,
                "posterSource": source,
                "posterUpdatedAt": now,
                "updatedAt": now,
            },
            merge=True,
        )

    def delete_event(self, event_id: str) -> None:
        self.collection("events").document(event_id).delete()

    # --- Users ---

    def list_users(self) -> list[User]:
        return [User.from_doc(doc.id, doc.to_dict() or {}) for doc in self.collection("users").stream()]

    def list_admins(self) -> list[User]:
        return [u for u in self.list_users() if u.is_admin]

    def set_user_admin(self, user_id: str, is_admin: bool) -> None:
        self.collection("users").document(user_id).set(
            {
                "isAdmin": is_admin,
                "adminGrantedAt": firestore.SERVER_TIMESTAMP if is_admin else None,
                "updatedAt": firestore.SERVER_TIMESTAMP,
            },
            merge=True,
        )

    # --- Images ---

    def save_image_url(self, kind: str, identifier: str, url: str) -> None:
        """Record an image URL in the images/{kind} lookup document."""
        self.collection("images").document(kind).set(
            {identifier: url, "updatedAt": firestore.SERVER_TIMESTAMP},
            merge=True,
        )

    def upload_image(self, local_path: Path, storage_path: str, metadata: dict[str, str]) -> str:
        """Upload a file to the storage bucket and return its public download URL."""
        if self.bucket is None:
            raise RuntimeError("No storage bucket configured")
        content_type = mimetypes.guess_type(local_path.name)[0] or "application/octet-stream"
        blob = self.bucket.blob(storage_path)
        blob.metadata = metadata
        blob.upload_from_filename(str(local_path), content_type=content_type)
        blob.make_public()
        return f"https://firebasestorage.googleapis.com/v0/b/{self.bucket.name}/o/{quote(storage_path, safe='')}?alt=media"


def _now_iso() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def open_store(path: Path) -> FirestoreStore | None:
    """Open the store for a script, printing why when it cannot be opened."""
    try:
        store = FirestoreStore.from_service_account(path)
    except ConfigError as e:
        print(f"ERROR: Firestore not configured: {e}")
        return None
    print(f"Firebase Admin SDK initialized (app: {store.app_id})")
    return store
