"""Bulk upload of manually downloaded wrestler photos."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".webp")


class ImageStore(Protocol):
    def upload_image(self, local_path: Path, storage_path: str, metadata: dict[str, str]) -> str: ...

    def save_image_url(self, kind: str, identifier: str, url: str) -> None: ...


def find_images(folder: Path) -> list[tuple[Path, str]]:
    """List image files in a folder as (path, wrestler name) pairs.

    "jon_moxley.jpg" becomes "Jon Moxley".
    """
    found = []
    for path in sorted(folder.iterdir()):
        if path.is_file() and path.suffix.lower() in IMAGE_EXTENSIONS:
            found.append((path, wrestler_name_from_file(path)))
    return found


def wrestler_name_from_file(path: Path) -> str:
    words = path.stem.replace("_", " ")
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), words)


def storage_path_for(path: Path, wrestler_name: str) -> str:
    safe_name = re.sub(r"[^a-zA-Z0-9]", "_", wrestler_name).lower()
    return f"images/wrestlers/{safe_name}{path.suffix.lower()}"


def upload_wrestler_image(store: ImageStore, path: Path, wrestler_name: str) -> str:
    """Upload one photo and record its URL under images/wrestlers."""
    url = store.upload_image(
        path,
        storage_path_for(path, wrestler_name),
        {
            "wrestlerName": wrestler_name,
            "uploadedAt": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        },
    )
    store.save_image_url("wrestlers", wrestler_name, url)
    return url


def upload_folder(store: ImageStore, images: list[tuple[Path, str]]) -> tuple[dict[str, str], list[str]]:
    """Upload every image, continuing past failures.

    Returns the name -> URL map of successful uploads and a list of error messages.
    """
    uploaded: dict[str, str] = {}
    errors: list[str] = []

    for path, name in images:
        print(f"Uploading: {name}...")
        try:
            uploaded[name] = upload_wrestler_image(store, path, name)
            print("  Success!")
        except Exception as e:
            error_msg = f"Failed to upload {path.name}: {e}"
            print(f"  ERROR: {error_msg}")
            errors.append(error_msg)

    return uploaded, errors
