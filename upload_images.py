#!/usr/bin/env python3
"""
Wrestling Pick'em — Upload Wrestler Images

Uploads every image in a folder to Firebase Storage and records the public
URLs under images/wrestlers. File names become wrestler names:
"jon_moxley.jpg" is saved as "Jon Moxley".

Usage:
    python upload_images.py <folder>
    python upload_images.py ./wrestler-images
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from pickem.config import load_settings
from pickem.images import IMAGE_EXTENSIONS, find_images, upload_folder
from pickem.notify import report_job_errors
from pickem.store import open_store


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: python upload_images.py <folder>")
        return 1

    folder = Path(args[0])
    if not folder.is_dir():
        print(f"ERROR: Folder not found: {folder}")
        return 1

    images = find_images(folder)
    if not images:
        print(f"ERROR: No images found in {folder} (looked for {', '.join(IMAGE_EXTENSIONS)})")
        return 1
    print(f"Found {len(images)} images to upload\n")

    store = open_store(load_settings().service_account_path)
    if store is None:
        return 1

    uploaded, errors = upload_folder(store, images)

    print(f"\nUploaded {len(uploaded)}/{len(images)} images")
    print(json.dumps(uploaded, indent=2))
    return report_job_errors("Image upload", errors)


if __name__ == "__main__":
    sys.exit(main())
