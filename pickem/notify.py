"""Pushover alerts for failed scrape and maintenance jobs."""

from __future__ import annotations

import os

import requests

PUSHOVER_URL = "https://api.pushover.net/1/messages.json"
DEFAULT_JOB_NAME = "Pick'em data job"


def send_error_notification(message: str, job_name: str = DEFAULT_JOB_NAME) -> bool:
    """Push a "<job> failed" alert to the maintainer's Pushover account.

    Without PUSHOVER_USER_KEY and PUSHOVER_API_TOKEN the alert is only
    printed. Returns whether the push went out.
    """
    title = f"{job_name} failed"
    credentials = {
        "user": os.environ.get("PUSHOVER_USER_KEY", ""),
        "token": os.environ.get("PUSHOVER_API_TOKEN", ""),
    }
    if not all(credentials.values()):
        print(f"  Pushover not configured, alert not sent: {title}")
        return False

    try:
        requests.post(
            PUSHOVER_URL,
            data={**credentials, "title": title, "message": message},
            timeout=10,
        ).raise_for_status()
    except requests.RequestException as e:
        print(f"  Failed to send Pushover alert for {job_name}: {e}")
        return False

    print(f"  Pushover alert sent: {title}")
    return True


def report_job_errors(job_name: str, errors: list[str]) -> int:
    """Print a job's error summary and alert on it. Returns the job's exit code."""
    if not errors:
        return 0

    print(f"\nErrors encountered: {len(errors)}")
    for err in errors:
        print(f"  - {err}")
    send_error_notification(
        f"{job_name} completed with {len(errors)} error(s):\n\n" + "\n".join(f"- {e}" for e in errors),
        job_name,
    )
    return 1
