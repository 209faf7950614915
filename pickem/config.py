"""Runtime configuration from environment variables and local JSON files."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from pickem import Event, Match
from pickem.dates import add_months, parse_event_date


class ConfigError(Exception):
    """Required local configuration is missing or unreadable."""


@dataclass
class Settings:
    service_account_path: Path
    data_dir: Path
    cache_dir: Path


def load_settings() -> Settings:
    return Settings(
        service_account_path=Path(os.environ.get("PICKEM_SERVICE_ACCOUNT", "serviceAccountKey.json")),
        data_dir=Path(os.environ.get("PICKEM_DATA_DIR", "data")),
        cache_dir=Path(os.environ.get("PICKEM_CACHE_DIR", "cache")),
    )


def load_service_account(path: Path) -> dict:
    """Read a service-account key file. Raises ConfigError if it is missing or invalid."""
    if not path.exists():
        raise ConfigError(f"{path} not found")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"{path} is not valid JSON: {e}") from e
    if not data.get("project_id"):
        raise ConfigError(f"{path} has no project_id")
    return data


def load_known_ppvs(path: str = "known_ppvs.json", today: date | None = None) -> list[Event]:
    """Load announced premium events that fall within the next three months."""
    today = today or date.today()
    horizon = add_months(today, 3)

    with open(path) as f:
        data = json.load(f)

    events = []
    for item in data["events"]:
        event_date = parse_event_date(item.get("date"))
        if event_date is None or not today <= event_date <= horizon:
            continue
        events.append(Event(
            id=item["id"],
            name=item["name"],
            date=item["date"],
            promotion_id=item.get("promotion_id"),
            promotion_name=item.get("promotion_name"),
            promo_id=item.get("promo_id"),
            matches=[Match(id=i, **m) for i, m in enumerate(item.get("matches", []), start=1)],
            is_ppv=True,
            source="announced",
            venue=item.get("venue"),
        ))
    return events
