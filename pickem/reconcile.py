"""Event reconciliation: duplicate removal and weekly-show cleanup.

Both passes read a full snapshot of the events collection, decide what to
delete in memory, then delete records one at a time. Deletes are not
transactional: a crash mid-pass leaves the remaining records in place and
the next run picks them up again. Records flagged ``manuallyEdited`` are
never deleted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Protocol

from pickem import Event
from pickem.classifier import is_weekly_show

PREFERRED_SOURCE = "profightdb"


class EventStore(Protocol):
    def list_events(self) -> list[Event]: ...

    def get_event(self, event_id: str) -> Event | None: ...

    def delete_event(self, event_id: str) -> None: ...


@dataclass
class DuplicateGroup:
    normalized_name: str
    keep: Event
    delete: list[Event] = field(default_factory=list)
    protected: list[Event] = field(default_factory=list)


@dataclass
class ReconcilePlan:
    groups: list[DuplicateGroup] = field(default_factory=list)

    @property
    def to_delete(self) -> list[Event]:
        return [e for g in self.groups for e in g.delete]


@dataclass
class ReconcileResult:
    groups: int = 0
    deleted: int = 0
    protected: int = 0
    errors: list[str] = field(default_factory=list)


@dataclass
class CleanupResult:
    found: int = 0
    deleted: int = 0
    protected: int = 0
    remaining_ppvs: int = 0
    errors: list[str] = field(default_factory=list)


def normalize_name(name: str) -> str:
    """Lower-case and strip everything but ASCII letters and digits."""
    return re.sub(r"[^a-z0-9]", "", name.lower())


def group_duplicates(events: list[Event]) -> dict[str, list[Event]]:
    """Group events by normalized name, keeping only groups with more than one record."""
    groups: dict[str, list[Event]] = {}
    for event in events:
        groups.setdefault(normalize_name(event.name), []).append(event)
    return {name: group for name, group in groups.items() if len(group) > 1}


def rank_group(group: list[Event]) -> list[Event]:
    """Order a duplicate group best-first: most matches, then the preferred source."""
    return sorted(group, key=lambda e: (-e.match_count, e.source != PREFERRED_SOURCE))


def plan_duplicate_removal(events: list[Event]) -> ReconcilePlan:
    plan = ReconcilePlan()
    for normalized_name, group in group_duplicates(events).items():
        keep, *rest = rank_group(group)
        plan.groups.append(DuplicateGroup(
            normalized_name=normalized_name,
            keep=keep,
            delete=[e for e in rest if not e.manually_edited],
            protected=[e for e in rest if e.manually_edited],
        ))
    return plan


def remove_duplicate_events(store: EventStore) -> ReconcileResult:
    """Delete inferior copies of events whose names collide after normalization."""
    plan = plan_duplicate_removal(store.list_events())
    result = ReconcileResult(groups=len(plan.groups))
    print(f"Found {len(plan.groups)} duplicate event groups")

    for group in plan.groups:
        versions = 1 + len(group.delete) + len(group.protected)
        print(f"\n\"{group.keep.name}\" ({versions} versions):")
        print(f"  Keeping: {_describe(group.keep)}")

        for event in group.protected:
            print(f"  Skipping: {event.name} - manually edited (protected)")
            result.protected += 1

        for event in group.delete:
            if _delete(store, event, result.errors):
                print(f"  Deleted: {_describe(event)}")
                result.deleted += 1

    return result


def cleanup_weekly_shows(store: EventStore) -> CleanupResult:
    """Delete stored events whose names identify them as weekly TV shows."""
    weekly: list[Event] = []
    ppvs: list[Event] = []
    for event in store.list_events():
        (weekly if is_weekly_show(event.name) else ppvs).append(event)

    result = CleanupResult(found=len(weekly), remaining_ppvs=len(ppvs))
    print(f"Found {len(weekly)} weekly shows saved as PPVs")
    print(f"Found {len(ppvs)} legitimate PPVs")

    for event in weekly:
        if event.manually_edited:
            print(f"  Skipping {event.name} - manually edited (protected)")
            result.protected += 1
            continue
        if _delete(store, event, result.errors):
            print(f"  Deleted: {event.name} ({event.date})")
            result.deleted += 1

    return result


def remove_event_if_empty(store: EventStore, event_id: str) -> str:
    """Delete one event only if it has no matches.

    Returns "deleted", "missing", "has_matches", or "protected".
    """
    event = store.get_event(event_id)
    if event is None:
        return "missing"
    if event.manually_edited:
        return "protected"
    if event.match_count > 0:
        return "has_matches"
    store.delete_event(event_id)
    return "deleted"


def _delete(store: EventStore, event: Event, errors: list[str]) -> bool:
    try:
        store.delete_event(event.id)
        return True
    except Exception as e:
        error_msg = f"Failed to delete {event.name} ({event.id}): {e}"
        print(f"  ERROR: {error_msg}")
        errors.append(error_msg)
        return False


def _describe(event: Event) -> str:
    return f"{event.name} ({event.match_count} matches, source: {event.source})"
