"""ICS calendar generation for stored PPV events."""

from __future__ import annotations

from datetime import date, timedelta

from icalendar import Alarm, Calendar
from icalendar import Event as CalendarEvent

from pickem import Event
from pickem.dates import parse_event_date


def create_ppv_calendar(events: list[Event], today: date | None = None) -> Calendar:
    """Create an ICS calendar with one all-day entry per dated PPV."""
    today = today or date.today()

    cal = Calendar()
    cal.add("prodid", "-//Wrestling Pick'em//PPV Calendar//EN")
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("method", "PUBLISH")
    cal.add("x-wr-calname", "Wrestling PPVs")
    # Refresh interval hint for calendar clients (1 day)
    cal.add("x-published-ttl", "P1D")

    for event in events:
        if not event.is_ppv:
            continue
        event_date = parse_event_date(event.date)
        if event_date is None:
            continue
        cal.add_component(_create_entry(event, event_date, today))

    return cal


def _create_entry(event: Event, event_date: date, today: date) -> CalendarEvent:
    entry = CalendarEvent()
    summary = f"{event.promotion_name}: {event.name}" if event.promotion_name else event.name
    entry.add("summary", summary)
    entry.add("dtstart", event_date)
    entry.add("dtend", event_date + timedelta(days=1))
    entry.add("uid", f"{event.id}@pickem")

    description = f"{event.match_count} matches announced" if event.matches else "Card not announced yet"
    for match in event.matches:
        description += f"\n- {match.p1} vs {match.p2}"
        if match.title:
            description += f" ({match.title})"
    entry.add("description", description)

    if event.venue:
        entry.add("location", event.venue)

    if event_date >= today:
        alarm = Alarm()
        alarm.add("action", "DISPLAY")
        alarm.add("description", f"{event.name} is tomorrow - lock in your picks!")
        alarm.add("trigger", timedelta(days=-1))
        entry.add_component(alarm)

    return entry


def validate_ics(data: bytes) -> bool:
    """Basic validation that ICS data is well-formed."""
    text = data.decode("utf-8", errors="replace")
    return text.startswith("BEGIN:VCALENDAR") and "END:VCALENDAR" in text
