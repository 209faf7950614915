"""PPV audit: which premium events in the current window still lack a card."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from pickem import Event
from pickem.dates import add_months, parse_event_date


@dataclass
class AuditReport:
    ppvs: list[Event] = field(default_factory=list)
    with_matches: list[Event] = field(default_factory=list)
    without_matches: list[Event] = field(default_factory=list)
    manually_edited: list[Event] = field(default_factory=list)


def audit_ppvs(events: list[Event], today: date | None = None) -> AuditReport:
    """Bucket PPVs dated from six months ago to three months ahead."""
    today = today or date.today()
    start = add_months(today, -6)
    end = add_months(today, 3)

    dated = [(parse_event_date(e.date), e) for e in events if e.is_ppv]
    in_window = [(d, e) for d, e in dated if d is not None and start <= d <= end]
    in_window.sort(key=lambda pair: pair[0])

    report = AuditReport(ppvs=[e for _, e in in_window])
    for event in report.ppvs:
        if event.manually_edited:
            report.manually_edited.append(event)
        elif event.match_count > 0:
            report.with_matches.append(event)
        else:
            report.without_matches.append(event)
    return report


def format_audit_report(report: AuditReport) -> str:
    lines = [f"Found {len(report.ppvs)} PPVs (6 months past to 3 months future)", "=" * 80]

    lines.append(f"\nPPVs WITH matches ({len(report.with_matches)}):")
    lines.append("-" * 80)
    for e in report.with_matches:
        lines.append(f"  {e.name:<50} | {e.match_count:>2} matches | {e.date} | {e.promotion_name} | {e.source}")

    lines.append(f"\nPPVs WITHOUT matches ({len(report.without_matches)}):")
    lines.append("-" * 80)
    for e in report.without_matches:
        lines.append(f"  {e.name:<50} | {e.date} | {e.promotion_name} | {e.source}")
    if not report.without_matches:
        lines.append("  (None - all PPVs have matches!)")

    lines.append(f"\nManually edited PPVs ({len(report.manually_edited)}):")
    lines.append("-" * 80)
    for e in report.manually_edited:
        lines.append(f"  {e.name:<50} | {e.match_count:>2} matches | {e.date} | {e.promotion_name}")
    if not report.manually_edited:
        lines.append("  (None)")

    total = len(report.ppvs)
    lines.append("\n" + "=" * 80)
    lines.append("\nSummary:")
    lines.append(f"  Total PPVs: {total}")
    lines.append(f"  With matches: {len(report.with_matches)} ({_percent(len(report.with_matches), total)}%)")
    lines.append(f"  Without matches: {len(report.without_matches)} ({_percent(len(report.without_matches), total)}%)")
    lines.append(f"  Manually edited: {len(report.manually_edited)}")

    if report.without_matches:
        lines.append("\nRecommendations:")
        lines.append("  1. Run scrape_profightdb.py to fill in cards for events without matches")
        lines.append("  2. Check whether events are being filtered out as weekly shows")
        lines.append("  3. Verify event names match between sources")

    return "\n".join(lines)


def _percent(part: int, total: int) -> int:
    return round(part / total * 100) if total else 0
