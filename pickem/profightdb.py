"""ProFightDB scraper for premium event listings and match cards."""

from __future__ import annotations

import re
from datetime import date

import requests
from bs4 import BeautifulSoup, Tag

from pickem import Event, Match
from pickem.classifier import is_weekly_show
from pickem.dates import add_months, parse_event_date
from pickem.scraper import fetch_html

BASE_URL = "http://www.profightdb.com"
LISTING_PAGES = 5
SOURCE = "profightdb"

# Matched in order against the upper-cased promotion name
PROMOTION_MAP: dict[str, tuple[str, str | None]] = {
    "WWE": ("wwe", "1"),
    "AEW": ("aew", "2287"),
    "NJPW": ("njpw", "7"),
    "TNA": ("tna", "5"),
    "IMPACT WRESTLING": ("tna", "5"),
    "ROH": ("roh", "122"),
    "RING OF HONOR": ("roh", "122"),
    "STARDOM": ("stardom", None),
    "CMLL": ("cmll", None),
    "AAA": ("aaa", None),
    "GCW": ("gcw", None),
    "MLW": ("mlw", None),
}

_DATE_HREF = re.compile(r"^/this-day-in-history/[^/]+\.html$")
_PROMOTION_HREF = re.compile(r"^/cards/[^/]+-cards[^/]*\.html$")
_EVENT_HREF = re.compile(r"^/cards/([^/]+)/([^/]+)\.html$")
_LOCATION_HREF = re.compile(r"^/locations[^\"']*\.html$")
_WRESTLER_HREF = re.compile(r"^/wrestlers/([^/]+)\.html$")
_TITLE_TEXT = re.compile(r"Championship|Title", re.IGNORECASE)
_WRESTLER_IMAGE_SRC = re.compile(r"^/img/wrestlers/thumbs-600/.+\.jpg$", re.IGNORECASE)


def listing_url(page: int) -> str:
    return f"{BASE_URL}/cards/pg{page}-yes.html?order=&type="


def map_promotion(promotion_name: str) -> tuple[str, str | None] | None:
    """Map a ProFightDB promotion label to (promo slug, Cagematch promotion id)."""
    upper = promotion_name.upper()
    for key, value in PROMOTION_MAP.items():
        if key in upper:
            return value
    return None


def parse_listing_date(text: str) -> str | None:
    """Convert "Jan 4th 2026" to "Jan 4, 2026"."""
    parsed = parse_event_date(text)
    if parsed is None:
        return None
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"


def parse_card_listing(html: str, today: date | None = None) -> list[Event]:
    """Parse premium events from a cards listing page.

    Rows from unknown promotions, weekly shows, and events more than six
    months old are skipped. Each event slug is emitted once.
    """
    today = today or date.today()
    cutoff = add_months(today, -6)
    soup = BeautifulSoup(html, "html.parser")
    events: list[Event] = []
    seen: set[str] = set()

    for row in soup.find_all("tr"):
        if "head" in (row.get("class") or []):
            continue

        event = _parse_listing_row(row)
        if not event or event.id in seen:
            continue

        if is_weekly_show(event.name):
            print(f"  Skipping weekly show: {event.name}")
            continue

        event_date = parse_event_date(event.date)
        if event_date and event_date < cutoff:
            continue

        seen.add(event.id)
        events.append(event)

    return events


def _parse_listing_row(row: Tag) -> Event | None:
    date_link = row.find("a", href=_DATE_HREF)
    promo_link = row.find("a", href=_PROMOTION_HREF)
    event_link = row.find("a", href=_EVENT_HREF)
    if not date_link or not promo_link or not event_link:
        return None

    strong = promo_link.find("strong")
    promotion_name = (strong or promo_link).get_text(strip=True)
    promotion = map_promotion(promotion_name)
    if not promotion:
        return None

    name = event_link.get_text(strip=True)
    if not name:
        return None

    promo_slug, event_slug = _EVENT_HREF.match(event_link["href"]).groups()
    locations = [a.get_text(strip=True) for a in row.find_all("a", href=_LOCATION_HREF)]

    return Event(
        id=f"profightdb-{event_slug}",
        name=name,
        date=parse_listing_date(date_link.get_text(strip=True)),
        promotion_id=promotion[1],
        promotion_name=promotion_name,
        promo_id=promotion[0],
        is_ppv=True,
        source=SOURCE,
        venue=", ".join(loc for loc in locations if loc) or None,
        profightdb_url=f"{BASE_URL}/cards/{promo_slug}/{event_slug}.html",
    )


def parse_match_card(html: str) -> list[Match]:
    """Parse the "Matches for ..." table of an event page."""
    soup = BeautifulSoup(html, "html.parser")
    heading = soup.find(lambda tag: tag.name == "h2" and "matches for" in tag.get_text().lower())
    if not heading:
        return []
    table = heading.find_next("table")
    if not table:
        return []

    matches: list[Match] = []
    for row in table.find_all("tr"):
        if "head" in (row.get("class") or []):
            continue
        cells = row.find_all("td")
        if len(cells) < 4:
            continue

        winners = _wrestler_links(cells[1])
        losers = _wrestler_links(cells[3])
        if not winners or not losers:
            continue

        duration = _cell_text(cells, 4)
        match_type = _cell_text(cells, 5)
        if match_type and len(match_type) < 2:
            match_type = None

        title_text = _cell_text(cells, 6)
        title = title_text if title_text and _TITLE_TEXT.search(title_text) else None

        match_id = len(matches) + 1
        p1 = " & ".join(w["name"] for w in winners)
        matches.append(Match(
            id=match_id,
            p1=p1,
            p2=" & ".join(w["name"] for w in losers),
            title=title or match_type or f"Match {match_id}",
            type=match_type,
            winner=p1,
            time=duration,
            p1_members=winners,
            p2_members=losers,
        ))

    return matches


def _wrestler_links(cell: Tag) -> list[dict]:
    members = []
    for link in cell.find_all("a", href=_WRESTLER_HREF):
        name = link.get_text(strip=True)
        if name:
            slug = _WRESTLER_HREF.match(link["href"]).group(1)
            members.append({"name": name, "profightdbSlug": slug, "image": None})
    return members


def _cell_text(cells: list[Tag], index: int) -> str | None:
    if index >= len(cells):
        return None
    text = cells[index].get_text(" ", strip=True).replace("\xa0", " ")
    text = re.sub(r"[_*]", "", text).strip()
    return text or None


def parse_wrestler_image(html: str) -> str | None:
    """Find the profile photo on a wrestler page."""
    soup = BeautifulSoup(html, "html.parser")
    img = soup.find("img", src=_WRESTLER_IMAGE_SRC)
    if img:
        return f"{BASE_URL}{img['src']}"
    return None


def fetch_wrestler_image(slug: str) -> str | None:
    """Fetch a wrestler's photo URL. Images are optional, so failures return None."""
    try:
        return parse_wrestler_image(fetch_html(f"{BASE_URL}/wrestlers/{slug}.html"))
    except requests.RequestException:
        return None


def attach_wrestler_images(matches: list[Match], images: dict[str, str]) -> None:
    """Fill member and headline images from a slug -> URL map."""
    for match in matches:
        for member in match.p1_members + match.p2_members:
            slug = member.get("profightdbSlug")
            if slug in images:
                member["image"] = images[slug]


def wrestler_slugs(matches: list[Match]) -> list[str]:
    slugs: list[str] = []
    for match in matches:
        for member in match.p1_members + match.p2_members:
            slug = member.get("profightdbSlug")
            if slug and slug not in slugs:
                slugs.append(slug)
    return slugs
