"""Cagematch scraper for recent events and match cards."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace

import requests
from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from pickem import Event, Match
from pickem.classifier import is_ppv_name
from pickem.dates import format_readable

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)
HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}
REQUEST_DELAY = 2  # seconds between requests (be respectful)

BASE_URL = "https://www.cagematch.net"
EVENTS_URL = f"{BASE_URL}/?id=1"

# WWE, AEW, NJPW, TNA, ROH
MAJOR_PROMOTION_IDS = ("1", "2287", "7", "5", "122")
MAJOR_PROMOTION_KEYWORDS = ("WWE", "AEW", "NJPW")
PROMO_SLUGS = {"1": "wwe", "2287": "aew", "7": "njpw", "5": "tna", "122": "roh"}

_PROMOTION_HREF = re.compile(r"^\?id=8&nr=(\d+)$")
_EVENT_HREF = re.compile(r"^\?id=1&nr=(\d+)$")
_WRESTLER_HREF = re.compile(r"\?id=2&nr=(\d+)")
_LIST_DATE = re.compile(r"^\d{2}\.\d{2}\.\d{4}$")
_RESULT_VERBS = ("defeats", "wins by", " wins ", "beats")
_TAG_KEYWORDS = ("tag", "trios", "six man", "8 man")


@dataclass
class EventDetails:
    """Fields read from a single event card page."""

    date: str | None = None
    arena: str | None = None
    location: str | None = None
    banner_url: str | None = None
    matches: list[Match] = field(default_factory=list)

    @property
    def venue(self) -> str | None:
        parts = [p for p in (self.arena, self.location) if p]
        return ", ".join(parts) or None


def fetch_html(url: str) -> str:
    """GET a page and return its body. Raises on non-2xx or transport errors."""
    response = requests.get(url, headers=HEADERS, timeout=30)
    response.raise_for_status()
    return response.text


def scrape_recent_events() -> list[Event]:
    """Fetch the recent events page and return events from major promotions."""
    return parse_major_events(fetch_html(EVENTS_URL))


def parse_major_events(html: str) -> list[Event]:
    return filter_major_events(parse_events_from_html(html))


def parse_events_from_html(html: str) -> list[Event]:
    """Parse event stubs from an event-list page, one per event id."""
    soup = BeautifulSoup(html, "html.parser")
    events: list[Event] = []
    seen: set[str] = set()

    for row in soup.find_all("tr", class_=re.compile(r"^TRow")):
        event = _parse_event_row(row)
        if event and event.cagematch_event_id not in seen:
            seen.add(event.cagematch_event_id)
            events.append(event)

    return events


def _parse_event_row(row: Tag) -> Event | None:
    promo_link = row.find("a", href=_PROMOTION_HREF)
    event_link = row.find("a", href=_EVENT_HREF)
    if not promo_link or not event_link:
        return None

    name = event_link.get_text(strip=True)
    if not name:
        return None

    promotion_id = _PROMOTION_HREF.match(promo_link["href"]).group(1)
    logo = promo_link.find("img")
    promotion_name = logo.get("alt") if logo else None
    event_id = _EVENT_HREF.match(event_link["href"]).group(1)

    date = None
    for cell in row.find_all("td"):
        text = cell.get_text(strip=True)
        if _LIST_DATE.match(text):
            date = text
            break

    return Event(
        id=f"cagematch-{event_id}",
        name=name,
        date=date,
        promotion_id=promotion_id,
        promotion_name=promotion_name,
        promo_id=PROMO_SLUGS.get(promotion_id),
        is_ppv=is_ppv_name(name),
        source="cagematch",
        cagematch_event_id=event_id,
    )


def filter_major_events(events: list[Event]) -> list[Event]:
    """Keep events from the major promotions allow-list."""
    return [e for e in events if _is_major_promotion(e)]


def _is_major_promotion(event: Event) -> bool:
    if event.promotion_id in MAJOR_PROMOTION_IDS:
        return True
    name = (event.promotion_name or "").upper()
    return any(keyword in name for keyword in MAJOR_PROMOTION_KEYWORDS)


def scrape_event_card(event: Event) -> Event:
    """Fetch an event's card page and merge its details into the event."""
    url = f"{BASE_URL}/?id=1&nr={event.cagematch_event_id}&page=2"
    details = parse_event_card(fetch_html(url))
    return replace(
        event,
        date=format_readable(details.date or event.date),
        venue=details.venue or event.venue,
        banner_url=details.banner_url or event.banner_url,
        # Keep existing matches when the card is not up yet
        matches=details.matches or event.matches,
    )


def parse_event_card(html: str) -> EventDetails:
    """Parse the information box and match list of an event card page."""
    soup = BeautifulSoup(html, "html.parser")
    details = EventDetails(
        date=_information_box_value(soup, "Date:"),
        arena=_information_box_value(soup, "Arena:"),
        location=_information_box_value(soup, "Location:"),
    )

    logo = soup.find("img", class_="ImagePromotionLogo_normal")
    if logo and logo.get("src"):
        details.banner_url = _absolute_url(logo["src"])

    matches_div = soup.find("div", class_="Matches")
    if matches_div:
        for index, match_div in enumerate(matches_div.find_all("div", class_="Match", recursive=False), start=1):
            match = _parse_match(match_div, index)
            if match:
                details.matches.append(match)

    return details


def _information_box_value(soup: BeautifulSoup, title: str) -> str | None:
    for title_div in soup.find_all("div", class_="InformationBoxTitle"):
        if title_div.get_text(strip=True) != title:
            continue
        contents = title_div.find_next_sibling("div", class_="InformationBoxContents")
        if contents:
            return contents.get_text(strip=True) or None
    return None


def _parse_match(match_div: Tag, index: int) -> Match | None:
    type_div = match_div.find("div", class_="MatchType")
    match_type = type_div.get_text(strip=True) if type_div else "Unknown"

    results = match_div.find("div", class_="MatchResults")
    if not results:
        return None

    full_text = results.get_text()
    wrestlers = _extract_wrestlers(results)
    main = [w for w in wrestlers if not w["is_manager"]]

    is_tag = (
        any(k in match_type.lower() for k in _TAG_KEYWORDS)
        or " & " in full_text
        or len(wrestlers) > 2
    )

    verb = next((v for v in _RESULT_VERBS if v in full_text), None)
    winner = None
    if verb:
        verb_at = full_text.index(verb)
        side1 = [w for w in main if w["position"] < verb_at]
        side2 = [w for w in main if w["position"] > verb_at]
    elif is_tag and len(main) >= 4:
        midpoint = len(main) // 2
        side1, side2 = main[:midpoint], main[midpoint:]
    else:
        side1, side2 = main[:1], main[1:2]

    if not side1 or not side2:
        return None

    p1 = " & ".join(w["name"] for w in side1)
    p2 = " & ".join(w["name"] for w in side2)
    if verb:
        winner = p1

    time_match = re.search(r"\((\d+:\d+)\)", full_text)

    return Match(
        id=index,
        p1=p1,
        p2=p2,
        title=match_type,
        type=match_type,
        winner=winner,
        time=time_match.group(1) if time_match else None,
        p1_members=[_member(w) for w in side1],
        p2_members=[_member(w) for w in side2],
    )


def _extract_wrestlers(results: Tag) -> list[dict]:
    """Walk the results markup, recording each wrestler link and its text offset."""
    wrestlers: list[dict] = []
    text_so_far = ""
    for node in results.descendants:
        if isinstance(node, Comment):
            continue
        if isinstance(node, NavigableString):
            text_so_far += str(node)
        elif node.name == "a":
            found = _WRESTLER_HREF.search(node.get("href", ""))
            if not found:
                continue
            wrestlers.append({
                "id": found.group(1),
                "name": node.get_text(strip=True),
                "position": len(text_so_far),
                "is_manager": text_so_far.rstrip().endswith(("(w/", "(")),
            })
    return wrestlers


def _member(wrestler: dict) -> dict:
    return {
        "name": wrestler["name"],
        "cagematchId": wrestler["id"],
        "image": f"{BASE_URL}/site/main/img/wrestler/{wrestler['id']}.jpg",
    }


def _absolute_url(src: str) -> str:
    return src if src.startswith("http") else f"{BASE_URL}{src}"
