"""Wrestling Pick'em — shared data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Match:
    """A single match on an event card."""

    id: int
    p1: str
    p2: str
    title: str | None = None
    type: str | None = None
    winner: str | None = None
    time: str | None = None
    p1_members: list[dict] = field(default_factory=list)
    p2_members: list[dict] = field(default_factory=list)

    @property
    def is_team_match(self) -> bool:
        return len(self.p1_members) > 1 or len(self.p2_members) > 1

    def to_doc(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "p1": self.p1,
            "p2": self.p2,
            "title": self.title,
            "type": self.type,
            "winner": self.winner,
            "time": self.time,
            "p1Members": self.p1_members,
            "p2Members": self.p2_members,
            "p1Image": self.p1_members[0].get("image") if self.p1_members else None,
            "p2Image": self.p2_members[0].get("image") if self.p2_members else None,
            "isTeamMatch": self.is_team_match,
        }

    @classmethod
    def from_doc(cls, data: dict[str, Any]) -> Match:
        return cls(
            id=data.get("id", 0),
            p1=data.get("p1", ""),
            p2=data.get("p2", ""),
            title=data.get("title"),
            type=data.get("type"),
            winner=data.get("winner"),
            time=data.get("time"),
            p1_members=list(data.get("p1Members") or []),
            p2_members=list(data.get("p2Members") or []),
        )


@dataclass
class Event:
    """A wrestling event as stored under artifacts/{appId}/public/data/events."""

    id: str
    name: str
    date: str | None = None
    promotion_id: str | None = None
    promotion_name: str | None = None
    promo_id: str | None = None
    matches: list[Match] = field(default_factory=list)
    is_ppv: bool = True
    manually_edited: bool = False
    source: str = "unknown"
    venue: str | None = None
    cagematch_event_id: str | None = None
    profightdb_url: str | None = None
    poster_url: str | None = None
    banner_url: str | None = None

    @property
    def match_count(self) -> int:
        return len(self.matches)

    def to_doc(self) -> dict[str, Any]:
        """Convert to a Firestore document.

        Unset fields and an empty card are left out so a merge-upsert never
        blanks data already stored for the event.
        """
        doc: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "isPPV": self.is_ppv,
            "source": self.source,
        }
        optional = {
            "date": self.date,
            "promotionId": self.promotion_id,
            "promotionName": self.promotion_name,
            "promoId": self.promo_id,
            "venue": self.venue,
            "cagematchEventId": self.cagematch_event_id,
            "profightdbUrl": self.profightdb_url,
            "posterUrl": self.poster_url,
            "bannerUrl": self.banner_url,
        }
        doc.update({k: v for k, v in optional.items() if v})
        if self.matches:
            doc["matches"] = [m.to_doc() for m in self.matches]
        if self.manually_edited:
            doc["manuallyEdited"] = True
        return doc

    @classmethod
    def from_doc(cls, doc_id: str, data: dict[str, Any]) -> Event:
        return cls(
            id=doc_id,
            name=data.get("name") or "",
            date=data.get("date"),
            promotion_id=data.get("promotionId"),
            promotion_name=data.get("promotionName"),
            promo_id=data.get("promoId"),
            matches=[Match.from_doc(m) for m in data.get("matches") or []],
            is_ppv=data.get("isPPV") is not False,
            manually_edited=bool(data.get("manuallyEdited", False)),
            source=data.get("source") or "unknown",
            venue=data.get("venue"),
            cagematch_event_id=data.get("cagematchEventId"),
            profightdb_url=data.get("profightdbUrl"),
            poster_url=data.get("posterUrl"),
            banner_url=data.get("bannerUrl"),
        )


@dataclass
class User:
    """A pick'em player profile."""

    id: str
    display_name: str | None = None
    subscriptions: list[str] = field(default_factory=list)
    score: int = 0
    is_admin: bool = False

    @classmethod
    def from_doc(cls, doc_id: str, data: dict[str, Any]) -> User:
        return cls(
            id=doc_id,
            display_name=data.get("displayName"),
            subscriptions=list(data.get("subscriptions") or []),
            score=int(data.get("score") or 0),
            is_admin=bool(data.get("isAdmin", False)),
        )
