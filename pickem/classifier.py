"""Weekly TV show detection.

Scraped event lists mix one-off premium events with weekly television
episodes and tapings. The rules below decide which is which from the
event name alone. They are checked in order; the first match wins.

A rule may carry exceptions: words that, when they directly follow the
pattern, mean the name belongs to a premium event of the same brand
("NXT Takeover", "Impact Slammiversary").
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

FRANCHISE = "franchise"
EPISODE = "episode"
NON_TELEVISED = "non-televised"


@dataclass(frozen=True)
class WeeklyShowRule:
    name: str
    pattern: str
    label: str
    exceptions: tuple[str, ...] = ()
    _regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        source = self.pattern
        if self.exceptions:
            source += rf"(?!\s*({'|'.join(self.exceptions)}))"
        object.__setattr__(self, "_regex", re.compile(source, re.IGNORECASE))

    def matches(self, event_name: str) -> bool:
        return self._regex.search(event_name) is not None


NXT_PREMIUM_EVENTS = ("takeover", "stand", "deliver", "deadline", "vengeance", "battleground")
IMPACT_PREMIUM_EVENTS = ("slammiversary", "bound", "hard", "sacrifice", "rebellion", "against", "genesis")

WEEKLY_SHOW_RULES: tuple[WeeklyShowRule, ...] = (
    WeeklyShowRule("dynamite", r"dynamite", FRANCHISE),
    WeeklyShowRule("collision", r"collision", FRANCHISE),
    WeeklyShowRule("rampage", r"rampage", FRANCHISE),
    WeeklyShowRule("raw-episode", r"raw\s*#", EPISODE),
    WeeklyShowRule("monday-night-raw", r"monday\s*night\s*raw", FRANCHISE),
    WeeklyShowRule("smackdown-episode", r"smackdown\s*#", EPISODE),
    WeeklyShowRule("friday-night-smackdown", r"friday\s*night\s*smackdown", FRANCHISE),
    WeeklyShowRule("nxt-episode", r"nxt\s*#", EPISODE),
    WeeklyShowRule("nxt", r"nxt", FRANCHISE, NXT_PREMIUM_EVENTS),
    WeeklyShowRule("main-event", r"main\s*event", FRANCHISE),
    WeeklyShowRule("superstars", r"superstars", FRANCHISE),
    WeeklyShowRule("thunder", r"thunder", FRANCHISE),
    WeeklyShowRule("nitro", r"nitro", FRANCHISE),
    WeeklyShowRule("impact", r"impact", FRANCHISE, IMPACT_PREMIUM_EVENTS),
    WeeklyShowRule("dark", r"dark(?:\s|$)", FRANCHISE),
    WeeklyShowRule("elevation", r"elevation", FRANCHISE),
    WeeklyShowRule("world-tag-league-night", r"world\s*tag\s*league\s*-\s*tag\s*\d+", EPISODE),
    WeeklyShowRule("strong", r"strong", FRANCHISE),
    WeeklyShowRule("road-to", r"road\s*to", NON_TELEVISED),
    WeeklyShowRule("tv-episode", r"tv\s*#", EPISODE),
    WeeklyShowRule("taping", r"taping", NON_TELEVISED),
    WeeklyShowRule("live-event", r"live\s*event", NON_TELEVISED),
    WeeklyShowRule("numbered-episode", r"#\d+", EPISODE),
)


def match_rule(event_name: str, rules: tuple[WeeklyShowRule, ...] = WEEKLY_SHOW_RULES) -> WeeklyShowRule | None:
    """Return the first rule that marks this name as a weekly show, if any."""
    for rule in rules:
        if rule.matches(event_name):
            return rule
    return None


def is_weekly_show(event_name: str) -> bool:
    return match_rule(event_name) is not None


def is_ppv_name(event_name: str) -> bool:
    return not is_weekly_show(event_name)
