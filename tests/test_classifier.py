"""Tests for weekly TV show detection."""

from __future__ import annotations

import pytest

from pickem.classifier import (
    EPISODE,
    FRANCHISE,
    NON_TELEVISED,
    WEEKLY_SHOW_RULES,
    WeeklyShowRule,
    is_ppv_name,
    is_weekly_show,
    match_rule,
)


class TestWeeklyShows:
    @pytest.mark.parametrize(
        "name",
        [
            "AEW Dynamite #312",
            "AEW Collision",
            "Collision #50",
            "AEW Rampage",
            "WWE Monday Night RAW #1742",
            "Friday Night SmackDown",
            "WWE SmackDown #1350",
            "NXT #800",
            "WWE NXT",
            "Impact! #1050",
            "AEW Dark Elevation",
            "NJPW Strong",
            "NJPW Road To Wrestle Kingdom",
            "WWE Live Event",
            "AEW TV Taping",
            "World Tag League - Tag 5",
        ],
    )
    def test_detected(self, name: str) -> None:
        assert is_weekly_show(name)
        assert not is_ppv_name(name)

    @pytest.mark.parametrize(
        "name",
        [
            "WrestleMania 42",
            "Royal Rumble 2026",
            "AEW All In 2026",
            "Wrestle Kingdom 20",
            "NXT TakeOver: Toronto",
            "NXT Stand & Deliver 2026",
            "NXT Deadline",
            "IMPACT Slammiversary",
            "Impact Bound For Glory",
            "Impact Hard To Kill",
            "Impact Rebellion",
            "Forbidden Door",
        ],
    )
    def test_premium_events_pass(self, name: str) -> None:
        assert not is_weekly_show(name)
        assert is_ppv_name(name)

    def test_case_insensitive(self) -> None:
        assert is_weekly_show("aew DYNAMITE")

    def test_dark_needs_word_end(self) -> None:
        assert is_weekly_show("AEW Dark")
        assert not is_weekly_show("Darkness Falls")

    def test_main_event_rule_catches_saturday_nights_main_event(self) -> None:
        rule = match_rule("Saturday Night's Main Event")
        assert rule is not None
        assert rule.name == "main-event"


class TestRules:
    def test_first_matching_rule_wins(self) -> None:
        rule = match_rule("WWE NXT #800")
        assert rule.name == "nxt-episode"
        assert rule.label == EPISODE

    def test_labels(self) -> None:
        assert match_rule("AEW Dynamite").label == FRANCHISE
        assert match_rule("House Show Taping").label == NON_TELEVISED

    def test_no_rule_for_premium_event(self) -> None:
        assert match_rule("SummerSlam 2026") is None

    def test_custom_rules(self) -> None:
        rules = (WeeklyShowRule("worlds", r"worlds", FRANCHISE, ("end",)),)
        assert match_rule("Worlds Collide", rules) is not None
        assert match_rule("Worlds End 2026", rules) is None

    def test_every_rule_has_known_label(self) -> None:
        assert {r.label for r in WEEKLY_SHOW_RULES} <= {FRANCHISE, EPISODE, NON_TELEVISED}
