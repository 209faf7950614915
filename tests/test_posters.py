"""Tests for the Wikipedia poster lookup."""

from __future__ import annotations

import json

import pytest
import requests

from pickem import posters
from pickem.posters import (
    events_missing_posters,
    find_poster,
    parse_page_thumbnail,
    parse_search_title,
    search_term,
    update_posters,
)

from conftest import InMemoryStore, make_event, read_fixture

POSTER = (
    "https://upload.wikimedia.org/wikipedia/en/thumb/a/ab/Royal_Rumble_2026_poster.jpg"
    "/1000px-Royal_Rumble_2026_poster.jpg"
)


@pytest.fixture
def search_data() -> list:
    return json.loads(read_fixture("wikipedia_search.json"))


@pytest.fixture
def pageimages_data() -> dict:
    return json.loads(read_fixture("wikipedia_pageimages.json"))


@pytest.fixture
def wikipedia(monkeypatch: pytest.MonkeyPatch, search_data: list, pageimages_data: dict) -> list[dict]:
    calls: list[dict] = []

    def fake_fetch(params: dict) -> object:
        calls.append(params)
        return search_data if params["action"] == "opensearch" else pageimages_data

    monkeypatch.setattr(posters, "fetch_json", fake_fetch)
    return calls


class TestParsing:
    def test_search_term_drops_year(self) -> None:
        assert search_term("Royal Rumble 2026") == "Royal Rumble"
        assert search_term("Wrestle Kingdom 20") == "Wrestle Kingdom 20"
        assert search_term("Forbidden Door") == "Forbidden Door"

    def test_search_title(self, search_data: list) -> None:
        assert parse_search_title(search_data) == "Royal Rumble"

    def test_search_without_results(self) -> None:
        assert parse_search_title(["Nothing", [], [], []]) is None
        assert parse_search_title({"error": "bad request"}) is None

    def test_page_thumbnail(self, pageimages_data: dict) -> None:
        assert parse_page_thumbnail(pageimages_data) == POSTER

    def test_page_without_thumbnail(self) -> None:
        data = {"query": {"pages": {"1": {"pageid": 1, "title": "Royal Rumble"}}}}
        assert parse_page_thumbnail(data) is None
        assert parse_page_thumbnail({}) is None


class TestFindPoster:
    def test_finds_lead_image(self, wikipedia: list[dict]) -> None:
        assert find_poster("Royal Rumble 2026") == POSTER
        assert wikipedia[0]["search"] == "Royal Rumble"
        assert wikipedia[1]["titles"] == "Royal Rumble"
        assert wikipedia[1]["prop"] == "pageimages"

    def test_no_page_skips_image_lookup(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []

        def fake_fetch(params: dict) -> object:
            calls.append(params)
            return ["Nothing", [], [], []]

        monkeypatch.setattr(posters, "fetch_json", fake_fetch)
        assert find_poster("Obscure Show") is None
        assert len(calls) == 1

    def test_request_failure_returns_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def boom(params: dict) -> object:
            raise requests.ConnectionError("offline")

        monkeypatch.setattr(posters, "fetch_json", boom)
        assert find_poster("Royal Rumble 2026") is None


class TestUpdatePosters:
    def test_candidates(self) -> None:
        events = [
            make_event("a", "Royal Rumble 2026", date="Jan 31, 2026"),
            make_event("b", "WrestleMania 42", date="Apr 18, 2026"),
            make_event("c", "Has Poster", date="Mar 1, 2026", poster_url="https://img/p.jpg"),
            make_event("d", "Edited By Admin", date="Mar 2, 2026", manually_edited=True),
            make_event("e", "AEW Dynamite #312", date="Mar 3, 2026", is_ppv=False),
            make_event("f", "Undated Show"),
        ]
        assert [e.id for e in events_missing_posters(events)] == ["b", "a", "f"]

    def test_saves_found_posters(self, wikipedia: list[dict]) -> None:
        store = InMemoryStore([make_event("rr", "Royal Rumble 2026", date="Jan 31, 2026")])

        result = update_posters(store, store.list_events(), delay=0)

        assert result.updated == 1
        assert result.remaining == 0
        assert store.posters["rr"] == (POSTER, "wikipedia")

    def test_skips_manually_edited(self, wikipedia: list[dict]) -> None:
        store = InMemoryStore([make_event("rr", "Royal Rumble 2026", manually_edited=True)])

        result = update_posters(store, store.list_events(), delay=0)

        assert result.candidates == 0
        assert store.posters == {}
        assert wikipedia == []

    def test_counts_missing_posters(self) -> None:
        store = InMemoryStore([make_event("x", "Obscure Show", date="Jan 1, 2026")])
        result = update_posters(store, store.list_events(), find=lambda name: None, delay=0)
        assert result.not_found == 1
        assert result.updated == 0
        assert result.remaining == 1

    def test_save_failure_continues(self) -> None:
        store = InMemoryStore([
            make_event("a", "Royal Rumble 2026", date="Jan 31, 2026"),
            make_event("b", "WrestleMania 42", date="Apr 18, 2026"),
        ])
        store.fail_posters.add("b")

        result = update_posters(store, store.list_events(), find=lambda name: f"https://img/{name}.jpg", delay=0)

        assert result.updated == 1
        assert len(result.errors) == 1
        assert "WrestleMania 42" in result.errors[0]
        assert "a" in store.posters

    def test_run_limit(self) -> None:
        store = InMemoryStore([make_event(f"e{i}", f"Show {i}", date=f"Jan {i + 1}, 2026") for i in range(12)])
        looked_up = []

        def find(name: str) -> str | None:
            looked_up.append(name)
            return None

        result = update_posters(store, store.list_events(), find=find, limit=10, delay=0)

        assert len(looked_up) == 10
        assert result.candidates == 12
