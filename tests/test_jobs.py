"""Tests for the command-line job scripts."""

from __future__ import annotations

from pathlib import Path

import pytest

import remove_empty_event
import scrape_cagematch
import set_admin
import upload_images
from pickem import Match

from conftest import InMemoryStore, make_event


class TestSelectEvents:
    def test_announced_first_then_recent(self) -> None:
        known = [make_event(f"k{i}", f"Known {i}") for i in range(3)]
        recent = [make_event(f"r{i}", f"Recent {i}") for i in range(3)]
        selected = scrape_cagematch.select_events_to_scrape(known, recent)
        assert [e.id for e in selected] == ["k0", "k1", "k2", "r0", "r1", "r2"]

    def test_deduplicates(self) -> None:
        event = make_event("cagematch-1", "Dynasty")
        assert len(scrape_cagematch.select_events_to_scrape([event], [event])) == 1

    def test_caps_run_size(self) -> None:
        known = [make_event(f"k{i}", f"Known {i}") for i in range(30)]
        recent = [make_event(f"r{i}", f"Recent {i}") for i in range(30)]
        selected = scrape_cagematch.select_events_to_scrape(known, recent)
        assert len(selected) == scrape_cagematch.MAX_CARDS_PER_RUN
        assert selected[-1].id == "r4"


class TestSaveImages:
    def test_banners_and_wrestlers(self, store: InMemoryStore) -> None:
        mox = {"name": "Jon Moxley", "cagematchId": "4000", "image": "https://img/4000.jpg"}
        event = make_event("cagematch-1", "Dynasty", banner_url="https://img/banner.gif")
        event.matches = [
            Match(id=1, p1="Jon Moxley", p2="Kenny Omega", p1_members=[mox], p2_members=[{"name": "Kenny Omega"}]),
        ]

        saved = scrape_cagematch.save_images(store, [event, event])

        assert saved == 1
        assert store.images["events"] == {"cagematch-1_banner": "https://img/banner.gif"}
        assert store.images["wrestlers"] == {"Jon Moxley": "https://img/4000.jpg"}


class TestUsage:
    def test_remove_empty_event_needs_id(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert remove_empty_event.main([]) == 1
        assert "Usage:" in capsys.readouterr().out

    def test_set_admin_needs_valid_action(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert set_admin.main(["ref@example.com", "promote"]) == 1
        assert "Usage:" in capsys.readouterr().out

    def test_upload_missing_folder(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert upload_images.main([str(tmp_path / "missing")]) == 1
        assert "Folder not found" in capsys.readouterr().out

    def test_upload_folder_without_images(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (tmp_path / "readme.txt").write_text("no photos here")
        assert upload_images.main([str(tmp_path)]) == 1
        assert "No images found" in capsys.readouterr().out


class TestRemoveEmptyEventScript:
    def test_deletes_with_store(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        store = InMemoryStore([make_event("cagematch-426904", "Wrestle Kingdom 20")])
        monkeypatch.setattr(remove_empty_event, "open_store", lambda path: store)

        assert remove_empty_event.main(["cagematch-426904"]) == 0
        assert store.events == {}
        assert "Deleted cagematch-426904" in capsys.readouterr().out

    def test_no_store(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(remove_empty_event, "open_store", lambda path: None)
        assert remove_empty_event.main(["cagematch-426904"]) == 1
