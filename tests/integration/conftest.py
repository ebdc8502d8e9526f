"""Integration test configuration and fixtures."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Sequence

import pytest

from recording_finder.config import ENGLISH
from recording_finder.menu import MenuEvent


def pytest_collection_modifyitems(items):
    """Automatically mark all tests in integration/ with @pytest.mark.integration."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


class ScriptedKeyReader:
    """Key reader replaying a fixed list of events across every menu."""

    def __init__(self, events: Sequence[MenuEvent]) -> None:
        self._events = list(events)

    def read_event(self) -> MenuEvent:
        return self._events.pop(0)


class SilentRenderer:
    """Renderer that draws nothing."""

    def render(self, title, options, state) -> None:
        pass


class FixedPrompt:
    """Text prompt with a canned answer."""

    def __init__(self, answer: str = "") -> None:
        self.answer = answer

    def ask(self, question: str) -> str:
        return self.answer


@pytest.fixture
def scripted_keys():
    return ScriptedKeyReader


@pytest.fixture
def silent_renderer() -> SilentRenderer:
    return SilentRenderer()


@pytest.fixture
def fixed_prompt():
    return FixedPrompt


@pytest.fixture
def populated_root(tmp_scan_root: Path) -> Path:
    """A scan root holding recordings, a nested folder and non-audio files."""
    (tmp_scan_root / "2024-06-14 Service.mp3").write_bytes(b"ID3")
    (tmp_scan_root / "kaposti_recording.wav").write_bytes(b"RIFF")
    (tmp_scan_root / "notes.txt").write_text("not audio")
    nested = tmp_scan_root / "archive"
    nested.mkdir()
    (nested / "kāposti_final.WAV").write_bytes(b"RIFF")
    (nested / "cover.jpg").write_bytes(b"\xff\xd8")
    return tmp_scan_root


@pytest.fixture
def creation_weekday():
    """Return the English weekday of a file's creation timestamp as the scanner sees it."""
    def _weekday(path: Path) -> str:
        info = os.stat(path)
        timestamp = getattr(info, "st_birthtime", info.st_ctime)
        return ENGLISH.weekday_name(datetime.fromtimestamp(timestamp).astimezone())

    return _weekday
