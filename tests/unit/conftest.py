"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
Focus on lightweight fakes and fast execution.
"""

from __future__ import annotations

from typing import Any, Sequence

import pytest

from recording_finder.menu import MenuEvent, SelectionState


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Menu Fakes
# =============================================================================

class ScriptedKeyReader:
    """Key reader returning a fixed sequence of events."""

    def __init__(self, events: Sequence[MenuEvent]) -> None:
        self._events = list(events)

    def read_event(self) -> MenuEvent:
        return self._events.pop(0)


class RecordingRenderer:
    """Renderer remembering every state it was asked to draw."""

    def __init__(self) -> None:
        self.frames: list[tuple[str, list[str], SelectionState]] = []

    def render(self, title: str, options: Sequence[str], state: SelectionState) -> None:
        self.frames.append((title, list(options), state))


@pytest.fixture
def scripted_keys():
    """Factory fixture for ScriptedKeyReader instances."""
    return ScriptedKeyReader


@pytest.fixture
def recording_renderer() -> RecordingRenderer:
    """A fresh RecordingRenderer."""
    return RecordingRenderer()


# =============================================================================
# Sample Data Factories
# =============================================================================

@pytest.fixture
def settings_data_factory():
    """Factory fixture for creating raw settings dictionaries."""
    def _create(**overrides: Any) -> dict[str, Any]:
        data: dict[str, Any] = {
            "locale": "en",
            "text_strategy": "fold",
            "extensions": [".wav", ".mp3"],
            "output_dir": "Output",
            "spreadsheet": True,
        }
        data.update(overrides)
        return data

    return _create
