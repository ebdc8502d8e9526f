"""Interactive selection menu driving the pure state machine."""

import logging
from typing import Protocol, Sequence

from recording_finder.menu.state import (
    MenuEvent,
    SelectionMode,
    SelectionState,
    initial_state,
    transition,
)

logger = logging.getLogger(__name__)


class KeyReader(Protocol):
    """Source of discrete key events."""

    def read_event(self) -> MenuEvent:
        """Block until the next recognised key and return its event."""
        ...


class MenuRenderer(Protocol):
    """Draws the option list for the current state."""

    def render(self, title: str, options: Sequence[str], state: SelectionState) -> None:
        """Redraw the whole menu."""
        ...


class TextPrompt(Protocol):
    """Source of free-text answers."""

    def ask(self, question: str) -> str:
        """Ask ``question`` and return the raw answer."""
        ...


class SelectionMenu:
    """Choose one or many options from a list with the keyboard.

    Each iteration re-renders the full option list, waits for one key event
    and applies it with ``transition`` until the operator confirms. An empty
    result is returned as-is; callers decide whether that is an error.
    """

    def __init__(self, key_reader: KeyReader, renderer: MenuRenderer) -> None:
        self.key_reader = key_reader
        self.renderer = renderer

    def choose_indices(
        self,
        title: str,
        options: Sequence[str],
        mode: SelectionMode,
        default_index: int = 0,
    ) -> list[int]:
        """Run the menu and return the chosen positions in option order."""
        state = initial_state(len(options), mode, default_index)
        while not state.confirmed:
            self.renderer.render(title, options, state)
            event = self.key_reader.read_event()
            state = transition(state, event)
        logger.debug(f"Menu {title!r} confirmed with indices {state.chosen_indices()}")
        return state.chosen_indices()

    def run(
        self,
        title: str,
        options: Sequence[str],
        mode: SelectionMode,
        default_index: int = 0,
    ) -> list[str]:
        """Run the menu and return the chosen options in option order."""
        return [options[index] for index in self.choose_indices(title, options, mode, default_index)]
