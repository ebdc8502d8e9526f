"""Interactive selection menus for Recording Finder."""

from recording_finder.menu.menu import KeyReader, MenuRenderer, SelectionMenu, TextPrompt
from recording_finder.menu.state import (
    MenuEvent,
    SelectionMode,
    SelectionState,
    initial_state,
    transition,
)

__all__ = [
    "KeyReader",
    "MenuRenderer",
    "SelectionMenu",
    "TextPrompt",
    "MenuEvent",
    "SelectionMode",
    "SelectionState",
    "initial_state",
    "transition",
]
