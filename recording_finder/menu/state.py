"""Pure selection state machine behind every interactive menu.

``transition(state, event)`` never touches the terminal; rendering and key
input are handled by separate collaborators in ``recording_finder.menu.menu``.
"""

from enum import Enum, auto
from typing import Self

from pydantic import BaseModel, Field, model_validator


class SelectionMode(Enum):
    """Whether a menu accepts one or many choices."""

    SINGLE = auto()
    MULTI = auto()


class MenuEvent(Enum):
    """Discrete key events understood by the menu."""

    UP = auto()
    DOWN = auto()
    TOGGLE = auto()
    CONFIRM = auto()


class SelectionState(BaseModel):
    """Cursor position and chosen indices of one menu prompt."""

    model_config = {"frozen": True}

    option_count: int = Field(..., ge=0)
    mode: SelectionMode
    current_index: int = Field(0, ge=0)
    selected: frozenset[int] = frozenset()
    confirmed: bool = False

    @model_validator(mode="after")
    def validate_invariants(self) -> Self:
        upper = max(self.option_count - 1, 0)
        if self.current_index > upper:
            raise ValueError(f"current_index {self.current_index} is outside 0..{upper}")
        if any(index < 0 or index >= self.option_count for index in self.selected):
            raise ValueError(f"selected indices {sorted(self.selected)} out of range")
        if self.mode is SelectionMode.SINGLE and len(self.selected) > 1:
            raise ValueError("single-select menus hold at most one selection")
        return self

    def chosen_indices(self) -> list[int]:
        """Selected indices in option order."""
        return sorted(self.selected)


def initial_state(option_count: int, mode: SelectionMode, default_index: int = 0) -> SelectionState:
    """Return the state shown before the first render.

    The default index, clamped into range, is both the cursor position and
    the pre-selected option. Empty option lists start with nothing selected.
    """
    if option_count == 0:
        return SelectionState(option_count=0, mode=mode)
    index = min(max(default_index, 0), option_count - 1)
    return SelectionState(
        option_count=option_count,
        mode=mode,
        current_index=index,
        selected=frozenset({index}),
    )


def transition(state: SelectionState, event: MenuEvent) -> SelectionState:
    """Apply one key event and return the next state.

    Movement clamps at both ends (no wraparound). Confirmed states are
    terminal and ignore further events.
    """
    if state.confirmed:
        return state

    if event is MenuEvent.UP:
        return state.model_copy(update={"current_index": max(state.current_index - 1, 0)})

    if event is MenuEvent.DOWN:
        last = max(state.option_count - 1, 0)
        return state.model_copy(update={"current_index": min(state.current_index + 1, last)})

    if event is MenuEvent.TOGGLE:
        if state.option_count == 0:
            return state
        if state.mode is SelectionMode.SINGLE:
            return state.model_copy(update={"selected": frozenset({state.current_index})})
        return state.model_copy(update={"selected": state.selected ^ {state.current_index}})

    return state.model_copy(update={"confirmed": True})
