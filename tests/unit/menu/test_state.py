"""Unit tests for the selection state machine."""

from __future__ import annotations

import itertools

import pytest
from pydantic import ValidationError

from recording_finder.menu.state import (
    MenuEvent,
    SelectionMode,
    SelectionState,
    initial_state,
    transition,
)


def _apply(state: SelectionState, events) -> SelectionState:
    for event in events:
        state = transition(state, event)
    return state


class TestInitialState:
    """Tests for initial_state."""

    def test_single_select_starts_with_default_selected(self) -> None:
        state = initial_state(4, SelectionMode.SINGLE, default_index=2)

        assert state.current_index == 2
        assert state.selected == frozenset({2})

    def test_multi_select_starts_with_default_toggled_on(self) -> None:
        state = initial_state(3, SelectionMode.MULTI)

        assert state.current_index == 0
        assert state.selected == frozenset({0})

    def test_default_index_is_clamped(self) -> None:
        assert initial_state(3, SelectionMode.SINGLE, default_index=10).current_index == 2
        assert initial_state(3, SelectionMode.SINGLE, default_index=-4).current_index == 0

    def test_empty_options(self) -> None:
        state = initial_state(0, SelectionMode.MULTI, default_index=3)

        assert state.current_index == 0
        assert state.selected == frozenset()


class TestNavigation:
    """Tests for UP/DOWN transitions."""

    def test_down_moves_cursor(self) -> None:
        state = transition(initial_state(3, SelectionMode.SINGLE), MenuEvent.DOWN)
        assert state.current_index == 1

    def test_up_clamps_at_zero(self) -> None:
        state = _apply(initial_state(3, SelectionMode.SINGLE), [MenuEvent.UP, MenuEvent.UP])
        assert state.current_index == 0

    def test_down_clamps_at_last(self) -> None:
        state = _apply(initial_state(3, SelectionMode.SINGLE), [MenuEvent.DOWN] * 5)
        assert state.current_index == 2

    def test_navigation_on_empty_list_stays_at_zero(self) -> None:
        state = _apply(initial_state(0, SelectionMode.MULTI), [MenuEvent.DOWN, MenuEvent.UP, MenuEvent.DOWN])
        assert state.current_index == 0

    @pytest.mark.parametrize("option_count", [0, 1, 2, 5])
    def test_cursor_stays_in_range_for_all_short_sequences(self, option_count: int) -> None:
        """Every UP/DOWN/TOGGLE sequence of length 4 keeps the cursor in range."""
        moves = [MenuEvent.UP, MenuEvent.DOWN, MenuEvent.TOGGLE]
        upper = max(option_count - 1, 0)
        for mode in SelectionMode:
            for sequence in itertools.product(moves, repeat=4):
                state = initial_state(option_count, mode)
                for event in sequence:
                    state = transition(state, event)
                    assert 0 <= state.current_index <= upper


class TestToggle:
    """Tests for TOGGLE transitions."""

    def test_single_select_replaces_selection(self) -> None:
        state = _apply(
            initial_state(3, SelectionMode.SINGLE),
            [MenuEvent.DOWN, MenuEvent.TOGGLE, MenuEvent.DOWN, MenuEvent.TOGGLE],
        )
        assert state.selected == frozenset({2})

    def test_single_select_toggle_twice_keeps_one_selection(self) -> None:
        state = _apply(initial_state(3, SelectionMode.SINGLE), [MenuEvent.TOGGLE, MenuEvent.TOGGLE])
        assert state.selected == frozenset({0})

    def test_single_select_always_holds_exactly_one(self) -> None:
        moves = [MenuEvent.UP, MenuEvent.DOWN, MenuEvent.TOGGLE]
        for sequence in itertools.product(moves, repeat=5):
            state = _apply(initial_state(4, SelectionMode.SINGLE), sequence)
            assert len(state.selected) == 1

    def test_multi_select_toggle_adds_and_removes(self) -> None:
        state = _apply(initial_state(3, SelectionMode.MULTI), [MenuEvent.DOWN, MenuEvent.TOGGLE])
        assert state.selected == frozenset({0, 1})

        state = transition(state, MenuEvent.TOGGLE)
        assert state.selected == frozenset({0})

    def test_multi_select_toggle_default_off(self) -> None:
        state = transition(initial_state(3, SelectionMode.MULTI), MenuEvent.TOGGLE)
        assert state.selected == frozenset()

    def test_toggle_on_empty_list_is_noop(self) -> None:
        state = initial_state(0, SelectionMode.SINGLE)
        assert transition(state, MenuEvent.TOGGLE) == state


class TestConfirm:
    """Tests for CONFIRM transitions."""

    def test_confirm_is_terminal(self) -> None:
        state = transition(initial_state(3, SelectionMode.MULTI), MenuEvent.CONFIRM)
        assert state.confirmed

        after = _apply(state, [MenuEvent.DOWN, MenuEvent.TOGGLE])
        assert after == state

    def test_chosen_indices_follow_option_order(self) -> None:
        state = _apply(
            initial_state(4, SelectionMode.MULTI, default_index=3),
            [MenuEvent.UP, MenuEvent.UP, MenuEvent.UP, MenuEvent.TOGGLE, MenuEvent.CONFIRM],
        )
        assert state.chosen_indices() == [0, 3]


class TestSelectionStateValidation:
    """Tests for SelectionState invariants."""

    def test_rejects_cursor_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            SelectionState(option_count=2, mode=SelectionMode.SINGLE, current_index=2)

    def test_rejects_multiple_single_selections(self) -> None:
        with pytest.raises(ValidationError):
            SelectionState(option_count=3, mode=SelectionMode.SINGLE, selected=frozenset({0, 1}))

    def test_rejects_selected_out_of_range(self) -> None:
        with pytest.raises(ValidationError):
            SelectionState(option_count=2, mode=SelectionMode.MULTI, selected=frozenset({5}))
