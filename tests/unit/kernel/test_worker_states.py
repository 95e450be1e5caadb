"""Unit tests for the worker lifecycle state machine."""

from __future__ import annotations

import pytest

from pwa_lifecycle.kernel.errors import InvalidTransitionError
from pwa_lifecycle.kernel.lifecycle import TRANSITIONS, WorkerState, can_transition, transition


class TestWorkerState:
    def test_values(self) -> None:
        assert [s.value for s in WorkerState] == [
            "installing",
            "installed",
            "activating",
            "activated",
            "redundant",
        ]

    def test_only_installed_is_waiting(self) -> None:
        assert [s for s in WorkerState if s.is_waiting] == [WorkerState.INSTALLED]

    def test_redundant_is_terminal(self) -> None:
        assert WorkerState.REDUNDANT.is_terminal
        assert not TRANSITIONS[WorkerState.REDUNDANT]


class TestTransitions:
    def test_happy_path(self) -> None:
        state = WorkerState.INSTALLING
        for target in (WorkerState.INSTALLED, WorkerState.ACTIVATING, WorkerState.ACTIVATED):
            state = transition(state, target)
        assert state is WorkerState.ACTIVATED

    @pytest.mark.parametrize("state", [s for s in WorkerState if not s.is_terminal])
    def test_any_live_state_can_become_redundant(self, state: WorkerState) -> None:
        assert can_transition(state, WorkerState.REDUNDANT)

    def test_installing_cannot_skip_waiting_state(self) -> None:
        with pytest.raises(InvalidTransitionError):
            transition(WorkerState.INSTALLING, WorkerState.ACTIVATING)

    def test_no_way_back(self) -> None:
        assert not can_transition(WorkerState.ACTIVATED, WorkerState.INSTALLED)

    def test_redundant_is_final(self) -> None:
        with pytest.raises(InvalidTransitionError):
            transition(WorkerState.REDUNDANT, WorkerState.ACTIVATED)

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            TRANSITIONS[WorkerState.INSTALLED] = frozenset()  # type: ignore[index]
