"""Kernel lifecycle – worker states and allowed transitions.

::

    installing ─► installed (waiting) ─► activating ─► activated (controlling)
         │                │                   │               │
         └────────────────┴───────────────────┴───────────────┴─► redundant

``installed → activating`` happens only when the page posts ``SKIP_WAITING``.
The state itself is owned by the host platform; this module only validates
moves between states.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from pwa_lifecycle.kernel.errors import InvalidTransitionError


class WorkerState(str, Enum):
    INSTALLING = "installing"
    INSTALLED = "installed"
    ACTIVATING = "activating"
    ACTIVATED = "activated"
    REDUNDANT = "redundant"

    @property
    def is_waiting(self) -> bool:
        return self is WorkerState.INSTALLED

    @property
    def is_terminal(self) -> bool:
        return self is WorkerState.REDUNDANT


TRANSITIONS: MappingProxyType[WorkerState, frozenset[WorkerState]] = MappingProxyType(
    {
        WorkerState.INSTALLING: frozenset({WorkerState.INSTALLED, WorkerState.REDUNDANT}),
        WorkerState.INSTALLED: frozenset({WorkerState.ACTIVATING, WorkerState.REDUNDANT}),
        WorkerState.ACTIVATING: frozenset({WorkerState.ACTIVATED, WorkerState.REDUNDANT}),
        WorkerState.ACTIVATED: frozenset({WorkerState.REDUNDANT}),
        WorkerState.REDUNDANT: frozenset(),
    }
)


def can_transition(current: WorkerState, target: WorkerState) -> bool:
    return target in TRANSITIONS[current]


def transition(current: WorkerState, target: WorkerState) -> WorkerState:
    """Return *target* when the move is legal.

    Raises
    ------
    InvalidTransitionError
        When *target* is not reachable from *current* in one step.
    """
    if not can_transition(current, target):
        raise InvalidTransitionError(current.value, target.value)
    return target


__all__ = ["TRANSITIONS", "WorkerState", "can_transition", "transition"]
