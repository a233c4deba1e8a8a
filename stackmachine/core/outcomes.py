# stackmachine/core/outcomes.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Tuple


class TransitionOutcome:
    """
    What happened to the state stack after a transition was applied.

    The set of outcomes is closed: NoChange, Pushed, SwappedIn and Revealed.
    Callers branch on the concrete type to decide how to react, e.g. starting
    freshly pushed states or resuming a revealed one.
    """


@dataclass(frozen=True)
class NoChange(TransitionOutcome):
    """Nothing happened."""


@dataclass(frozen=True)
class Pushed(TransitionOutcome):
    """
    New states were pushed and nothing was removed. The previous top is still
    on the stack, covered by the new states.
    """


@dataclass(frozen=True)
class SwappedIn(TransitionOutcome):
    """
    States were removed, then new ones pushed. The new top is one of the pushed
    states.

    :param removed: The removed states in stack order; the last one is the
        previous top.
    :param pushed_count: How many pushed states sit under the new top.
    """

    removed: Tuple[Any, ...]
    pushed_count: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "removed", _as_tuple(self.removed))


@dataclass(frozen=True)
class Revealed(TransitionOutcome):
    """
    States were removed and nothing was pushed, so a state that was already on
    the stack is active again.

    :param removed: The removed states in stack order; the last one is the
        previous top.
    """

    removed: Tuple[Any, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "removed", _as_tuple(self.removed))


def _as_tuple(states: Iterable[Any]) -> Tuple[Any, ...]:
    return states if isinstance(states, tuple) else tuple(states)
