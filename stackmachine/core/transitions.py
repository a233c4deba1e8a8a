# stackmachine/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple

from stackmachine.core.errors import PoppedTooManyError
from stackmachine.core.outcomes import NoChange, Pushed, Revealed, SwappedIn, TransitionOutcome


class Transition:
    """
    A declarative description of how the state stack should change.

    Every transition reduces to "pop N states, then push these", so the
    concrete variants only describe their reduction and share a single
    application algorithm.
    """

    def as_pop_and_push(self) -> Tuple[int, Tuple[Any, ...]]:
        """
        Reduce this transition to a pop count and the states to push afterwards.

        :return: ``(count, states)``; the last of ``states`` becomes the new top.
        """
        raise NotImplementedError("Transition is an abstract base class")

    def apply(self, stack: List[Any]) -> TransitionOutcome:
        """
        Apply the transition to ``stack`` in place.

        If an error is raised the stack is left untouched.

        :param stack: Bottom-to-top list of states; must not be empty.
        :return: The outcome describing what changed.
        :raises PoppedTooManyError: If more states would be popped than allowed.
        """
        count, to_push = self.as_pop_and_push()
        _check_pop_count(stack, count, to_push)

        removed = _StackEditor(stack).replace_top(count, to_push)
        return _classify(removed, to_push)


@dataclass(frozen=True)
class NoTransition(Transition):
    """Leave the stack as it is."""

    def as_pop_and_push(self) -> Tuple[int, Tuple[Any, ...]]:
        return 0, ()


@dataclass(frozen=True)
class Push(Transition):
    """Push ``state`` on top, keeping everything below it."""

    state: Any

    def as_pop_and_push(self) -> Tuple[int, Tuple[Any, ...]]:
        return 0, (self.state,)


@dataclass(frozen=True)
class Pop(Transition):
    """Remove the active state, revealing the one below."""

    def as_pop_and_push(self) -> Tuple[int, Tuple[Any, ...]]:
        return 1, ()


@dataclass(frozen=True)
class Swap(Transition):
    """Replace the active state with ``state``."""

    state: Any

    def as_pop_and_push(self) -> Tuple[int, Tuple[Any, ...]]:
        return 1, (self.state,)


@dataclass(frozen=True)
class PopNAndPush(Transition):
    """
    The general transition: pop ``count`` states off the stack, then push
    ``states`` in order. The last element of ``states`` becomes the active
    state.

    :param count: Number of states to pop; may be zero.
    :param states: States to push afterwards; may be empty.
    """

    count: int
    states: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise ValueError(f"Pop count must be an int, got {type(self.count).__name__}")
        if self.count < 0:
            raise ValueError(f"Pop count must not be negative, got {self.count}")
        if not isinstance(self.states, tuple):
            object.__setattr__(self, "states", tuple(self.states))

    def as_pop_and_push(self) -> Tuple[int, Tuple[Any, ...]]:
        return self.count, self.states


class _StackEditor:
    """
    Internal helper performing the actual removal and insertion on a stack
    list once the transition has been validated.
    """

    def __init__(self, stack: List[Any]) -> None:
        self._stack = stack

    def replace_top(self, count: int, to_push: Sequence[Any]) -> Tuple[Any, ...]:
        """
        Remove the top ``count`` states and append ``to_push``.

        :return: The removed states in stack order.
        """
        cut = len(self._stack) - count
        removed = tuple(self._stack[cut:])
        del self._stack[cut:]
        self._stack.extend(to_push)
        return removed


def _check_pop_count(stack: List[Any], count: int, to_push: Sequence[Any]) -> None:
    # A push refills the stack, so everything may go; otherwise one state stays.
    available = len(stack) if to_push else len(stack) - 1
    if count > available:
        raise PoppedTooManyError(requested=count, available=available)


def _classify(removed: Tuple[Any, ...], to_push: Sequence[Any]) -> TransitionOutcome:
    if not removed:
        return Pushed() if to_push else NoChange()
    if not to_push:
        return Revealed(removed)
    return SwappedIn(removed, len(to_push) - 1)
