# stackmachine/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from stackmachine.core.errors import EmptyStackError
from stackmachine.core.outcomes import TransitionOutcome
from stackmachine.core.transitions import Transition

logger = logging.getLogger(__name__)


class StateMachine:
    """
    A push-down state machine: an ordered stack of states whose top is the
    active state. The stack is never empty.

    States are opaque values. The machine never calls into them; it only
    reports through the returned outcome which states were removed, leaving
    the caller to react.
    """

    def __init__(self, initial_state: Any, name: Optional[str] = None) -> None:
        """
        :param initial_state: The state the machine starts in.
        :param name: Optional label used in logs and ``repr``.
        """
        self._stack: List[Any] = [initial_state]
        self._name = name

    @classmethod
    def from_stack(cls, states: Iterable[Any], name: Optional[str] = None) -> "StateMachine":
        """
        Build a machine from an existing stack.

        :param states: States from bottom to top; the last one becomes active.
        :param name: Optional label used in logs and ``repr``.
        :raises EmptyStackError: If ``states`` is empty.
        """
        stack = list(states)
        if not stack:
            raise EmptyStackError("A state machine needs at least one state")
        machine = cls(stack[0], name=name)
        machine._stack = stack
        return machine

    @property
    def name(self) -> Optional[str]:
        """The machine's label, if any."""
        return self._name

    def active(self) -> Any:
        """The state on top of the stack."""
        return self._stack[-1]

    def get_stack(self) -> List[Any]:
        """
        Return a copy of the stack, bottom to top. Changing the returned list
        does not affect the machine.
        """
        return list(self._stack)

    def split_last(self) -> Tuple[List[Any], Any]:
        """
        Return the states below the active one together with the active state,
        e.g. to draw underlying layers before the active one.
        """
        return self._stack[:-1], self._stack[-1]

    def apply(self, transition: Transition) -> TransitionOutcome:
        """
        Apply a transition to the stack.

        This is the only way the stack changes. On error nothing is modified,
        so the caller may retry with a corrected transition.

        :param transition: The transition to apply.
        :return: The outcome describing what changed.
        :raises PoppedTooManyError: If the transition pops more states than allowed.
        :raises TypeError: If ``transition`` is not a Transition.
        """
        if not isinstance(transition, Transition):
            raise TypeError(f"Expected a Transition, got {type(transition).__name__}")

        outcome = transition.apply(self._stack)
        logger.debug("%r applied %r -> %r (depth %d)", self, transition, outcome, len(self._stack))
        return outcome

    def __len__(self) -> int:
        return len(self._stack)

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._stack))

    def __repr__(self) -> str:
        label = f" {self._name!r}" if self._name else ""
        return f"<StateMachine{label} active={self.active()!r} depth={len(self._stack)}>"
