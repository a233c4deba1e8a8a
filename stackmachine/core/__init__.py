"""
Core package: the state stack, transitions applied to it and their outcomes.

A transition is a declarative command (swap, push, pop, pop-N-then-push).
Applying it to a StateMachine either succeeds and returns a TransitionOutcome
saying which states were removed and whether the new active state was pushed
or revealed, or raises PoppedTooManyError and leaves the stack unchanged.
"""

# Import order matters to avoid circular dependencies
from .errors import EmptyStackError, PoppedTooManyError, SerializationError, StackMachineError, TransitionError
from .outcomes import NoChange, Pushed, Revealed, SwappedIn, TransitionOutcome
from .transitions import NoTransition, Pop, PopNAndPush, Push, Swap, Transition
from .state_machine import StateMachine

__all__ = [
    # Errors
    "StackMachineError",
    "TransitionError",
    "PoppedTooManyError",
    "EmptyStackError",
    "SerializationError",
    # Outcomes
    "TransitionOutcome",
    "NoChange",
    "Pushed",
    "SwappedIn",
    "Revealed",
    # Transitions
    "Transition",
    "NoTransition",
    "Push",
    "Pop",
    "Swap",
    "PopNAndPush",
    # Machine
    "StateMachine",
]
