"""stackmachine: push-down (stack-based) state machine

Keeps an ordered, never-empty stack of opaque states and applies declarative
transitions to it, reporting exactly what changed.

Example:
    machine = StateMachine("loading")
    machine.apply(Swap("playing"))      # SwappedIn(("loading",), 0)
    machine.apply(Push("inventory"))    # Pushed()
    machine.apply(Pop())                # Revealed(("inventory",))

Logging:
    Applied transitions are logged at DEBUG on the ``stackmachine`` logger
    hierarchy. The library installs no handlers.
"""

from stackmachine.core import (
    EmptyStackError,
    NoChange,
    NoTransition,
    Pop,
    PopNAndPush,
    PoppedTooManyError,
    Push,
    Pushed,
    Revealed,
    SerializationError,
    StackMachineError,
    StateMachine,
    Swap,
    SwappedIn,
    Transition,
    TransitionError,
    TransitionOutcome,
)

__version__ = "0.1.0"

__all__ = [
    "StateMachine",
    "Transition",
    "NoTransition",
    "Push",
    "Pop",
    "Swap",
    "PopNAndPush",
    "TransitionOutcome",
    "NoChange",
    "Pushed",
    "SwappedIn",
    "Revealed",
    "StackMachineError",
    "TransitionError",
    "PoppedTooManyError",
    "EmptyStackError",
    "SerializationError",
    "__version__",
]
