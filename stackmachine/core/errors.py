# stackmachine/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class StackMachineError(Exception):
    """
    Base exception class for errors raised by the stack machine library.
    """


class TransitionError(StackMachineError):
    """
    Raised when a transition cannot be applied to the state stack.
    """


class PoppedTooManyError(TransitionError):
    """
    Raised when a transition asks to remove more states than the stack can give
    up while staying non-empty.
    """

    def __init__(self, requested: int, available: int) -> None:
        """
        :param requested: How many states the transition tried to pop.
        :param available: How many states it was allowed to pop.
        """
        super().__init__(f"Tried to pop {requested} states, but could only pop {available}")
        self.requested = requested
        self.available = available

    def __reduce__(self):
        return (type(self), (self.requested, self.available))


class EmptyStackError(StackMachineError, ValueError):
    """
    Raised when a state machine would be built on an empty stack.
    """


class SerializationError(StackMachineError):
    """
    Raised when a machine snapshot cannot be written or restored.
    """
