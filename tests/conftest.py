# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest


@pytest.fixture
def single_machine():
    """A machine holding only its initial state."""
    from stackmachine.core.state_machine import StateMachine

    return StateMachine("loading")


@pytest.fixture
def menu_machine():
    """A five-deep machine, as used by a nested menu system."""
    from stackmachine.core.state_machine import StateMachine

    return StateMachine.from_stack(["playing", "pause", "menu", "submenu", "subsubmenu"])


@pytest.fixture
def machine_factory():
    """Returns a factory building a machine from a bottom-to-top list of states."""
    from stackmachine.core.state_machine import StateMachine

    def _factory(*states, name=None):
        return StateMachine.from_stack(states, name=name)

    return _factory


@pytest.fixture
def error_classes():
    """Provides a tuple of error classes for quick reference."""
    from stackmachine.core.errors import (
        EmptyStackError,
        PoppedTooManyError,
        SerializationError,
        StackMachineError,
        TransitionError,
    )

    return (StackMachineError, TransitionError, PoppedTooManyError, EmptyStackError, SerializationError)
