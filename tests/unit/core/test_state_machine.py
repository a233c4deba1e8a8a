# tests/unit/core/test_state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging

import pytest

from stackmachine.core.errors import EmptyStackError, PoppedTooManyError
from stackmachine.core.outcomes import NoChange, Pushed, Revealed, SwappedIn
from stackmachine.core.state_machine import StateMachine
from stackmachine.core.transitions import NoTransition, Pop, PopNAndPush, Push, Swap


def test_initial_state(single_machine):
    """A new machine holds exactly its initial state."""
    assert single_machine.active() == "loading"
    assert single_machine.get_stack() == ["loading"]
    assert len(single_machine) == 1


def test_from_stack(menu_machine):
    assert menu_machine.active() == "subsubmenu"
    assert len(menu_machine) == 5
    assert list(menu_machine) == ["playing", "pause", "menu", "submenu", "subsubmenu"]


def test_from_stack_rejects_empty():
    with pytest.raises(EmptyStackError):
        StateMachine.from_stack([])
    with pytest.raises(ValueError):
        StateMachine.from_stack(iter(()))


def test_from_stack_copies_input():
    states = ["a", "b"]
    machine = StateMachine.from_stack(states)
    states.append("c")
    assert machine.get_stack() == ["a", "b"]


def test_get_stack_returns_copy(single_machine):
    stack = single_machine.get_stack()
    stack.clear()
    assert single_machine.get_stack() == ["loading"]


def test_split_last(menu_machine):
    under, top = menu_machine.split_last()
    assert under == ["playing", "pause", "menu", "submenu"]
    assert top == "subsubmenu"


def test_split_last_single(single_machine):
    assert single_machine.split_last() == ([], "loading")


def test_machine_is_always_truthy(single_machine):
    assert single_machine


def test_name_and_repr(machine_factory):
    machine = machine_factory("playing", "pause", name="game")
    assert machine.name == "game"
    assert repr(machine) == "<StateMachine 'game' active='pause' depth=2>"
    assert repr(StateMachine("idle")) == "<StateMachine active='idle' depth=1>"


def test_apply_each_transition_kind(machine_factory):
    machine = machine_factory("bottom")
    assert machine.apply(Push("1")) == Pushed()
    assert machine.apply(Push("2")) == Pushed()
    assert machine.apply(Swap("3")) == SwappedIn(["2"], 0)
    assert machine.apply(Pop()) == Revealed(["3"])
    assert machine.apply(NoTransition()) == NoChange()
    assert machine.get_stack() == ["bottom", "1"]


def test_apply_pop_n_and_push(menu_machine):
    outcome = menu_machine.apply(PopNAndPush(2, []))
    assert outcome == Revealed(["submenu", "subsubmenu"])
    assert menu_machine.get_stack() == ["playing", "pause", "menu"]
    assert menu_machine.active() == "menu"


def test_failed_apply_leaves_stack_unchanged(menu_machine):
    before = menu_machine.get_stack()
    with pytest.raises(PoppedTooManyError) as exc_info:
        menu_machine.apply(PopNAndPush(5, []))
    assert exc_info.value.requested == 5
    assert exc_info.value.available == 4
    assert menu_machine.get_stack() == before


def test_failed_apply_can_be_retried(single_machine):
    with pytest.raises(PoppedTooManyError):
        single_machine.apply(PopNAndPush(2, ["playing"]))
    assert single_machine.apply(PopNAndPush(1, ["playing"])) == SwappedIn(["loading"], 0)


def test_apply_rejects_non_transitions(single_machine):
    with pytest.raises(TypeError):
        single_machine.apply("pop")
    assert single_machine.get_stack() == ["loading"]


def test_apply_logs_at_debug(single_machine, caplog):
    with caplog.at_level(logging.DEBUG, logger="stackmachine"):
        single_machine.apply(Push("inventory"))
    assert any("Push" in record.getMessage() for record in caplog.records)


def test_rejected_apply_is_not_logged(single_machine, caplog):
    with caplog.at_level(logging.DEBUG, logger="stackmachine"):
        with pytest.raises(PoppedTooManyError):
            single_machine.apply(Pop())
    assert not caplog.records
