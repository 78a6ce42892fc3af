# tests/unit/core/test_undo_redo.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


def test_undo_without_history(machine_factory):
    machine = machine_factory()
    assert machine.undo() is False
    assert machine.get_state() == "A"


def test_redo_without_history(machine_factory):
    machine = machine_factory()
    assert machine.redo() is False
    assert machine.get_state() == "A"


def test_change_then_undo_round_trip(machine_factory):
    machine = machine_factory()
    machine.change_state("B")
    assert machine.undo() is True
    assert machine.get_state() == "A"


def test_chained_undo(machine_factory):
    machine = machine_factory()
    machine.change_state("B")
    machine.change_state("C")

    assert machine.undo() is True
    assert machine.get_state() == "B"
    assert machine.undo() is True
    assert machine.get_state() == "A"
    assert machine.undo() is False
    assert machine.get_state() == "A"


def test_redo_after_undo(machine_factory):
    machine = machine_factory()
    machine.change_state("B")
    machine.undo()

    assert machine.redo() is True
    assert machine.get_state() == "B"
    assert machine.redo() is False
    assert machine.get_state() == "B"


def test_undo_redo_walk_full_history(machine_factory):
    machine = machine_factory()
    machine.trigger("go")
    machine.trigger("go")
    machine.trigger("go")
    assert machine.get_state() == "A"

    assert [machine.undo() for _ in range(3)] == [True, True, True]
    assert machine.get_state() == "A"
    assert machine.history.cursor == 0

    visited = []
    while machine.redo():
        visited.append(machine.get_state())
    assert visited == ["B", "C", "A"]


def test_repeated_undo_floors_cursor(machine_factory):
    machine = machine_factory()
    machine.change_state("B")
    results = [machine.undo() for _ in range(5)]

    assert results == [True, False, False, False, False]
    assert machine.history.cursor == -1
    assert machine.get_state() == "A"


def test_redo_unavailable_after_over_undo(machine_factory):
    machine = machine_factory()
    machine.change_state("B")
    machine.undo()
    machine.undo()

    assert machine.redo() is False
    assert machine.get_state() == "A"


def test_mutation_after_over_undo_restores_undo(machine_factory):
    machine = machine_factory()
    machine.change_state("B")
    machine.undo()
    machine.undo()

    machine.change_state("C")

    assert machine.history.cursor == 2
    assert machine.undo() is True
    assert machine.get_state() == "A"


def test_new_change_after_undo_keeps_old_redo_entries(machine_factory):
    machine = machine_factory()
    machine.change_state("B")
    machine.change_state("C")
    machine.undo()  # B
    machine.change_state("A")

    assert machine.history.back == (None, "A", "B", "B")
    assert machine.history.forward == (None, "B", "C", "A")

    assert machine.undo() is True
    assert machine.get_state() == "B"
    assert machine.undo() is True
    assert machine.get_state() == "B"
    assert machine.undo() is True
    assert machine.get_state() == "A"

    # The "C" recorded before the intervening change is still reachable.
    redone = []
    while machine.redo():
        redone.append(machine.get_state())
    assert redone == ["B", "C", "A"]


def test_clear_history_then_undo(machine_factory):
    machine = machine_factory()
    for state in ("B", "C", "A", "B"):
        machine.change_state(state)

    machine.clear_history()

    assert machine.undo() is False
    assert machine.redo() is False
    assert machine.get_state() == "B"


def test_clear_history_then_new_change(machine_factory):
    machine = machine_factory()
    machine.change_state("B")
    machine.change_state("C")
    machine.clear_history()

    machine.change_state("A")

    assert machine.history.back == (None, "C")
    assert machine.history.cursor == 1
    assert machine.undo() is True
    assert machine.get_state() == "C"
    assert machine.undo() is False


def test_reset_is_not_recorded(machine_factory):
    machine = machine_factory()
    machine.change_state("C")
    machine.reset()

    assert machine.get_state() == "A"
    assert machine.undo() is True
    assert machine.get_state() == "A"
    assert machine.redo() is True
    assert machine.get_state() == "C"


def test_can_undo_and_can_redo(machine_factory):
    machine = machine_factory()
    assert not machine.can_undo
    assert not machine.can_redo

    machine.change_state("B")
    assert machine.can_undo
    assert not machine.can_redo

    machine.undo()
    assert not machine.can_undo
    assert machine.can_redo
