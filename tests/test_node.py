import logging

import pytest

from circuitcore import Branch, ConfigurationError, Direction, Node, Resistor


def make_branches(count):
    return [Branch([Resistor(1.0)], Direction.FORWARD, name=f"b{i}") for i in range(count)]


def test_equation_signs_and_open_branches_omitted():
    a, b, c = make_branches(3)
    node = Node(incoming=[a], outgoing=[b, c])
    c.set_direction(Direction.OPEN)
    eq = node.equation()
    assert eq == {a: 1.0, b: -1.0}
    assert c not in eq


def test_move_to_other_set():
    a, b = make_branches(2)
    node = Node(incoming=[a], outgoing=[b])
    node.move_to_other_set(a)
    assert node.incoming == ()
    assert node.outgoing == (b, a)
    node.move_to_other_set(b)
    assert node.incoming == (b,)
    assert node.equation() == {b: 1.0, a: -1.0}


def test_move_unknown_branch_warns(caplog):
    a, b, stranger = make_branches(3)
    node = Node(incoming=[a], outgoing=[b], name="j1")
    with caplog.at_level(logging.WARNING, logger="circuitcore"):
        node.move_to_other_set(stranger)
    assert node.incoming == (a,) and node.outgoing == (b,)
    assert "does not belong to node 'j1'" in caplog.text


def test_sets_stay_disjoint():
    branches = make_branches(4)
    node = Node(incoming=branches[:2], outgoing=branches[2:])
    for branch in branches * 3 + make_branches(1):
        node.move_to_other_set(branch)
        ids_in = {id(b) for b in node.incoming}
        ids_out = {id(b) for b in node.outgoing}
        assert not ids_in & ids_out
        assert len(ids_in | ids_out) == 4


def test_overlapping_sets_rejected():
    (a,) = make_branches(1)
    with pytest.raises(ConfigurationError):
        Node(incoming=[a], outgoing=[a])
