import pytest

from circuitcore import (
    Branch,
    ConfigurationError,
    Cycle,
    CycleEquation,
    Direction,
    OpenPath,
    Resistor,
    Source,
)

F, B = Direction.FORWARD, Direction.BACKWARD


def test_mismatched_lengths_rejected():
    branch = Branch([Resistor(1.0)], F)
    with pytest.raises(ConfigurationError):
        Cycle([branch], [F, F])


def test_open_traversal_rejected():
    branch = Branch([Resistor(1.0)], F)
    with pytest.raises(ConfigurationError):
        Cycle([branch], [Direction.OPEN])


def test_resistance_sign_follows_stored_direction():
    with_flow = Branch([Resistor(2.0), Resistor(3.0)], F)
    against_flow = Branch([Resistor(4.0)], B)
    eq = Cycle([with_flow, against_flow], [F, F]).equation()
    assert isinstance(eq, CycleEquation)
    assert eq.coefficients[with_flow] == pytest.approx(-5.0)
    assert eq.coefficients[against_flow] == pytest.approx(4.0)
    assert eq.voltage == 0.0


def test_source_voltage_follows_polarity_not_resistance_sign():
    # the source branch is stored BACKWARD, so its resistor is added, while
    # the source polarity matches the walk and its voltage is added too
    branch = Branch([Source(6.0, F, resistance=10.0), Resistor(1.0)], B)
    other = Branch([Source(2.0, B)], F)
    eq = Cycle([branch, other], [F, F]).equation()
    assert eq.coefficients[branch] == pytest.approx(1.0)
    assert eq.coefficients[other] == 0.0
    assert eq.voltage == pytest.approx(4.0)


def test_open_branch_yields_open_path():
    a = Branch([Resistor(1.0)], F)
    b = Branch([Resistor(1.0)], F)
    cycle = Cycle([a, b], [F, F])
    b.set_direction(Direction.OPEN)
    result = cycle.equation()
    assert isinstance(result, OpenPath)
    assert result.branch is b
    b.set_direction(F)
    assert isinstance(cycle.equation(), CycleEquation)


def test_repeated_branch_keeps_last_contribution():
    a = Branch([Resistor(2.0)], F)
    eq = Cycle([a, a], [F, B]).equation()
    assert eq.coefficients == {a: 2.0}


def test_cycle_equation_is_hashable():
    a = Branch([Resistor(2.0)], F)
    eq = Cycle([a], [F]).equation()
    assert eq in {eq}
