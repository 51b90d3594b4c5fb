import pytest

from circuitcore import Branch, Circuit, Cycle, Direction, Node, Resistor, Source

F, B = Direction.FORWARD, Direction.BACKWARD


@pytest.fixture
def battery_circuit():
    """9 V source branch and 3 Ω resistor branch joined by one node."""
    source = Source(voltage=9.0, polarity=F, name="V")
    resistor = Resistor(3.0, name="R")
    branch_a = Branch([source], F, name="A")
    branch_b = Branch([resistor], F, name="B")
    circuit = Circuit(
        cycles=[Cycle([branch_a, branch_b], [F, F], name="loop")],
        nodes=[Node(incoming=[branch_a], outgoing=[branch_b], name="n")],
    )
    return circuit, branch_a, branch_b, source, resistor


@pytest.fixture
def ladder():
    """12 V + 2 Ω feeding 4 Ω and 12 Ω in parallel."""
    b1 = Branch([Source(12.0, F), Resistor(2.0)], F, name="b1")
    b2 = Branch([Resistor(4.0)], F, name="b2")
    b3 = Branch([Resistor(12.0)], F, name="b3")
    circuit = Circuit(
        cycles=[Cycle([b1, b2], [F, F], name="outer"), Cycle([b2, b3], [B, F], name="inner")],
        nodes=[Node(incoming=[b1], outgoing=[b2, b3], name="X")],
    )
    return circuit, b1, b2, b3
