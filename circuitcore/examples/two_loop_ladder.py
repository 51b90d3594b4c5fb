"""
Two-mesh DC ladder.

Circuit:
    Battery (12 V) in series with R1 (2 Ω) feeds node X, which splits into
    R2 (4 Ω) and R3 (12 Ω) returning to the battery.

Expected currents: I1 = 2.4 A, I2 = 1.8 A, I3 = 0.6 A.
"""

import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from circuitcore import Branch, Circuit, Cycle, Direction, Node, Resistor, Source


def main() -> None:
    F, B = Direction.FORWARD, Direction.BACKWARD

    b1 = Branch([Source(12.0, F, name="V1"), Resistor(2.0, name="R1")], F, name="b1")
    b2 = Branch([Resistor(4.0, name="R2")], F, name="b2")
    b3 = Branch([Resistor(12.0, name="R3")], F, name="b3")

    circuit = Circuit(
        cycles=[
            Cycle([b1, b2], [F, F], name="outer"),
            Cycle([b2, b3], [B, F], name="inner"),
        ],
        nodes=[Node(incoming=[b1], outgoing=[b2, b3], name="X")],
    )
    solution = circuit.recalculate()

    for branch in (b1, b2, b3):
        print(f"{branch.name}: I = {branch.current:.3f} A ({branch.direction.value})")
    print("Coefficient matrix:")
    print(solution.matrix)
    print("Right-hand side:", solution.rhs)


if __name__ == "__main__":
    main()
