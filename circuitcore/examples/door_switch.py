"""
Battery, switch and electric door in a single loop.

Circuit:
    Battery (9 V) -> wire -> switch -> door (3 Ω) -> back to battery.

The battery branch and the door branch meet at one node. The door opens when
its current exceeds 1 A; flipping the switch open drops the current to zero
without a recalculation, closing it again triggers one through Circuit.watch.
"""

import logging
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from circuitcore import (
    Branch,
    Circuit,
    Cycle,
    Direction,
    Load,
    Node,
    Source,
    Switch,
    Wire,
    setup_logging,
)


class Door(Load):
    def __init__(self, resistance: float, threshold: float, name: str = "") -> None:
        super().__init__(resistance=resistance, threshold=threshold, name=name)
        self.opened = False

    def on_powered(self) -> None:
        self.opened = True


def main() -> None:
    setup_logging(logging.DEBUG)

    battery = Source(voltage=9.0, polarity=Direction.FORWARD, name="battery")
    door = Door(resistance=3.0, threshold=1.0, name="door")

    supply = Branch([battery, Wire(name="w1")], Direction.FORWARD, name="supply")
    switch = Switch(closed=True, name="s1")
    load = Branch([switch, door], Direction.FORWARD, name="load")
    switch.attach(load)

    circuit = Circuit()
    circuit.add_cycle(Cycle([supply, load], [Direction.FORWARD, Direction.FORWARD], name="main"))
    circuit.add_node(Node(incoming=[supply], outgoing=[load], name="top"))
    circuit.watch(switch)

    circuit.recalculate()
    door.update()
    print(f"I_door = {door.current:.3f} A, door opened: {door.opened}")

    switch.flip(False)
    print(f"Switch open:   I_door = {door.current:.3f} A, load branch {load.direction.value}")

    switch.flip(True)
    print(f"Switch closed: I_door = {door.current:.3f} A, load branch {load.direction.value}")


if __name__ == "__main__":
    main()
