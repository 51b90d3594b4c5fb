import pytest

from circuitcore import Conductor, Direction, Load, OverloadLoad, Resistor, Source, Wire


def test_direction_reversed():
    assert Direction.FORWARD.reversed() is Direction.BACKWARD
    assert Direction.BACKWARD.reversed() is Direction.FORWARD
    assert Direction.OPEN.reversed() is Direction.OPEN


def test_conductor_defaults_and_validation():
    c = Conductor(resistance=2.5)
    assert c.current == 0.0
    assert c.resistance == 2.5
    assert Wire().resistance == 0.0
    with pytest.raises(ValueError):
        Resistor(-1.0)


def test_source_exposes_voltage_and_polarity():
    s = Source(voltage=-4.0, polarity=Direction.BACKWARD)
    assert s.voltage == -4.0
    assert s.polarity is Direction.BACKWARD
    with pytest.raises(ValueError):
        Source(voltage=1.0, polarity=Direction.OPEN)


def test_observers_are_called_in_registration_order():
    c = Resistor(1.0)
    calls = []
    c.subscribe(lambda cond: calls.append(("first", cond.current)))
    c.subscribe(lambda cond: calls.append(("second", cond.current)))
    c.set_current(2.0)
    assert calls == [("first", 2.0), ("second", 2.0)]


def test_unsubscribe_stops_notifications():
    c = Resistor(1.0)
    calls = []
    observer = calls.append
    c.subscribe(observer)
    c.unsubscribe(observer)
    c.set_current(1.0)
    assert calls == []


def test_load_threshold():
    hits = []

    class Lamp(Load):
        def on_powered(self):
            hits.append(self.current)

    lamp = Lamp(resistance=1.0, threshold=0.5)
    assert lamp.update() is False
    lamp.set_current(0.5)
    assert not lamp.is_powered
    lamp.set_current(0.6)
    assert lamp.update() is True
    assert hits == [0.6]


def test_overload_load_window():
    door = OverloadLoad(resistance=1.0, threshold=1.0, overload_current=5.0)
    door.set_current(3.0)
    assert door.is_powered
    door.set_current(6.0)
    assert door.is_overloaded
    assert not door.is_powered
    with pytest.raises(ValueError):
        OverloadLoad(threshold=2.0, overload_current=1.0)
