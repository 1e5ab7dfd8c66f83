import threading

from hexcolony.coordinate import Coordinate
from hexcolony.fow import FOW, Uncover


class Recorder:
    def __init__(self):
        self.events = []
        self.lock = threading.Lock()

    def notify(self, event):
        with self.lock:
            self.events.append(event)


def test_initially_covered():
    fow = FOW(4, 4)
    assert fow.get(Coordinate(0, 0)) is False


def test_set_and_unset():
    fow = FOW()
    fow.set(Coordinate(1, 2), True)
    assert fow.get(Coordinate(1, 2)) is True
    fow.set(Coordinate(1, 2), False)
    assert fow.get(Coordinate(1, 2)) is False


def test_set_publishes_uncover():
    fow = FOW()
    recorder = Recorder()
    fow.observers.register(recorder)
    fow.set(Coordinate(3, -1), True)
    assert fow.observers.flush(5)
    assert recorder.events == [Uncover((Coordinate(3, -1),))]


def test_fill_publishes_one_event():
    fow = FOW()
    recorder = Recorder()
    fow.observers.register(recorder)
    area = Coordinate(0, 0).circle(2)
    fow.fill(area, True)
    assert fow.observers.flush(5)
    assert len(recorder.events) == 1
    assert set(recorder.events[0].coordinates) == area
    assert all(fow.get(c) for c in area)


def test_minimap_reflects_uncovered():
    fow = FOW(4, 4)
    assert fow.minimap(4, 4) == [False] * 16
    fow.fill(Coordinate(0, 0).circle(10), True)
    assert fow.minimap(4, 4) == [True] * 16