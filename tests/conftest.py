import pytest

class FakeGPIO:
    """Stands in for the RPi.GPIO module: records writes, reads back levels."""
    BCM = 11; OUT = 0; IN = 1; HIGH = 1; LOW = 0
    def __init__(self):
        self.levels = {}; self.modes = {}; self.writes = []; self.cleaned = []
    def setup(self, pin, mode): self.modes[pin] = mode; self.levels.setdefault(pin, self.LOW)
    def output(self, pin, level): self.writes.append((pin, level)); self.levels[pin] = level
    def input(self, pin): return self.levels[pin]
    def cleanup(self, pin=None): self.cleaned.append(pin)

class FakeSensor:
    def __init__(self, *readings): self.readings = list(readings)
    def read_c(self):
        r = self.readings.pop(0)
        if isinstance(r, Exception): raise r
        return r

@pytest.fixture
def gpio():
    return FakeGPIO()

@pytest.fixture
def thermal(tmp_path):
    p = tmp_path / "temp"
    p.write_text("45000\n")
    return p
