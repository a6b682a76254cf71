import re
from pathlib import Path
from pifan.errors import SensorError

_INT = re.compile(r"[+-]?[0-9]+")

def parse_millidegrees(text: str) -> int:
    """Whole degrees C from a millidegree string, truncated toward zero."""
    raw = text.replace("\n", "")
    if not _INT.fullmatch(raw):
        raise SensorError(f"invalid thermal value: {text!r}")
    milli = int(raw)
    deg = abs(milli) // 1000
    return -deg if milli < 0 else deg

class TemperatureSensor:
    def read_c(self) -> int: raise NotImplementedError

class ThermalZoneSensor(TemperatureSensor):
    def __init__(self, path: str):
        self.path = Path(path)
    def read_c(self) -> int:
        try:
            text = self.path.read_text()
        except (OSError, UnicodeDecodeError) as e:
            raise SensorError(f"cannot read {self.path}: {e}") from e
        return parse_millidegrees(text)
