import pytest
from pifan.errors import SensorError
from pifan.sensors import ThermalZoneSensor, parse_millidegrees

@pytest.mark.parametrize("text,expected", [
    ("45000\n", 45), ("45000", 45), ("45999\n", 45), ("999", 0),
    ("-1500\n", -1), ("+72000", 72),
])
def test_parse_millidegrees(text, expected):
    assert parse_millidegrees(text) == expected

@pytest.mark.parametrize("text", ["", "\n", "abc", "45.5", " 45000", "45000 \n", "4_5000"])
def test_parse_rejects_non_integers(text):
    with pytest.raises(SensorError):
        parse_millidegrees(text)

def test_thermal_zone_reads_fresh_each_time(thermal):
    s = ThermalZoneSensor(str(thermal))
    assert s.read_c() == 45
    thermal.write_text("71234\n")
    assert s.read_c() == 71

def test_missing_thermal_file(tmp_path):
    with pytest.raises(SensorError):
        ThermalZoneSensor(str(tmp_path / "nope")).read_c()
