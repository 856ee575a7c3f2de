import math
from pathlib import Path

from hwprobe.battery import Battery, get_all_batteries


def _make_battery(root: Path, index: int, **files: str) -> Path:
    directory = root / "sys" / "class" / "power_supply" / f"BAT{index}"
    directory.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        (directory / name).write_text(content)
    return directory


def test_descriptive_values_are_read(tmp_path):
    _make_battery(
        tmp_path,
        0,
        manufacturer="ACME\n",
        model_name="Cell 1\n",
        serial_number="SN-PLACEHOLDER\n",
        technology="Li-ion\n",
    )
    battery = Battery(0, str(tmp_path))
    assert battery.vendor == "ACME"
    assert battery.model == "Cell 1"
    assert battery.serial_number == "SN-PLACEHOLDER"
    assert battery.technology == "Li-ion"


def test_missing_files_give_unknown(tmp_path):
    _make_battery(tmp_path, 0)
    battery = Battery(0, str(tmp_path))
    assert battery.vendor == "<unknown>"
    assert battery.model == "<unknown>"
    assert battery.energy_full == 0
    assert battery.energy_now() == 0
    assert battery.charging() is False


def test_negative_id_gives_unknown(tmp_path):
    battery = Battery(-1, str(tmp_path))
    assert battery.serial_number == "<unknown>"
    assert battery.technology == "<unknown>"
    assert battery.energy_now() == 0
    assert battery.charging() is False


def test_charging_status(tmp_path):
    directory = _make_battery(tmp_path, 0, status="Charging\n")
    battery = Battery(0, str(tmp_path))
    assert battery.charging() is True
    assert battery.discharging() is False
    (directory / "status").write_text("Discharging\n")
    assert battery.charging() is False
    assert battery.discharging() is True


def test_capacity_is_ratio_of_energies(tmp_path):
    _make_battery(tmp_path, 0, energy_now="42000\n", energy_full="84000\n")
    battery = Battery(0, str(tmp_path))
    assert battery.energy_now() == 42000
    assert battery.energy_full == 84000
    assert battery.capacity() == 0.5


def test_capacity_with_zero_full_energy(tmp_path):
    directory = _make_battery(tmp_path, 0, energy_now="0\n", energy_full="0\n")
    battery = Battery(0, str(tmp_path))
    assert str(battery.capacity()) == "nan"
    (directory / "energy_now").write_text("10\n")
    assert battery.capacity() == math.inf


def test_invalid_energy_values_read_as_zero(tmp_path):
    _make_battery(tmp_path, 0, energy_now="n/a\n", energy_full="unknown\n")
    battery = Battery(0, str(tmp_path))
    assert battery.energy_now() == 0
    assert battery.energy_full == 0


def test_values_are_cached_once_read(tmp_path):
    directory = _make_battery(tmp_path, 0, manufacturer="First\n", energy_full="500\n")
    battery = Battery(0, str(tmp_path))
    assert battery.vendor == "First"
    assert battery.energy_full == 500
    (directory / "manufacturer").write_text("Second\n")
    (directory / "energy_full").write_text("900\n")
    assert battery.vendor == "First"
    assert battery.energy_full == 500


def test_empty_value_is_read_again(tmp_path):
    directory = _make_battery(tmp_path, 0, manufacturer="\n")
    battery = Battery(0, str(tmp_path))
    assert battery.vendor == ""
    (directory / "manufacturer").write_text("Later\n")
    assert battery.vendor == "Later"


def test_get_all_batteries_stops_at_gap(tmp_path):
    _make_battery(tmp_path, 0)
    _make_battery(tmp_path, 1)
    _make_battery(tmp_path, 3)
    batteries = get_all_batteries(str(tmp_path))
    assert [battery.id for battery in batteries] == [0, 1]


def test_get_all_batteries_none(tmp_path):
    assert get_all_batteries(str(tmp_path)) == []