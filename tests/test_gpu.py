import os

import pytest

from hwprobe import gpu
from hwprobe.pcimapper import PCIMapper

PCI_IDS = "# comment\n8086  Intel Corporation\n\t3e92  UHD Graphics 630\n"


def _write(path, text):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as stream:
        stream.write(text)


def _card(root, index):
    return os.path.join(str(root), "sys", "class", "drm", f"card{index}")


def _make_card(root, index, vendor_id="0x8086", device_id="0x3e92"):
    card = _card(root, index)
    _write(os.path.join(card, "device", "vendor"), vendor_id + "\n")
    _write(os.path.join(card, "device", "device"), device_id + "\n")
    return card


def test_read_drm_first_line(tmp_path):
    path = os.path.join(str(tmp_path), "value")
    _write(path, "first\nsecond\n")
    assert gpu.read_drm(path) == "first"


def test_read_drm_missing(tmp_path):
    assert gpu.read_drm(os.path.join(str(tmp_path), "nothing")) == ""


def test_frequencies_all_present(tmp_path):
    card = str(tmp_path)
    _write(os.path.join(card, "gt_min_freq_mhz"), "350\n")
    _write(os.path.join(card, "gt_cur_freq_mhz"), "600\n")
    _write(os.path.join(card, "gt_max_freq_mhz"), "1150\n")
    assert gpu.frequencies(card) == [350, 600, 1150]


def test_frequencies_missing_mark_first_slot(tmp_path):
    card = str(tmp_path)
    _write(os.path.join(card, "gt_max_freq_mhz"), "900\n")
    result = gpu.frequencies(card)
    assert result[0] == -1
    assert result[2] == 900


def test_get_all_gpus_resolves_names(tmp_path):
    card = _make_card(tmp_path, 0)
    _write(os.path.join(card, "gt_max_freq_mhz"), "1150\n")

    gpus = gpu.get_all_gpus(str(tmp_path), PCIMapper(PCI_IDS))

    assert len(gpus) == 1
    found = gpus[0]
    assert found.vendor == "Intel Corporation"
    assert found.name == "UHD Graphics 630"
    assert found.vendor_id == "0x8086"
    assert found.device_id == "0x3e92"
    assert found.frequency_mhz == 1150
    assert found.id == 0


def test_get_all_gpus_skips_gap_below_three(tmp_path):
    _make_card(tmp_path, 1)
    gpus = gpu.get_all_gpus(str(tmp_path), PCIMapper(PCI_IDS))
    assert [g.id for g in gpus] == [1]


def test_get_all_gpus_stops_after_missing_card_above_two(tmp_path):
    _make_card(tmp_path, 4)
    assert gpu.get_all_gpus(str(tmp_path), PCIMapper(PCI_IDS)) == []


def test_get_all_gpus_unknown_ids_are_invalid(tmp_path):
    _make_card(tmp_path, 0, vendor_id="0xffff", device_id="0x0001")
    gpus = gpu.get_all_gpus(str(tmp_path), PCIMapper(PCI_IDS))
    assert gpus[0].vendor == "invalid"
    assert gpus[0].name == "invalid"


@pytest.mark.parametrize("missing", ["vendor", "device"])
def test_get_all_gpus_skips_cards_without_ids(tmp_path, missing):
    card = _make_card(tmp_path, 0)
    _write(os.path.join(card, "device", missing), "")
    assert gpu.get_all_gpus(str(tmp_path), PCIMapper(PCI_IDS)) == []