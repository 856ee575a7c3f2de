import sys

from hwprobe.os_info import OSInfo, parse_os_release, read_os

SAMPLE = (
    'NAME="Sample Linux"\n'
    'PRETTY_NAME="Sample Linux 1.2 LTS"\n'
    'VERSION_ID="1.2"\n'
    'VERSION="1.2 LTS (Example)"\n'
    "ID=sample\n"
)


def test_parse_os_release_reads_pretty_name_and_version():
    assert parse_os_release(SAMPLE) == ("Sample Linux 1.2 LTS", "1.2 LTS (Example)")


def test_parse_os_release_ignores_version_id():
    name, version = parse_os_release('VERSION_ID="9"\n')
    assert (name, version) == ("", "")


def test_parse_os_release_last_entry_wins():
    text = 'PRETTY_NAME="First"\nPRETTY_NAME="Second"\n'
    assert parse_os_release(text)[0] == "Second"


def test_parse_os_release_empty_value():
    assert parse_os_release("PRETTY_NAME=\n") == ("", "")


def test_read_os_without_os_release(tmp_path):
    info = read_os(str(tmp_path))
    assert info.name == "Linux"
    assert info.version == "<unknown>"


def test_read_os_with_os_release(tmp_path):
    (tmp_path / "etc").mkdir()
    (tmp_path / "etc" / "os-release").write_text(SAMPLE)
    info = read_os(str(tmp_path))
    assert info.name == "Sample Linux 1.2 LTS"
    assert info.version == "1.2 LTS (Example)"


def test_read_os_detects_64bit_loader(tmp_path):
    (tmp_path / "lib64").mkdir()
    (tmp_path / "lib64" / "ld-linux-x86-64.so.2").write_text("")
    info = read_os(str(tmp_path))
    assert info.is_64bit is True
    assert info.is_32bit is False


def test_read_os_without_loader_is_32bit(tmp_path):
    info = read_os(str(tmp_path))
    assert info.is_64bit is False
    assert info.is_32bit is True


def test_endianness_matches_interpreter(tmp_path):
    info = read_os(str(tmp_path))
    assert info.is_little_endian == (sys.byteorder == "little")
    assert info.is_big_endian == (not info.is_little_endian)


def test_osinfo_is_frozen():
    info = OSInfo("a", "b", "c", False, True, False, True)
    try:
        info.name = "x"
    except AttributeError:
        changed = False
    else:
        changed = True
    assert changed is False
    assert info.name == "a"