# tests/test_bluez.py
"""
Testes das implementações de enumeração Bluetooth.

SysfsBluetooth é exercitado sobre árvores falsas em `tmp_path`.
"""

from pathlib import Path

from bluetuith.bluez import Adapter, Bluetooth, Device, StaticBluetooth, SysfsBluetooth


def test_adapter_base_is_last_path_segment():
    assert Adapter(name="x", path="/org/bluez/hci3").base == "hci3"
    assert Adapter(name="x", path="/org/bluez/hci3/").base == "hci3"


def test_static_default_adapter_and_devices():
    hci0 = Adapter(name="a", path="/org/bluez/hci0")
    bt = StaticBluetooth(adapters=[hci0], devices={"hci0": [Device("AA:BB:CC:DD:EE:FF")]})

    assert isinstance(bt, Bluetooth)
    assert bt.get_devices() == []

    bt.set_current_adapter()
    assert bt.get_current_adapter() == hci0
    assert [d.address for d in bt.get_devices()] == ["AA:BB:CC:DD:EE:FF"]


def test_static_without_adapters_has_no_current():
    bt = StaticBluetooth()
    bt.set_current_adapter()
    assert bt.get_current_adapter() is None


def _fake_tree(tmp_path: Path):
    sysfs = tmp_path / "sys"
    for entry in ("hci1", "hci0", "rfkill0"):
        (sysfs / entry).mkdir(parents=True)
    (sysfs / "hci0" / "name").write_text("laptop\n", encoding="utf-8")

    storage = tmp_path / "lib"
    (storage / "00:11:22:33:44:55" / "AA:BB:CC:DD:EE:FF").mkdir(parents=True)
    (storage / "00:11:22:33:44:55" / "cache").mkdir()
    (storage / "66:77:88:99:AA:BB" / "11:22:33:44:55:66").mkdir(parents=True)
    return sysfs, storage


def test_sysfs_adapters(tmp_path: Path):
    sysfs, storage = _fake_tree(tmp_path)
    bt = SysfsBluetooth(sysfs_root=sysfs, storage_root=storage)

    adapters = bt.get_adapters()

    assert [a.base for a in adapters] == ["hci0", "hci1"]
    assert adapters[0].name == "laptop"
    assert adapters[1].name == "hci1"


def test_sysfs_devices_require_current_adapter(tmp_path: Path):
    sysfs, storage = _fake_tree(tmp_path)
    bt = SysfsBluetooth(sysfs_root=sysfs, storage_root=storage)

    assert bt.get_devices() == []

    bt.set_current_adapter()
    assert [d.address for d in bt.get_devices()] == ["AA:BB:CC:DD:EE:FF", "11:22:33:44:55:66"]


def test_sysfs_missing_roots(tmp_path: Path):
    bt = SysfsBluetooth(sysfs_root=tmp_path / "absent", storage_root=tmp_path / "absent")

    bt.set_current_adapter()
    assert bt.get_adapters() == []
    assert bt.get_current_adapter() is None
    assert bt.get_devices() == []
