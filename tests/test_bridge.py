import pytest

from patternkit.bridge import (
    Bluetooth,
    BluetoothInterface,
    HWPhone,
    Phone,
    XMPhone,
    main,
)


class _RecordingBluetooth(BluetoothInterface):
    def __init__(self):
        self.calls = []

    def connect(self):
        self.calls.append("connect")
        return "connect"

    def disconnect(self):
        self.calls.append("disconnect")
        return "disconnect"


def test_bluetooth_reports_and_returns(capsys):
    radio = Bluetooth()
    returned = [radio.connect(), radio.disconnect()]
    assert returned == ["Bluetooth connected", "Bluetooth disconnect"]
    assert capsys.readouterr().out.splitlines() == returned


@pytest.mark.parametrize(
    "phone_class, banner",
    [
        (HWPhone, "HW phone tests bluetooth function"),
        (XMPhone, "XM phone tests bluetooth function"),
    ],
)
def test_phone_drives_its_radio(capsys, phone_class, banner):
    radio = _RecordingBluetooth()
    phone_class(radio).test_bluetooth_function()
    assert radio.calls == ["connect", "disconnect"]
    assert capsys.readouterr().out.splitlines() == [banner]


def test_phones_share_one_radio():
    radio = _RecordingBluetooth()
    phones = [HWPhone(radio), XMPhone(radio)]
    for phone in phones:
        phone.test_bluetooth_function()
    assert phones[0].bluetooth is phones[1].bluetooth
    assert radio.calls == ["connect", "disconnect"] * 2


@pytest.mark.parametrize("build", [BluetoothInterface, lambda: Phone(Bluetooth())])
def test_abstract_classes_cannot_be_built(build):
    with pytest.raises(TypeError):
        build()


def test_main_output(capsys):
    assert main([]) == 0
    radio_lines = ["Bluetooth connected", "Bluetooth disconnect"]
    assert capsys.readouterr().out.splitlines() == [
        "HW phone tests bluetooth function",
        *radio_lines,
        "**************************",
        "XM phone tests bluetooth function",
        *radio_lines,
    ]