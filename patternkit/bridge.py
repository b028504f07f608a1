"""Bridge: phones of different makes driving a shared Bluetooth implementation."""

from abc import ABC, abstractmethod

_SEPARATOR = "**************************"


class BluetoothInterface(ABC):
    """The implementation side of the bridge: a Bluetooth radio."""

    @abstractmethod
    def connect(self) -> str:
        """Open a Bluetooth connection."""

    @abstractmethod
    def disconnect(self) -> str:
        """Close the Bluetooth connection."""


class Bluetooth(BluetoothInterface):
    """A plain Bluetooth radio that reports what it does and returns the report."""

    def _state(self, word: str) -> str:
        line = f"Bluetooth {word}"
        print(line)
        return line

    def connect(self) -> str:
        return self._state("connected")

    def disconnect(self) -> str:
        return self._state("disconnect")


class Phone(ABC):
    """The abstraction side of the bridge: a phone holding a Bluetooth radio."""

    def __init__(self, bluetooth: BluetoothInterface) -> None:
        self.bluetooth = bluetooth

    def _exercise_radio(self, make: str) -> None:
        print(f"{make} phone tests bluetooth function")
        self.bluetooth.connect()
        self.bluetooth.disconnect()

    @abstractmethod
    def test_bluetooth_function(self) -> None:
        """Exercise the phone's Bluetooth radio."""


class HWPhone(Phone):
    def test_bluetooth_function(self) -> None:
        self._exercise_radio("HW")


class XMPhone(Phone):
    def test_bluetooth_function(self) -> None:
        self._exercise_radio("XM")


def main(argv: list[str] | None = None) -> int:
    """Let two phone makes test one Bluetooth radio; takes no arguments."""
    bluetooth = Bluetooth()
    HWPhone(bluetooth).test_bluetooth_function()
    print(_SEPARATOR)
    XMPhone(bluetooth).test_bluetooth_function()
    return 0