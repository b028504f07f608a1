"""Adapter: charging a 5 V device from a 220 V socket, by inheritance or by composition."""

import argparse
from abc import ABC, abstractmethod


class ChargeInterface(ABC):
    """Something a device can draw a 5 V charge from."""

    @abstractmethod
    def charge_5v(self) -> int:
        """Charge the device and return the voltage delivered."""


class Socket:
    """A mains socket."""

    voltage = 220

    def output(self) -> int:
        print(f"output {self.voltage}v")
        return self.voltage


class InheritingAdapter(ChargeInterface, Socket):
    """An adapter that is itself a socket with its output overridden."""

    def output(self) -> int:
        print("output 5v")
        return 5

    def charge_5v(self) -> int:
        return _report_charge(self.output())


class SocketAdapter(ChargeInterface):
    """An adapter that wraps a socket and steps its voltage down."""

    def __init__(self) -> None:
        self.socket = Socket()

    def charge_5v(self) -> int:
        return _report_charge(self.socket.output() // 44)


def _report_charge(voltage: int) -> int:
    print(f"charge input:{voltage}V")
    return voltage


class Client:
    """A device that charges through any adapter."""

    def charge(self, adapter: ChargeInterface) -> int:
        return adapter.charge_5v()


_ADAPTERS = {"class": InheritingAdapter, "object": SocketAdapter}


def main(argv: list[str] | None = None) -> int:
    """Charge through the chosen adapter style, or through both."""
    parser = argparse.ArgumentParser(description="Charge a device through an adapter.")
    parser.add_argument(
        "variant",
        nargs="?",
        choices=sorted(_ADAPTERS),
        help="adapter style to use; both are run when omitted",
    )
    args = parser.parse_args(argv)
    client = Client()
    for variant in [args.variant] if args.variant else ["class", "object"]:
        client.charge(_ADAPTERS[variant]())
    return 0