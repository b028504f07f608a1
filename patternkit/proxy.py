"""Proxy: a computer that stands in for the machine it controls."""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod


class Machine(ABC):
    """Something that can be booted and started."""

    @abstractmethod
    def boot(self) -> None:
        """Boot the machine."""

    @abstractmethod
    def start(self) -> bool:
        """Start the machine and report whether it started."""


class CarMachine(Machine):
    def boot(self) -> None:
        print("boot the car")

    def start(self) -> bool:
        print("start the car")
        return True


class SmartPhoneMachine(Machine):
    def boot(self) -> None:
        print("boot the smartphone")

    def start(self) -> bool:
        print("start the smartphone")
        return True


class ComputerProxy(Machine):
    """Forwards every request to the machine it controls."""

    def __init__(self, machine: Machine) -> None:
        self.machine = machine

    def boot(self) -> None:
        self.machine.boot()

    def start(self) -> bool:
        return self.machine.start()


def _exercise(label: str, machine: Machine) -> None:
    print(f"Begin {label}")
    computer = ComputerProxy(machine)
    computer.boot()
    computer.start()
    print(f"End {label}")


def demo_car() -> None:
    """Boot and start a car through its computer."""
    _exercise("TestCar", CarMachine())


def demo_smartphone() -> None:
    """Boot and start a smartphone through its computer."""
    _exercise("TestSmartPhone", SmartPhoneMachine())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Drive machines through a proxy.")
    parser.parse_args(argv)
    demo_car()
    demo_smartphone()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())