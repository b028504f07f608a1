"""Factory method: a single factory creating humans of a requested race and gender."""

from __future__ import annotations

import argparse
import threading
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import ClassVar

_SEPARATOR = "-----------------------------------------------------------"


class Gender(IntEnum):
    UNKNOWN = 0
    MALE = 1
    FEMALE = 2


class Race(IntEnum):
    UNKNOWN = 0
    WHITE = 1
    YELLOW = 2
    BLACK = 3
    MIXED = 4


class UnsupportedRaceError(ValueError):
    """Raised when the factory cannot create a human of the requested race."""


class Human(ABC):
    """A human with a gender and a race."""

    colour: ClassVar[str] = ""

    def __init__(self, gender: Gender, race: Race) -> None:
        self.gender = gender
        self.race = race

    def _announce(self, activity: str) -> str:
        report = (
            f"here is a {self.colour} human {activity}\n"
            f"the gender is {int(self.gender)}"
        )
        print(report)
        return report

    @abstractmethod
    def walk(self) -> str:
        """Walk about and return the report printed."""

    @abstractmethod
    def eat(self) -> str:
        """Have a meal and return the report printed."""


class WhiteHuman(Human):
    colour = "white"

    def __init__(self, gender: Gender) -> None:
        super().__init__(gender, Race.WHITE)
        print(f"create a white human, the gender is {int(gender)}")

    def walk(self) -> str:
        return self._announce("walking")

    def eat(self) -> str:
        return self._announce("eating")


class YellowHuman(Human):
    colour = "yellow"

    def __init__(self, gender: Gender) -> None:
        super().__init__(gender, Race.YELLOW)
        print(f"create a yellow human, the gender is {int(gender)}")

    def walk(self) -> str:
        return self._announce("walking")

    def eat(self) -> str:
        return self._announce("eating")


class HumanFactory:
    """The shared factory of humans, reached through :meth:`instance`."""

    _instance: ClassVar[HumanFactory | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def instance(cls) -> HumanFactory:
        """Return the shared factory, creating it on first use."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def release_instance(cls) -> None:
        """Drop the shared factory."""
        if cls._instance is not None:
            with cls._lock:
                cls._instance = None

    def create_human(self, gender: Gender, race: Race) -> Human:
        """Create a human of the given race; only white and yellow are supported."""
        try:
            kind = Race(race)
        except ValueError:
            raise UnsupportedRaceError(f"unknown human race:{int(race)}") from None
        if kind is Race.YELLOW:
            return YellowHuman(gender)
        if kind is Race.WHITE:
            return WhiteHuman(gender)
        if kind in (Race.BLACK, Race.MIXED):
            raise UnsupportedRaceError(f"non-support human race:{int(kind)}")
        raise UnsupportedRaceError(f"unknown human race:{int(kind)}")


def _create_batch(factory: HumanFactory, gender: Gender, race: Race) -> None:
    for _ in range(3):
        human = factory.create_human(gender, race)
        human.walk()
        human.eat()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create two days' batches of humans.")
    parser.parse_args(argv)
    factory = HumanFactory.instance()
    print("nuwa creates the first batch of yellow human on the first day")
    _create_batch(factory, Gender.MALE, Race.YELLOW)
    _create_batch(factory, Gender.FEMALE, Race.YELLOW)
    print(_SEPARATOR)
    print("nuwa creates the first batch of white human on the second day")
    _create_batch(factory, Gender.MALE, Race.WHITE)
    _create_batch(factory, Gender.FEMALE, Race.WHITE)
    HumanFactory.release_instance()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())