"""Flyweight: car registrations sharing the brand, model and colour they have in common."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class SharedState:
    """The part of a car's record that many cars share."""

    brand: str
    model: str
    color: str

    def __str__(self) -> str:
        return f"[{self.brand},{self.model},{self.color}]"


@dataclass(frozen=True)
class UniqueState:
    """The part of a car's record that belongs to that car alone."""

    owner: str
    plates: str

    def __str__(self) -> str:
        return f"[{self.owner},{self.plates}]"


class Flyweight:
    """Holds one shared state and combines it with unique states on demand."""

    def __init__(self, shared_state: SharedState) -> None:
        self.shared_state = shared_state

    def operation(self, unique_state: UniqueState) -> None:
        print(
            f"Flyweight display shared({self.shared_state}) "
            f"and unique({unique_state}) state"
        )


class FlyweightFactory:
    """The shared cache of flyweights, reached through :meth:`instance`."""

    _instance: ClassVar[FlyweightFactory | None] = None

    def __init__(self) -> None:
        self._cache: dict[str, Flyweight] = {}

    @classmethod
    def instance(cls) -> FlyweightFactory:
        """Return the shared factory, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @staticmethod
    def _key(state: SharedState) -> str:
        return f"{state.brand}_{state.model}_{state.color}"

    def get_flyweight(self, state: SharedState) -> Flyweight:
        """Return the flyweight for a shared state, creating it if none exists yet."""
        key = self._key(state)
        flyweight = self._cache.get(key)
        if flyweight is None:
            print("FlyweightFactory.GetFlyweight: Can't find a flyweight, creating new one.")
            flyweight = Flyweight(state)
            self._cache[key] = flyweight
        else:
            print("FlyweightFactory.GetFlyweight: Reusing existing flyweight.")
        return flyweight


def register_car(plates: str, owner: str, brand: str, model: str, color: str) -> None:
    """Record a car, reusing the flyweight for its brand, model and colour."""
    print("RegisterCarToDataBase")
    shared = SharedState(brand, model, color)
    unique = UniqueState(owner, plates)
    FlyweightFactory.instance().get_flyweight(shared).operation(unique)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Register three cars.")
    parser.parse_args(argv)
    register_car("TEST-0001", "Alice", "HongQi", "X1", "Black")
    register_car("TEST-0002", "Bob", "Benz", "CLA200", "Gray")
    register_car("TEST-0003", "Carol", "HongQi", "X1", "Black")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())