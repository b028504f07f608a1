"""Abstract factory: car makers that each build a family of electric and oil cars."""

from abc import ABC, abstractmethod
from typing import ClassVar, TypeVar

_SEPARATOR = "--------------------------------------"

_C = TypeVar("_C", bound="Car")


def _say(text: str) -> str:
    print(text)
    return text


class Car(ABC):
    """A car of some brand that can be run and stopped."""

    def __init__(self, brand: str) -> None:
        self.brand = brand

    @abstractmethod
    def run(self) -> str:
        """Start driving the car and return the line reported."""

    @abstractmethod
    def stop(self) -> str:
        """Bring the car to a halt and return the line reported."""


class ElectricCar(Car):
    """A battery-powered car; capacity is in kWh."""

    def __init__(self, brand: str, battery_capacity: int = 0) -> None:
        super().__init__(brand)
        self.battery_capacity = battery_capacity

    def run(self) -> str:
        return _say(f"a electric car{{{self.brand}}} is running")

    def stop(self) -> str:
        return _say(f"a electric car{{{self.brand}}} stopped")


class OilCar(Car):
    """A fuel-powered car; tank capacity is in litres."""

    def __init__(self, brand: str, tank_capacity: float = 0.0) -> None:
        super().__init__(brand)
        self.tank_capacity = tank_capacity

    def run(self) -> str:
        return _say(f"a oil car{{{self.brand}}} is running")

    def stop(self) -> str:
        return _say(f"a oil car{{{self.brand}}} stopped")


class BydElectricCar(ElectricCar):
    def __init__(self) -> None:
        super().__init__("BYD")

    def run(self) -> str:
        return _say("a BYD is running")

    def stop(self) -> str:
        return _say("a BYD stoppped")


class BydOilCar(OilCar):
    def __init__(self) -> None:
        super().__init__("HongQi")

    def run(self) -> str:
        return _say("a BYD is running")

    def stop(self) -> str:
        return _say("a BYD stopped")


class TeslaElectricCar(ElectricCar):
    def __init__(self) -> None:
        super().__init__("Tesla")

    def run(self) -> str:
        return _say("a Tesla is running")

    def stop(self) -> str:
        return _say("a Tesla stopped")


class TeslaOilCar(OilCar):
    def __init__(self) -> None:
        super().__init__("Tesla")

    def run(self) -> str:
        return _say("a Tesla is running")

    def stop(self) -> str:
        return _say("a Tesla stopped")


class CarFactory(ABC):
    """A car maker producing one electric and one oil model.

    Each concrete factory is a singleton reached through :meth:`instance`.
    """

    _instances: ClassVar[dict[type, "CarFactory"]] = {}

    def __init__(self, owner: str) -> None:
        self.owner = owner

    @classmethod
    def instance(cls) -> "CarFactory":
        """Return the shared factory of this class, creating it if needed."""
        factory = CarFactory._instances.get(cls)
        if factory is None:
            factory = cls()
            CarFactory._instances[cls] = factory
        return factory

    @classmethod
    def release_instance(cls) -> None:
        """Drop the shared factory of this class."""
        CarFactory._instances.pop(cls, None)

    @staticmethod
    def _assemble(kind: str, make, closing: str = "") -> _C:
        print(f"start create a new {kind} car")
        car = make()
        print(f"finish create a new {kind} car{closing}")
        return car

    @abstractmethod
    def create_electric_car(self) -> ElectricCar:
        """Build an electric car."""

    @abstractmethod
    def create_oil_car(self) -> OilCar:
        """Build an oil car."""


def _electric(car_class: type[ElectricCar], capacity: int):
    def make() -> ElectricCar:
        car = car_class()
        car.battery_capacity = capacity
        return car

    return make


def _oil(car_class: type[OilCar], capacity: float):
    def make() -> OilCar:
        car = car_class()
        car.tank_capacity = capacity
        return car

    return make


class BydCarFactory(CarFactory):
    def __init__(self) -> None:
        super().__init__("BYD")

    def create_electric_car(self) -> ElectricCar:
        return self._assemble("electric", _electric(BydElectricCar, 80))

    def create_oil_car(self) -> OilCar:
        return self._assemble("oil", _oil(BydOilCar, 52.0), ";")


class TeslaCarFactory(CarFactory):
    def __init__(self) -> None:
        super().__init__("Tesla")

    def create_electric_car(self) -> ElectricCar:
        return self._assemble("electric", _electric(TeslaElectricCar, 78))

    def create_oil_car(self) -> OilCar:
        return self._assemble("oil", _oil(TeslaOilCar, 48.7))


def _exercise(factory_class: type[CarFactory]) -> None:
    factory = factory_class.instance()
    for car in (factory.create_electric_car(), factory.create_oil_car()):
        car.run()
        car.stop()
    factory_class.release_instance()


def demo_byd() -> None:
    """Build, run and stop one car of each kind from the BYD factory."""
    _exercise(BydCarFactory)


def demo_tesla() -> None:
    """Build, run and stop one car of each kind from the Tesla factory."""
    _exercise(TeslaCarFactory)


def main(argv: list[str] | None = None) -> int:
    """Run both factory demonstrations; takes no arguments."""
    demo_byd()
    print(_SEPARATOR)
    demo_tesla()
    return 0