"""Builder: a director assembling fast-food meals step by step."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Meal:
    """A meal of a burger, fries and a drink."""

    burger: str = ""
    fries: str = ""
    drink: str = ""

    def __str__(self) -> str:
        return f"{self.burger},{self.fries},{self.drink}"


class MealBuilder(ABC):
    """Fills in the parts of one meal."""

    def __init__(self) -> None:
        self._meal = Meal()

    @abstractmethod
    def build_burger(self) -> None:
        """Choose the burger."""

    @abstractmethod
    def build_fries(self) -> None:
        """Choose the fries."""

    @abstractmethod
    def build_drink(self) -> None:
        """Choose the drink."""

    @property
    def meal(self) -> Meal:
        """The meal being built."""
        return self._meal


class ChickenBurgerMealBuilder(MealBuilder):
    def build_burger(self) -> None:
        self._meal.burger = "Chicken Burder"

    def build_fries(self) -> None:
        self._meal.fries = "Large Fires"

    def build_drink(self) -> None:
        self._meal.drink = "Large Orange Juice"


class BeefBurgerMealBuilder(MealBuilder):
    def build_burger(self) -> None:
        self._meal.burger = "Beef Burder"

    def build_fries(self) -> None:
        self._meal.fries = "Middle Fires"

    def build_drink(self) -> None:
        self._meal.drink = "Middle Cola"


class MealDirector:
    """Runs a builder through the steps of a meal in a fixed order."""

    def __init__(self, builder: MealBuilder) -> None:
        self.builder = builder

    def construct_meal(self) -> Meal:
        for step in (
            self.builder.build_burger,
            self.builder.build_fries,
            self.builder.build_drink,
        ):
            step()
        meal = self.builder.meal
        print(f"Construct Meal:{meal}")
        return meal


def main(argv: list[str] | None = None) -> int:
    """Assemble a chicken meal and then a beef meal; takes no arguments."""
    director = MealDirector(ChickenBurgerMealBuilder())
    director.construct_meal()
    director.builder = BeefBurgerMealBuilder()
    director.construct_meal()
    return 0