"""Strategy: a context carrying a plan that can be swapped for another."""

from abc import ABC, abstractmethod


class Strategy(ABC):
    """A plan of action."""

    @abstractmethod
    def operate(self) -> str:
        """Carry out the plan and return the line reported."""


class BackDoor(Strategy):
    def operate(self) -> str:
        return _announce("Go the backdoor")


class GivenGreenLight(Strategy):
    def operate(self) -> str:
        return _announce("Ask for a green light")


def _announce(line: str) -> str:
    print(line)
    return line


class Context:
    """Holds a strategy and runs it when opened."""

    def __init__(self, strategy: Strategy | None) -> None:
        self.strategy = strategy

    def open(self) -> str:
        """Run the held strategy, or report that there is none."""
        if self.strategy is None:
            return _announce("An empty context")
        return self.strategy.operate()


_APPOINTMENTS = (("first", BackDoor), ("second", GivenGreenLight))


def main(argv: list[str] | None = None) -> int:
    """Open two contexts with different plans; takes no arguments."""
    for place, strategy in _APPOINTMENTS:
        print(f"Here is the {place} appointment place")
        Context(strategy()).open()
    return 0