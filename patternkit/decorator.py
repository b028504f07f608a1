"""Decorator: wrapping a component to add behaviour around its operation."""

from abc import ABC, abstractmethod


class Component(ABC):
    """Something that performs an operation."""

    @abstractmethod
    def operation(self) -> None:
        """Perform the component's operation."""


class ConcreteComponent(Component):
    """The plain component being decorated."""

    def operation(self) -> None:
        print("concrete component operation")


class ComponentDecorator(Component):
    """A component that forwards its operation to the component it wraps."""

    def __init__(self, component: Component) -> None:
        self.component = component

    def operation(self) -> None:
        self.component.operation()


class ConcreteComponentDecorator(ComponentDecorator):
    """A decorator that runs extra behaviour before the wrapped operation."""

    behavior = "AddedBehavior"

    def operation(self) -> None:
        self.added_behavior()
        super().operation()

    def added_behavior(self) -> str:
        """Report the extra behaviour and return the line reported."""
        line = f"do {self.behavior}"
        print(line)
        return line


def main(argv: list[str] | None = None) -> int:
    """Run a decorated component; takes no arguments."""
    ConcreteComponentDecorator(ConcreteComponent()).operation()
    return 0